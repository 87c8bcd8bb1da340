"""Dense neural networks with flat genomes, a simple genetic algorithm, and a price-direction problem."""

__version__ = "1.0.0"