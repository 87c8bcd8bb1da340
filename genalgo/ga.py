"""A simple genetic algorithm that culls below-average networks and replaces them."""

from __future__ import annotations

import math
from typing import Sequence

from genalgo.activations import Activation
from genalgo.network import NeuralNetwork
from genalgo.price_direction import StockPrice

_ROUNDS = 3
_EPS = 1e-7
_SEPARATOR = "\n" + "=" * 48 + "\n"


def initialize_population(
    candidates: int,
    input_len: int,
    output_len: int,
    layers_dim: Sequence[int],
    layers_activations: Sequence[Activation],
    output_activation: Activation,
) -> list[NeuralNetwork]:
    """Create ``candidates`` freshly randomised networks of the same shape."""
    if candidates < 0:
        raise ValueError("Number of candidates must be non-negative")
    return [
        NeuralNetwork(input_len, output_len, layers_dim, layers_activations, output_activation)
        for _ in range(candidates)
    ]


def evaluate_fitness(network: NeuralNetwork, data: Sequence[StockPrice]) -> float:
    """Negated mean binary cross-entropy of the first output; higher is better."""
    if not data:
        raise ValueError("Cannot evaluate fitness on an empty dataset")
    total_loss = 0.0
    for sample in data:
        p = network.forward(sample.to_features())[0]
        y = 1.0 if sample.direction else 0.0
        p = min(max(p, _EPS), 1.0 - _EPS)
        total_loss += -(y * math.log(p) + (1.0 - y) * math.log(1.0 - p))
    return -(total_loss / len(data))


def run(
    candidates: int,
    input_len: int,
    output_len: int,
    layers_dim: Sequence[int],
    layers_activations: Sequence[Activation],
    output_activation: Activation,
    data: Sequence[StockPrice],
) -> list[NeuralNetwork]:
    """Evolve a population for a fixed number of rounds, reporting progress on stdout.

    Returns the population left after the last round.
    """
    if candidates < 1:
        raise ValueError("At least one candidate is required")

    def spawn(count: int) -> list[NeuralNetwork]:
        return initialize_population(
            count, input_len, output_len, layers_dim, layers_activations, output_activation
        )

    population = spawn(candidates)

    for _ in range(_ROUNDS):
        scores = [evaluate_fitness(network, data) for network in population]

        for i, score in enumerate(scores, start=1):
            print(f"Candidate {i} - Fitness: {score:g}")
        mean = sum(scores) / len(scores)
        print(f"Scores mean: {mean:g}")

        survivors = [net for net, score in zip(population, scores) if score >= mean]
        removed = len(population) - len(survivors)
        print(f"Removed {removed} candidates, replenishing...")

        population = survivors + spawn(removed)
        print(_SEPARATOR)

    return population