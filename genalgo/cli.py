"""Command-line demonstration: build a network, run it and round-trip its genome."""

from __future__ import annotations

import argparse
from typing import Sequence

from genalgo.activations import Activation
from genalgo.network import NeuralNetwork


def main(argv: Sequence[str] | None = None) -> int:
    """Build a 3-4-4-2 network, run a forward pass and mutate its genome."""
    parser = argparse.ArgumentParser(
        prog="genalgo",
        description="Demonstrate a forward pass and a genome round trip.",
    )
    parser.parse_args(argv)

    network = NeuralNetwork(
        3,
        2,
        [4, 4],
        [Activation.RELU, Activation.TANH],
        Activation.SOFTMAX,
    )

    print(network.architecture(), end="")
    print(network.architecture_detail(), end="")

    output = network.forward([0.5, -0.3, 1.2])
    print("\nForward pass output: " + "".join(f"{v:g} " for v in output))

    genome = network.to_genome()
    print(f"Genome size: {len(genome)} weights")

    genome[0] += 0.1
    network.load_genome(genome)
    print("Mutation applied and loaded back OK.")

    print(network.architecture_detail(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())