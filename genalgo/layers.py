"""Dense layer with a row-major weight matrix and per-output bias."""

from __future__ import annotations

import random
import struct
from typing import Iterable

from genalgo.activations import Activation, activation_fn, softmax

_rng = random.Random()
_ITEM_SIZE = struct.calcsize("d")


def random_value() -> float:
    """Return a uniformly distributed value in [-1, 1]."""
    return _rng.uniform(-1.0, 1.0)


def _fmt(value: float) -> str:
    return f"{value:g}"


class DenseLayer:
    """Weights of shape (rows, cols) stored row-major, and ``cols`` biases."""

    def __init__(self, rows: int, cols: int, activation: Activation = Activation.RELU):
        if rows < 0 or cols < 0:
            raise ValueError("Layer dimensions must be non-negative")
        self.rows = rows
        self.cols = cols
        self.activation = activation
        self.data: list[float] = [0.0] * (rows * cols)
        self.bias: list[float] = [0.0] * cols
        self.randomize()

    def _offset(self, key: tuple[int, int]) -> int:
        r, c = key
        if not (0 <= r < self.rows and 0 <= c < self.cols):
            raise IndexError(f"weight index ({r}, {c}) out of range for {self.rows} x {self.cols}")
        return r * self.cols + c

    def __getitem__(self, key: tuple[int, int]) -> float:
        return self.data[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self.data[self._offset(key)] = value

    def randomize(self) -> None:
        """Refill weights and biases with random values in [-1, 1]."""
        self.data = [random_value() for _ in self.data]
        self.bias = [random_value() for _ in self.bias]

    def apply_activation(self, values: Iterable[float]) -> list[float]:
        """Return ``values`` passed through this layer's activation."""
        if self.activation is Activation.SOFTMAX:
            return softmax(values)
        return [activation_fn(self.activation, v) for v in values]

    def propagate(self, inputs: list[float]) -> list[float]:
        """Compute ``activation(inputs @ W + bias)``."""
        pre = [
            sum(x * w for x, w in zip(inputs, self.data[j :: self.cols])) + b
            for j, b in enumerate(self.bias)
        ] if self.cols else []
        return self.apply_activation(pre) if pre else pre

    def memory_usage_report(self) -> str:
        """Describe the memory taken by weights and biases."""
        return (
            f"Type size: {_ITEM_SIZE} bytes\n"
            f"Matrix memory: {len(self.data) * _ITEM_SIZE} bytes\n"
            f"Bias memory:   {len(self.bias) * _ITEM_SIZE} bytes\n"
        )

    def weights_report(self) -> str:
        """Render the weight matrix row by row, followed by the biases."""
        lines = [
            "".join(f"{_fmt(w)} " for w in self.data[r * self.cols : (r + 1) * self.cols]) + "\n"
            for r in range(self.rows)
        ]
        bias_line = "bias: " + "".join(f"{_fmt(b)} " for b in self.bias) + "\n\n"
        return "".join(lines) + bias_line