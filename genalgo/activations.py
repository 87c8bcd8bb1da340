"""Activation functions used by the dense layers."""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import Iterable


class Activation(Enum):
    """Element-wise (or, for softmax, vector-wide) activation functions."""

    LINEAR = auto()
    RELU = auto()
    LEAKY_RELU = auto()
    SIGMOID = auto()
    TANH = auto()
    SWISH = auto()
    SOFTMAX = auto()


def _sigmoid(x: float) -> float:
    if x >= 0.0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def activation_fn(act: Activation, x: float) -> float:
    """Apply a scalar activation; softmax acts as the identity here."""
    if act is Activation.RELU:
        return x if x > 0.0 else 0.0
    if act is Activation.LEAKY_RELU:
        return x if x > 0.0 else 0.01 * x
    if act is Activation.SIGMOID:
        return _sigmoid(x)
    if act is Activation.TANH:
        return math.tanh(x)
    if act is Activation.SWISH:
        return x * _sigmoid(x)
    # LINEAR and SOFTMAX (handled at the vector level) fall through.
    return x


def softmax(values: Iterable[float]) -> list[float]:
    """Return the numerically stable softmax of ``values``."""
    values = list(values)
    if not values:
        raise ValueError("softmax of an empty vector is undefined")
    peak = max(values)
    exps = [math.exp(v - peak) for v in values]
    total = sum(exps)
    return [e / total for e in exps]