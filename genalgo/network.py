"""Feed-forward neural network whose weights can be read and written as a flat genome."""

from __future__ import annotations

from typing import Sequence

from genalgo.activations import Activation
from genalgo.layers import DenseLayer

_RULE = "=" * 40


class NeuralNetwork:
    """Stack of dense hidden layers followed by a dense output layer."""

    def __init__(
        self,
        input_size: int,
        output_size: int,
        hidden_sizes: Sequence[int],
        hidden_activations: Sequence[Activation],
        output_activation: Activation = Activation.SOFTMAX,
    ):
        hidden_sizes = list(hidden_sizes)
        hidden_activations = list(hidden_activations)
        if len(hidden_sizes) != len(hidden_activations):
            raise ValueError("The number of activations and hidden layers must be the same")
        if input_size <= 0 or output_size <= 0:
            raise ValueError("Input/output size must be > 0")
        if any(size <= 0 for size in hidden_sizes):
            raise ValueError("Hidden layer sizes must be > 0")

        self.input_size = input_size
        self.output_size = output_size

        previous_sizes = [input_size] + hidden_sizes[:-1]
        self.hidden_layers = [
            DenseLayer(prev, size, act)
            for prev, size, act in zip(previous_sizes, hidden_sizes, hidden_activations)
        ]
        last = hidden_sizes[-1] if hidden_sizes else input_size
        self.output_layer = DenseLayer(last, output_size, output_activation)

    @property
    def num_hidden_layers(self) -> int:
        return len(self.hidden_layers)

    @property
    def _layers(self) -> list[DenseLayer]:
        return [*self.hidden_layers, self.output_layer]

    def forward(self, inputs: Sequence[float]) -> list[float]:
        """Run a forward pass and return the output vector."""
        current = list(inputs)
        if len(current) != self.input_size:
            raise ValueError("Input vector size mismatch")
        for layer in self._layers:
            current = layer.propagate(current)
        return current

    def to_genome(self) -> list[float]:
        """Flatten weights then biases of each layer, hidden layers first."""
        return [v for layer in self._layers for v in (*layer.data, *layer.bias)]

    def load_genome(self, genome: Sequence[float]) -> None:
        """Load a flat genome produced by :meth:`to_genome` back into the layers."""
        genome = list(genome)
        if len(genome) != self.total_weights():
            raise ValueError("Genome size does not match network weight count")
        offset = 0
        for layer in self._layers:
            n_w, n_b = len(layer.data), len(layer.bias)
            layer.data = genome[offset : offset + n_w]
            offset += n_w
            layer.bias = genome[offset : offset + n_b]
            offset += n_b

    def total_weights(self) -> int:
        """Number of trainable parameters, biases included."""
        return sum(len(layer.data) + len(layer.bias) for layer in self._layers)

    def architecture(self) -> str:
        """Summarise the layer shapes and parameter count."""
        lines = [f"Input size: {self.input_size}"]
        lines += [
            f"Hidden Layer {i}: {layer.rows} x {layer.cols}  (+{layer.cols} bias)"
            for i, layer in enumerate(self.hidden_layers, start=1)
        ]
        out = self.output_layer
        lines.append(f"Output Layer: {out.rows} x {out.cols}  (+{out.cols} bias)")
        lines.append(f"Total weights (incl. bias): {self.total_weights()}")
        return "\n".join(lines) + "\n"

    def architecture_detail(self) -> str:
        """Describe every layer with its memory use and weights."""
        parts = [
            "==== NEURAL NETWORK ARCHITECHTURE DETAIL ====\n",
            f"Input size: {self.input_size}\n",
        ]
        for i, layer in enumerate(self.hidden_layers, start=1):
            parts.append(f"{_RULE}\n\tHidden Layer {i}\n\n")
            parts.append(layer.memory_usage_report())
            parts.append(f"{_RULE}\n\t\t\u2193\n")
            parts.append(layer.weights_report())
        parts.append(f"{_RULE}\n\tOutput layer\n\n")
        parts.append(self.output_layer.memory_usage_report())
        parts.append(f"{_RULE}\n\t\t\u2193\n")
        parts.append(self.output_layer.weights_report())
        return "".join(parts)