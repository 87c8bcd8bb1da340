import math

import pytest

from genalgo.activations import Activation
from genalgo.layers import DenseLayer, random_value


def test_random_value_range():
    values = [random_value() for _ in range(500)]
    assert all(-1.0 <= v <= 1.0 for v in values)
    assert len(set(values)) > 1


def test_layer_shapes_and_random_init():
    layer = DenseLayer(3, 4)
    assert len(layer.data) == 12
    assert len(layer.bias) == 4
    assert layer.activation is Activation.RELU
    assert all(-1.0 <= v <= 1.0 for v in layer.data + layer.bias)


def test_getitem_is_row_major():
    layer = DenseLayer(2, 3, Activation.LINEAR)
    layer.data = [float(i) for i in range(6)]
    assert layer[0, 0] == 0.0
    assert layer[0, 2] == 2.0
    assert layer[1, 0] == 3.0
    assert layer[1, 2] == 5.0


def test_setitem_updates_storage():
    layer = DenseLayer(2, 2)
    layer[1, 0] = 9.5
    assert layer.data[2] == 9.5
    assert layer[1, 0] == 9.5


@pytest.mark.parametrize("key", [(2, 0), (0, 2), (-1, 0)])
def test_out_of_range_index_raises(key):
    layer = DenseLayer(2, 2, Activation.LINEAR)
    layer.data = [1.0, 2.0, 3.0, 4.0]
    with pytest.raises(IndexError) as excinfo:
        _ = layer[key]
    assert excinfo.type is IndexError
    assert layer[1, 1] == 4.0
    assert layer.data == [1.0, 2.0, 3.0, 4.0]


def test_randomize_changes_weights():
    layer = DenseLayer(5, 5)
    layer.data = [0.0] * 25
    layer.bias = [0.0] * 5
    layer.randomize()
    assert len(layer.data) == 25
    assert any(v != 0.0 for v in layer.data)


def test_apply_activation_relu():
    layer = DenseLayer(1, 3, Activation.RELU)
    assert layer.apply_activation([-1.0, 0.0, 2.0]) == [0.0, 0.0, 2.0]


def test_apply_activation_softmax():
    layer = DenseLayer(1, 3, Activation.SOFTMAX)
    out = layer.apply_activation([1.0, 2.0, 3.0])
    assert math.fsum(out) == pytest.approx(1.0)
    assert out[0] < out[1] < out[2]


def test_propagate_with_known_weights():
    layer = DenseLayer(2, 1, Activation.LINEAR)
    layer.data = [1.0, 1.0]
    layer.bias = [0.0]
    assert layer.propagate([2.5, 4.0]) == pytest.approx([6.5])


def test_memory_usage_report_scales_with_size():
    small = DenseLayer(1, 1).memory_usage_report().splitlines()
    big = DenseLayer(2, 3).memory_usage_report().splitlines()
    assert small[0] == big[0]
    assert small[0].startswith("Type size: ")
    item = int(small[0].split()[2])
    assert big[1] == f"Matrix memory: {6 * item} bytes"
    assert big[2] == f"Bias memory:   {3 * item} bytes"


def test_weights_report_layout():
    layer = DenseLayer(2, 2, Activation.LINEAR)
    layer.data = [1.5, -2.0, 0.25, 3.0]
    layer.bias = [0.5, -1.0]
    assert layer.weights_report() == "1.5 -2 \n0.25 3 \nbias: 0.5 -1 \n\n"