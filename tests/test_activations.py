import math

import pytest

from genalgo.activations import Activation, activation_fn, softmax


def test_linear_is_identity():
    assert activation_fn(Activation.LINEAR, -3.25) == -3.25


def test_softmax_scalar_is_identity():
    assert activation_fn(Activation.SOFTMAX, 7.5) == 7.5


@pytest.mark.parametrize("x", [-5.0, -0.1, 0.0])
def test_relu_clamps_non_positive(x):
    assert activation_fn(Activation.RELU, x) == 0.0


def test_relu_passes_positive():
    assert activation_fn(Activation.RELU, 2.5) == 2.5


def test_leaky_relu_scales_negative():
    assert activation_fn(Activation.LEAKY_RELU, -1.0) == pytest.approx(-0.01)
    assert activation_fn(Activation.LEAKY_RELU, 4.0) == 4.0


def test_sigmoid_midpoint_and_symmetry():
    assert activation_fn(Activation.SIGMOID, 0.0) == pytest.approx(0.5)
    for x in (0.3, 2.0, 10.0):
        total = activation_fn(Activation.SIGMOID, x) + activation_fn(Activation.SIGMOID, -x)
        assert total == pytest.approx(1.0)


def test_sigmoid_extreme_inputs_do_not_overflow():
    assert activation_fn(Activation.SIGMOID, -1000.0) == pytest.approx(0.0)
    assert activation_fn(Activation.SIGMOID, 1000.0) == pytest.approx(1.0)


def test_tanh_is_odd_and_bounded():
    assert activation_fn(Activation.TANH, 0.0) == 0.0
    assert activation_fn(Activation.TANH, 1.3) == pytest.approx(-activation_fn(Activation.TANH, -1.3))
    assert abs(activation_fn(Activation.TANH, 50.0)) <= 1.0


def test_swish_properties():
    assert activation_fn(Activation.SWISH, 0.0) == 0.0
    assert activation_fn(Activation.SWISH, 2.0) < 2.0
    assert activation_fn(Activation.SWISH, 2.0) > 0.0
    assert activation_fn(Activation.SWISH, -1000.0) == pytest.approx(0.0)


def test_softmax_sums_to_one_and_keeps_order():
    out = softmax([0.5, -0.3, 1.2])
    assert math.fsum(out) == pytest.approx(1.0)
    assert out[2] > out[0] > out[1]
    assert all(0.0 < v < 1.0 for v in out)


def test_softmax_uniform_input():
    out = softmax([3.0, 3.0, 3.0, 3.0])
    assert out == pytest.approx([0.25] * 4)


def test_softmax_shift_invariant_and_stable():
    assert softmax([1000.0, 1001.0]) == pytest.approx(softmax([0.0, 1.0]))


def test_softmax_empty_raises():
    with pytest.raises(ValueError):
        softmax([])