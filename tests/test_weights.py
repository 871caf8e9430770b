import numpy as np
import pytest

from softmaxlearn.dataset import Dataset
from softmaxlearn.weights import Weights, init_weights


@pytest.fixture
def dataset():
    x = np.array([[0.5, -1.0, 1.0], [1.5, 0.2, 1.0], [-0.7, 0.9, 1.0], [0.1, 0.1, 1.0]])
    y = np.array([[1, 0, 0], [0, 1, 0], [0, 0, 1], [1, 0, 0]], dtype=float)
    return Dataset(x, y)


def test_init_shape_and_range():
    w = init_weights(4, 3, 1)
    assert w.values.shape == (5, 3)
    assert w.num_weights == 5
    assert w.classes == 3
    assert np.all(np.abs(w.values) <= 0.1)


def test_init_is_reproducible():
    np.testing.assert_array_equal(init_weights(2, 2, 7).values, init_weights(2, 2, 7).values)


def test_init_rejects_no_classes():
    with pytest.raises(ValueError):
        init_weights(2, 0, 1)


def test_derivative_rows_sum_to_zero(dataset):
    grad = init_weights(2, 3, 1).derivative(dataset)
    assert grad.shape == (3, 3)
    np.testing.assert_allclose(grad.sum(axis=1), 0.0, atol=1e-12)


def test_derivative_matches_numeric_gradient(dataset):
    w = init_weights(2, 3, 3)

    def loss(values):
        z = dataset.x @ values
        z = z - z.max(axis=1, keepdims=True)
        logp = z - np.log(np.exp(z).sum(axis=1, keepdims=True))
        return -(logp * dataset.y).sum() / dataset.samples

    numeric = np.zeros_like(w.values)
    eps = 1e-6
    for idx in np.ndindex(w.values.shape):
        up, down = w.values.copy(), w.values.copy()
        up[idx] += eps
        down[idx] -= eps
        numeric[idx] = (loss(up) - loss(down)) / (2 * eps)
    np.testing.assert_allclose(w.derivative(dataset), numeric, atol=1e-6)


def test_derivative_rejects_mismatch(dataset):
    with pytest.raises(ValueError):
        init_weights(5, 3, 1).derivative(dataset)


def test_gradient_descent_step(dataset):
    w = init_weights(2, 3, 1)
    before = w.values.copy()
    grad = w.derivative(dataset)
    w.gradient_descent(dataset, 0.5)
    np.testing.assert_allclose(w.values, before - 0.5 * grad)


def test_momentum_from_rest_equals_gradient_descent(dataset):
    a, b = init_weights(2, 3, 1), init_weights(2, 3, 1)
    grad = a.derivative(dataset)
    velocity = a.momentum_step(dataset, 0.1, np.zeros_like(a.values), 0.9)
    b.gradient_descent(dataset, 0.1)
    np.testing.assert_allclose(a.values, b.values)
    np.testing.assert_allclose(velocity, 0.1 * grad)


def test_momentum_carries_velocity(dataset):
    w = init_weights(2, 3, 1)
    prior = np.full_like(w.values, 0.01)
    before = w.values.copy()
    grad = w.derivative(dataset)
    velocity = w.momentum_step(dataset, 0.1, prior, 0.9)
    np.testing.assert_allclose(velocity, 0.1 * grad + 0.9 * prior)
    np.testing.assert_allclose(w.values, before - velocity)


def test_nesterov_from_rest_equals_momentum(dataset):
    a, b = init_weights(2, 3, 1), init_weights(2, 3, 1)
    zero = np.zeros_like(a.values)
    va = a.nesterov_step(dataset, 0.2, zero, 0.9)
    vb = b.momentum_step(dataset, 0.2, zero, 0.9)
    np.testing.assert_allclose(a.values, b.values)
    np.testing.assert_allclose(va, vb)


def test_nesterov_uses_lookahead_gradient(dataset):
    w = init_weights(2, 3, 1)
    prior = np.full_like(w.values, 0.05)
    ahead = Weights(w.values - 0.9 * prior)
    expected = 0.2 * ahead.derivative(dataset) + 0.9 * prior
    np.testing.assert_allclose(w.nesterov_step(dataset, 0.2, prior, 0.9), expected)


def test_format_layout():
    w = Weights(np.array([[1.0, 2.0], [3.0, 4.0]]))
    text = w.format(1)
    assert text == "Weights: [[1.0, 2.0]\n          [3.0, 4.0]]\n"