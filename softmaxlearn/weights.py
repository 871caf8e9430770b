"""Weight matrix of a softmax classifier and its gradient-based update rules."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from softmaxlearn.dataset import Dataset


def _row_softmax(z: np.ndarray) -> np.ndarray:
    shifted = np.exp(z - z.max(axis=1, keepdims=True))
    return shifted / shifted.sum(axis=1, keepdims=True)


@dataclass
class Weights:
    """A (features + 1) by classes weight matrix; the last row weighs the bias."""

    values: np.ndarray

    def __post_init__(self) -> None:
        self.values = np.asarray(self.values, dtype=float)
        if self.values.ndim != 2:
            raise ValueError("weights must be two-dimensional")

    @property
    def num_weights(self) -> int:
        return self.values.shape[0]

    @property
    def classes(self) -> int:
        return self.values.shape[1]

    def _check(self, dataset: Dataset) -> None:
        if dataset.x.shape[1] != self.num_weights or dataset.y_types != self.classes:
            raise ValueError("dataset shape does not match the weights")
        if dataset.samples == 0:
            raise ValueError("dataset has no samples")

    def derivative(self, dataset: Dataset) -> np.ndarray:
        """Gradient of the mean cross-entropy: X^T (softmax(XW) - Y) / m."""
        self._check(dataset)
        error = _row_softmax(dataset.x @ self.values) - dataset.y
        return dataset.x.T @ error / dataset.samples

    def gradient_descent(self, dataset: Dataset, learning_rate: float) -> None:
        """Take one plain gradient step in place."""
        self.values -= learning_rate * self.derivative(dataset)

    def momentum_step(self, dataset: Dataset, learning_rate: float, velocity, rate: float = 0.9) -> np.ndarray:
        """Take one momentum step in place and return the new velocity."""
        step = learning_rate * self.derivative(dataset) + rate * np.asarray(velocity, dtype=float)
        self.values -= step
        return step

    def nesterov_step(self, dataset: Dataset, learning_rate: float, velocity, rate: float = 0.9) -> np.ndarray:
        """Take one Nesterov step in place and return the new velocity."""
        previous = np.asarray(velocity, dtype=float)
        ahead = Weights(self.values - rate * previous)
        step = learning_rate * ahead.derivative(dataset) + rate * previous
        self.values -= step
        return step

    def format(self, decimal: int = 8) -> str:
        """Render the matrix one row per line."""
        rows = []
        for number, row in enumerate(self.values):
            opener = "[" if number == 0 else "\n" + "[".rjust(11)
            rows.append(opener + ", ".join(f"{v:.{decimal}f}" for v in row) + "]")
        return "Weights: [" + "".join(rows) + "]\n"


def init_weights(features: int, classes: int, seed=1) -> Weights:
    """Weights drawn uniformly from [-0.1, 0.1] for ``features`` plus a bias."""
    if features < 0 or classes < 1:
        raise ValueError("need a non-negative feature count and at least one class")
    rng = np.random.default_rng(seed)
    return Weights(rng.random((features + 1, classes)) * 0.2 - 0.1)