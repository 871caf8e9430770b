"""Softmax regression trained by mini-batch gradient methods."""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from softmaxlearn.dataset import Dataset
from softmaxlearn.preprocessing import shuffle_indices
from softmaxlearn.weights import Weights, _row_softmax

METHODS = ("GD", "GDM", "NAG")
MOMENTUM = 0.9
_EPSILON = 1e-10


def cross_entropy(y_pred, y_true) -> float:
    """Mean negative log-probability given to each sample's true class."""
    pred = np.asarray(y_pred, dtype=float)
    true = np.asarray(y_true, dtype=float)
    if pred.shape != true.shape or pred.ndim != 2:
        raise ValueError("predictions and targets must be matching matrices")
    if pred.shape[0] == 0:
        raise ValueError("no samples")
    picked = np.log(pred[true == 1.0] + _EPSILON)
    return float(-picked.sum() / pred.shape[0])


@dataclass
class SoftmaxRegression:
    """A softmax classifier over ``data`` with weight matrix ``weights``.

    ``seed`` fixes the batch shuffling; ``None`` shuffles differently each run.
    """

    data: Dataset
    weights: Weights
    seed: int | None = None

    def predict(self, dataset: Dataset | None = None) -> np.ndarray:
        """Class probabilities for each sample of ``dataset`` (default: the training data)."""
        dataset = self.data if dataset is None else dataset
        if dataset.x.shape[1] != self.weights.num_weights:
            raise ValueError("dataset shape does not match the weights")
        return _row_softmax(dataset.x @ self.weights.values)

    def train(
        self,
        method: str = "NAG",
        iterations: int = 130,
        learning_rate: float = 4e-4,
        batch_size: int = 32,
        log: Callable[[str], object] | None = None,
    ) -> list[float]:
        """Train in place and return the loss measured at the start of each iteration.

        ``method`` is ``"GD"``, ``"GDM"`` or ``"NAG"``. A ``batch_size`` of zero,
        below zero or at least the sample count uses the whole data as one batch.
        ``log``, if given, receives a progress report for every iteration.
        """
        if method not in METHODS:
            raise ValueError(f"unknown method {method!r}; expected one of {METHODS}")
        samples = self.data.samples
        if samples == 0:
            raise ValueError("no samples to train on")

        rng = random.Random(self.seed)
        order = list(range(samples))
        if batch_size <= 0 or batch_size >= samples:
            batch_size = samples
        else:
            order = shuffle_indices(order, rng.getrandbits(32))

        velocity = np.zeros_like(self.weights.values)
        losses = []
        for remaining in range(iterations, 0, -1):
            y_pred = self.predict()
            order = shuffle_indices(order, rng.getrandbits(32))
            for start in range(0, samples, batch_size):
                batch = self.data.subset(order, start, min(start + batch_size, samples))
                if method == "GD":
                    self.weights.gradient_descent(batch, learning_rate)
                elif method == "GDM":
                    velocity = self.weights.momentum_step(batch, learning_rate, velocity, MOMENTUM)
                else:
                    velocity = self.weights.nesterov_step(batch, learning_rate, velocity, MOMENTUM)
            loss = cross_entropy(y_pred, self.data.y)
            losses.append(loss)
            if log is not None:
                log(f"Iteration left: {remaining}, loss = {loss:.6f}\n{self.weights.format(8)}\n")
        return losses