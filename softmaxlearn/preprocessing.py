"""Feature scaling, categorical encoding, shuffling and missing-value imputation."""

from __future__ import annotations

import random
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

import numpy as np

MISSING_STRING = "nan"


class NotFittedError(RuntimeError):
    """Raised when a transformer is used before it has been fitted."""


def _as_matrix(x) -> np.ndarray:
    arr = np.asarray(x, dtype=float)
    if arr.ndim != 2:
        raise ValueError("expected a two-dimensional array of samples by features")
    return arr


def _as_vector(y) -> np.ndarray:
    arr = np.asarray(y, dtype=float)
    if arr.ndim != 1:
        raise ValueError("expected a one-dimensional array of targets")
    return arr


@dataclass
class StandardScaler:
    """Centres each feature on its mean and divides by its sample deviation."""

    mean: np.ndarray | None = None
    deviation: np.ndarray | None = None
    target_mean: float | None = None
    target_deviation: float | None = None

    def fit(self, x, y=None) -> "StandardScaler":
        """Learn per-feature mean and deviation (and the target's, if given)."""
        data = _as_matrix(x)
        if data.shape[0] < 2:
            raise ValueError("at least two samples are needed to estimate a deviation")
        self.mean = data.mean(axis=0)
        self.deviation = data.std(axis=0, ddof=1)
        if y is not None:
            target = _as_vector(y)
            if target.size < 2:
                raise ValueError("at least two samples are needed to estimate a deviation")
            self.target_mean = float(target.mean())
            self.target_deviation = float(target.std(ddof=1))
        else:
            self.target_mean = None
            self.target_deviation = None
        return self

    def transform(self, x, y=None) -> tuple[np.ndarray, np.ndarray | None]:
        """Return the scaled features and, when given, the scaled target."""
        if self.mean is None or self.deviation is None:
            raise NotFittedError("StandardScaler has not been fitted")
        data = _as_matrix(x)
        if data.shape[1] > self.mean.size:
            raise ValueError("more features than the scaler was fitted on")
        cols = data.shape[1]
        with np.errstate(divide="ignore", invalid="ignore"):
            scaled = (data - self.mean[:cols]) / self.deviation[:cols]
            scaled_y = None
            if y is not None:
                if self.target_mean is None or self.target_deviation is None:
                    raise NotFittedError("StandardScaler was fitted without a target")
                scaled_y = (_as_vector(y) - self.target_mean) / self.target_deviation
        return scaled, scaled_y


@dataclass
class MinMaxScaler:
    """Maps each feature linearly onto [0, 1] using its observed range."""

    minimum: np.ndarray | None = None
    maximum: np.ndarray | None = None
    target_minimum: float | None = None
    target_maximum: float | None = None

    def fit(self, x, y=None) -> "MinMaxScaler":
        """Learn per-feature minimum and maximum (and the target's, if given)."""
        data = _as_matrix(x)
        if data.shape[0] == 0:
            raise ValueError("cannot fit on zero samples")
        self.minimum = data.min(axis=0)
        self.maximum = data.max(axis=0)
        if y is not None:
            target = _as_vector(y)
            if target.size == 0:
                raise ValueError("cannot fit on zero samples")
            self.target_minimum = float(target.min())
            self.target_maximum = float(target.max())
        else:
            self.target_minimum = None
            self.target_maximum = None
        return self

    def transform(self, x, y=None) -> tuple[np.ndarray, np.ndarray | None]:
        """Return the rescaled features and, when given, the rescaled target."""
        if self.minimum is None or self.maximum is None:
            raise NotFittedError("MinMaxScaler has not been fitted")
        data = _as_matrix(x)
        if data.shape[1] > self.minimum.size:
            raise ValueError("more features than the scaler was fitted on")
        cols = data.shape[1]
        low, high = self.minimum[:cols], self.maximum[:cols]
        with np.errstate(divide="ignore", invalid="ignore"):
            scaled = (data - low) / (high - low)
            scaled_y = None
            if y is not None:
                if self.target_minimum is None or self.target_maximum is None:
                    raise NotFittedError("MinMaxScaler was fitted without a target")
                span = self.target_maximum - self.target_minimum
                scaled_y = (_as_vector(y) - self.target_minimum) / span
        return scaled, scaled_y


def _codes_in_order(values: Iterable[str]) -> dict[str, int]:
    codes: dict[str, int] = {}
    for value in values:
        codes.setdefault(value, len(codes))
    return codes


@dataclass
class LabelEncoder:
    """Assigns each distinct string a code in order of first appearance."""

    classes: dict[str, int] = field(default_factory=dict)

    def fit(self, values: Iterable[str]) -> "LabelEncoder":
        self.classes = _codes_in_order(values)
        return self

    def transform(self, values: Iterable[str]) -> np.ndarray:
        """Return codes as floats; unseen values become -1."""
        return np.array([self.classes.get(v, -1) for v in values], dtype=float)


@dataclass
class OneHotEncoder:
    """Encodes each distinct string as an indicator column."""

    classes: dict[str, int] = field(default_factory=dict)

    def fit(self, values: Iterable[str]) -> "OneHotEncoder":
        self.classes = _codes_in_order(values)
        return self

    def transform(self, values: Iterable[str]) -> np.ndarray:
        """Return a samples-by-classes indicator matrix; unseen values give a zero row."""
        items = list(values)
        encoded = np.zeros((len(items), len(self.classes)), dtype=float)
        for row, value in zip(encoded, items):
            code = self.classes.get(value)
            if code is not None:
                row[code] = 1.0
        return encoded


def label_to_one_hot(values) -> np.ndarray:
    """One-hot encode numeric labels, treating values equal to three decimals as one class.

    Classes are numbered in order of first appearance; the class count is the
    number of columns of the result.
    """
    keys = [f"{float(v):.3f}" for v in values]
    codes = _codes_in_order(keys)
    encoded = np.zeros((len(keys), len(codes)), dtype=float)
    for row, key in zip(encoded, keys):
        row[codes[key]] = 1.0
    return encoded


def shuffle_indices(indices: Sequence[int], seed=None) -> list[int]:
    """Return a shuffled copy of ``indices``.

    Random swaps are drawn among the first two thirds of the positions only,
    so the last third keeps its order.
    """
    result = list(indices)
    span = len(result) * 2 // 3
    rng = random.Random(seed)
    for _ in range(span):
        a, b = rng.randrange(span), rng.randrange(span)
        result[a], result[b] = result[b], result[a]
    return result


@dataclass
class SimpleImputer:
    """Fills NaN numbers and ``"nan"`` strings with learned or given values.

    ``strategy`` is ``"mean"``, ``"median"`` or ``"constant"`` (using
    ``fill_value``). ``string_fill`` is ``"most_frequent"`` or a per-column
    sequence of replacement strings (``None`` leaves that column alone);
    when ``string_fill`` is ``None`` strings are not imputed.
    """

    strategy: str = "mean"
    fill_value: Sequence[float] | None = None
    string_fill: str | Sequence[str | None] | None = None
    numeric_values: np.ndarray | None = None
    string_values: list[str | None] | None = None

    def fit(self, numeric, strings=None) -> "SimpleImputer":
        data = _as_matrix(numeric)
        if self.strategy == "mean":
            with np.errstate(invalid="ignore", divide="ignore"):
                present = ~np.isnan(data)
                totals = np.where(present, data, 0.0).sum(axis=0)
                self.numeric_values = totals / present.sum(axis=0)
        elif self.strategy == "median":
            self.numeric_values = np.array(
                [_median(column[~np.isnan(column)]) for column in data.T], dtype=float
            )
        elif self.strategy == "constant":
            if self.fill_value is None:
                raise ValueError("the constant strategy needs fill_value")
            values = np.asarray(self.fill_value, dtype=float)
            if values.shape != (data.shape[1],):
                raise ValueError("fill_value must give one value per numeric column")
            self.numeric_values = values.copy()
        else:
            raise ValueError(f"unknown strategy: {self.strategy!r}")

        self.string_values = None
        if strings is not None and self.string_fill is not None:
            columns = list(zip(*strings)) if len(strings) else []
            if self.string_fill == "most_frequent":
                self.string_values = [_most_frequent(col) for col in columns]
            else:
                fills = list(self.string_fill)
                if len(fills) != len(columns):
                    raise ValueError("string_fill must give one value per string column")
                self.string_values = fills
        return self

    def transform(self, numeric, strings=None):
        """Return imputed copies of the numeric and string tables."""
        if self.numeric_values is None:
            raise NotFittedError("SimpleImputer has not been fitted")
        data = _as_matrix(numeric).copy()
        if data.shape[1] != self.numeric_values.size:
            raise ValueError("numeric column count differs from the fitted data")
        missing = np.isnan(data)
        data[missing] = np.broadcast_to(self.numeric_values, data.shape)[missing]

        if strings is None:
            return data, None
        table = [list(row) for row in strings]
        if self.string_values is not None:
            for row in table:
                for col, fill in enumerate(self.string_values):
                    if fill is not None and row[col] == MISSING_STRING:
                        row[col] = fill
        return data, table


def _median(values: np.ndarray) -> float:
    return float(np.median(values)) if values.size else float("nan")


def _most_frequent(column: Iterable[str]) -> str | None:
    counts = Counter(v for v in column if v != MISSING_STRING)
    if not counts:
        return None
    return counts.most_common(1)[0][0]