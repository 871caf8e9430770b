"""Design matrices with a bias column and one-hot targets built from tabular data."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from softmaxlearn.preprocessing import LabelEncoder, label_to_one_hot


@dataclass
class Dataset:
    """Samples as rows of ``x`` (features plus a trailing bias of 1) and one-hot ``y``."""

    x: np.ndarray
    y: np.ndarray

    def __post_init__(self) -> None:
        self.x = np.asarray(self.x, dtype=float)
        self.y = np.asarray(self.y, dtype=float)
        if self.x.ndim != 2 or self.y.ndim != 2:
            raise ValueError("x and y must be two-dimensional")
        if self.x.shape[0] != self.y.shape[0]:
            raise ValueError("x and y must hold the same number of samples")
        if self.x.shape[1] < 1:
            raise ValueError("x must hold at least the bias column")

    @property
    def features(self) -> int:
        """Number of feature columns, not counting the bias."""
        return self.x.shape[1] - 1

    @property
    def samples(self) -> int:
        return self.x.shape[0]

    @property
    def y_types(self) -> int:
        """Number of target classes."""
        return self.y.shape[1]

    def subset(self, order: Sequence[int], begin: int = 0, end: int | None = None) -> "Dataset":
        """Return a new dataset of the samples ``order[begin:end]``, in that order."""
        picked = list(order)[begin:end]
        return Dataset(self.x[picked].copy(), self.y[picked].copy())

    def format(self, decimal: int = 4, col_space: int = 10, rows: int = -1) -> str:
        """Render the first ``rows`` samples (all of them if out of range) as text."""
        if rows < 0 or rows > self.samples:
            rows = self.samples
        lines = [" Row\n"]
        for number, (x_row, y_row) in enumerate(zip(self.x[:rows], self.y[:rows]), start=1):
            cells = "".join(f"{v:{col_space}.{decimal}f} " for v in x_row[: self.features])
            labels = "".join(f"{v:.0f} " for v in y_row)
            lines.append(f"{number:4d}\t{cells}\t|   [ {labels}]\n")
        return "".join(lines)


def _resolve_target(target, names: Sequence[str] | None, n_numeric: int, n_string: int):
    """Return (column index, is_string_column) for the target."""
    if isinstance(target, bool):
        raise TypeError("target must be a column index or name")
    if isinstance(target, str):
        try:
            target = int(target)
        except ValueError:
            if names is None or target not in names:
                raise KeyError(f"no column named {target!r}") from None
            index = list(names).index(target)
            if index >= n_numeric:
                if index - n_numeric >= n_string:
                    raise KeyError(f"no column named {target!r}") from None
                return index - n_numeric, True
            return index, False
    if not isinstance(target, int):
        raise TypeError("target must be a column index or name")
    if not 0 <= target < n_numeric:
        raise IndexError(f"numeric column {target} out of range")
    return target, False


def build_dataset(numeric, strings=None, names=None, target=0) -> Dataset:
    """Build a dataset predicting ``target`` from the remaining columns.

    ``numeric`` is a samples-by-columns array; ``strings`` holds the string
    columns row by row (or ``None``). ``names`` lists the numeric column names
    followed by the string column names. ``target`` is a numeric column index
    (an ``int`` or a string of digits) or a column name. String columns are
    label encoded; the target is one-hot encoded.
    """
    data = np.asarray(numeric, dtype=float)
    if data.ndim != 2:
        raise ValueError("numeric data must be two-dimensional")
    rows, n_numeric = data.shape
    string_rows = [list(r) for r in strings] if strings is not None else [[] for _ in range(rows)]
    if len(string_rows) != rows:
        raise ValueError("numeric and string tables differ in row count")
    n_string = len(string_rows[0]) if string_rows else 0
    if any(len(r) != n_string for r in string_rows):
        raise ValueError("string rows differ in length")

    encoded = [
        LabelEncoder().fit(column).transform(column) for column in zip(*string_rows)
    ] if n_string else []

    index, is_string = _resolve_target(target, names, n_numeric, n_string)
    target_column = encoded[index] if is_string else data[:, index]

    columns = [data[:, j] for j in range(n_numeric) if is_string or j != index]
    columns += [col for k, col in enumerate(encoded) if not is_string or k != index]
    columns.append(np.ones(rows))
    x = np.column_stack(columns)
    return Dataset(x, label_to_one_hot(target_column))