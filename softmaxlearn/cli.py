"""Command line: read a delimited table, standardise it and train a softmax classifier."""

from __future__ import annotations

import argparse
import csv
import math
import sys

import numpy as np

from softmaxlearn.dataset import build_dataset
from softmaxlearn.preprocessing import MISSING_STRING, StandardScaler
from softmaxlearn.softmax import METHODS, SoftmaxRegression
from softmaxlearn.weights import init_weights


def _is_missing(cell: str) -> bool:
    return cell.strip() in ("", MISSING_STRING)


def _is_number(cell: str) -> bool:
    try:
        float(cell)
    except ValueError:
        return False
    return True


def read_table(path, delimiter: str = ","):
    """Read a headed delimited file into ``(numeric, strings, names)``.

    Columns whose present cells all parse as numbers are numeric, with missing
    cells as NaN; the rest are string columns, with missing cells as ``"nan"``.
    ``names`` lists the numeric columns first, then the string columns.
    """
    with open(path, newline="", encoding="utf-8") as handle:
        reader = csv.reader(handle, delimiter=delimiter)
        try:
            header = next(reader)
        except StopIteration:
            raise ValueError(f"{path}: empty file") from None
        rows = [row for row in reader if any(cell.strip() for cell in row)]
    width = len(header)
    for line, row in enumerate(rows, start=2):
        if len(row) != width:
            raise ValueError(f"{path}: line {line} has {len(row)} fields, expected {width}")

    columns = list(zip(*rows)) if rows else [() for _ in header]
    numeric_idx = [
        i for i, col in enumerate(columns)
        if all(_is_missing(c) or _is_number(c) for c in col)
    ]
    string_idx = [i for i in range(width) if i not in numeric_idx]

    numeric = np.array(
        [[math.nan if _is_missing(row[i]) else float(row[i]) for i in numeric_idx] for row in rows],
        dtype=float,
    ).reshape(len(rows), len(numeric_idx))
    strings = [
        [MISSING_STRING if _is_missing(row[i]) else row[i].strip() for i in string_idx]
        for row in rows
    ]
    names = [header[i].strip() for i in numeric_idx + string_idx]
    return numeric, strings, names


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="softmaxlearn", description="Train a softmax regression model on a CSV table."
    )
    parser.add_argument("path", help="delimited file with a header row")
    parser.add_argument("--target", default="t", help="column to predict (name or numeric index)")
    parser.add_argument("--delimiter", default=",")
    parser.add_argument("--method", choices=METHODS, default="NAG")
    parser.add_argument("--iterations", type=int, default=130)
    parser.add_argument("--learning-rate", type=float, default=4e-4)
    parser.add_argument("--batch-size", type=int, default=32)
    parser.add_argument("--seed", type=int, default=None, help="seed for batch shuffling")
    args = parser.parse_args(argv)

    try:
        numeric, strings, names = read_table(args.path, args.delimiter)
        dataset = build_dataset(numeric, strings, names, args.target)
    except (OSError, ValueError, KeyError, IndexError) as exc:
        parser.error(str(exc))

    features = dataset.features
    scaler = StandardScaler().fit(dataset.x[:, :features])
    dataset.x[:, :features], _ = scaler.transform(dataset.x[:, :features])

    model = SoftmaxRegression(dataset, init_weights(features, dataset.y_types, 1), args.seed)
    model.train(args.method, args.iterations, args.learning_rate, args.batch_size, sys.stdout.write)
    return 0


if __name__ == "__main__":
    sys.exit(main())