import math

import numpy as np
import pytest

from softmaxlearn.cli import main, read_table


@pytest.fixture
def table_file(tmp_path):
    path = tmp_path / "flags.csv"
    path.write_text(
        "a,colour,t\n"
        "1.0,red,0\n"
        "2.5,blue,1\n"
        ",red,0\n"
        "4.0,,1\n"
        "0.5,green,0\n"
        "3.5,blue,1\n",
        encoding="utf-8",
    )
    return path


def test_read_table_splits_columns(table_file):
    numeric, strings, names = read_table(table_file, ",")
    assert names == ["a", "t", "colour"]
    assert numeric.shape == (6, 2)
    assert numeric[0, 0] == 1.0
    assert math.isnan(numeric[2, 0])
    np.testing.assert_array_equal(numeric[:, 1], [0, 1, 0, 1, 0, 1])
    assert strings[0] == ["red"]
    assert strings[3] == ["nan"]


def test_read_table_other_delimiter(tmp_path):
    path = tmp_path / "semi.csv"
    path.write_text("x;y\n1;a\n2;b\n", encoding="utf-8")
    numeric, strings, names = read_table(path, ";")
    assert names == ["x", "y"]
    np.testing.assert_array_equal(numeric[:, 0], [1, 2])
    assert strings == [["a"], ["b"]]


def test_read_table_ragged_row(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("x,y\n1,2\n3\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_table(path, ",")


def test_main_trains_and_reports(tmp_path, capsys):
    path = tmp_path / "data.csv"
    rows = ["f1,f2,t"]
    for i in range(12):
        label = i % 2
        rows.append(f"{i * 0.3 + label * 5},{(i % 5) - label},{label}")
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    code = main([str(path), "--iterations", "2", "--batch-size", "4", "--seed", "1"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Iteration left: 2, loss = " in out
    assert "Iteration left: 1, loss = " in out
    assert out.count("Weights: [") == 2


def test_main_unknown_target(table_file):
    with pytest.raises(SystemExit):
        main([str(table_file), "--target", "missing", "--iterations", "1"])