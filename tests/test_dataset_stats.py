"""
Tests for column classification, numeric statistics and the categorical
breakdown.

Usage:
    pytest tests/test_dataset_stats.py
"""

import sys
import os
import math

import numpy as np
import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.utils.csv_parser import MISSING, NumberCell, TextCell
from app.utils.dataset_stats import (
    classify_columns,
    compute_column_stats,
    compute_numeric_stats,
    compute_top_categories,
    numeric_values,
)


def column(name, cells):
    return [{name: cell} for cell in cells]


def numbers(*values):
    return [NumberCell(float(v)) for v in values]


def texts(*values):
    return [TextCell(v) for v in values]


# =============================================================================
# CLASSIFICATION
# =============================================================================

def test_majority_numeric_is_numeric():
    rows = column("x", numbers(*range(51)) + texts(*["n/a"] * 49))
    result = classify_columns(["x"], rows)
    assert result.numeric == ["x"]
    assert result.categorical == []


def test_half_numeric_is_categorical():
    rows = column("x", numbers(*range(50)) + texts(*["n/a"] * 50))
    result = classify_columns(["x"], rows)
    assert result.numeric == []
    assert result.categorical == ["x"]


def test_missing_and_empty_cells_do_not_count():
    rows = column("x", numbers(1, 2) + texts("oops", "") + [MISSING] * 10)
    assert classify_columns(["x"], rows).numeric == ["x"]


def test_column_without_valid_cells_is_categorical():
    rows = column("x", [MISSING, MISSING, TextCell("")])
    assert classify_columns(["x"], rows).categorical == ["x"]


def test_every_column_in_exactly_one_partition():
    header = ["city", "amount", "note", "qty"]
    rows = [
        {"city": TextCell("Delhi"), "amount": NumberCell(10.0), "note": MISSING, "qty": NumberCell(1.0)},
        {"city": TextCell("Pune"), "amount": NumberCell(20.0), "note": TextCell("ok"), "qty": TextCell("two")},
    ]
    result = classify_columns(header, rows)

    assert sorted(result.numeric + result.categorical) == sorted(header)
    assert result.numeric == ["amount"]
    assert result.categorical == ["city", "note", "qty"]


def test_rows_without_the_column_count_as_missing():
    rows = [{"x": NumberCell(1.0)}, {}, {"x": NumberCell(2.0)}, {"y": TextCell("a")}]
    assert classify_columns(["x"], rows).numeric == ["x"]
    assert compute_top_categories(rows, "y").top == [("a", 1)]


# =============================================================================
# NUMERIC STATISTICS
# =============================================================================

def test_median_even_count():
    assert compute_numeric_stats(np.array([1.0, 2.0, 3.0, 4.0])).median == 2.5


def test_median_odd_count():
    assert compute_numeric_stats(np.array([1.0, 2.0, 3.0])).median == 2


def test_amount_scenario():
    stats = compute_numeric_stats(np.array([100.0, 200.0, 300.0]))
    assert stats.avg == 200
    assert stats.median == 200
    assert stats.min == 100
    assert stats.max == 300
    assert stats.sum == 600
    assert stats.count == 3
    assert stats.std == pytest.approx(81.65, abs=0.01)
    assert stats.outlier_count == 0


def test_two_sigma_outlier():
    stats = compute_numeric_stats(np.array([10.0] * 9 + [100.0]))
    assert stats.avg == 19
    assert stats.std == 27
    assert stats.outlier_count == 1


def test_value_exactly_on_two_sigma_is_not_an_outlier():
    # avg 28, std 36: the 100 sits exactly 2 std away
    stats = compute_numeric_stats(np.array([10.0, 10.0, 10.0, 10.0, 100.0]))
    assert stats.avg == 28
    assert stats.std == 36
    assert stats.outlier_count == 0


def test_constant_column_has_no_outliers():
    stats = compute_numeric_stats(np.array([5.0, 5.0, 5.0]))
    assert stats.std == 0
    assert stats.outlier_count == 0


def test_empty_values_give_no_stats():
    assert compute_numeric_stats(np.array([])) is None


def test_bounds_hold():
    samples = [
        [1, 2, 3],
        [-5, 0, 5, 1000],
        [3.5],
        [0.1, 0.2, 0.3, 0.4, 99.9],
        [7, 7, 7, 7],
    ]
    for values in samples:
        stats = compute_numeric_stats(np.sort(np.array(values, dtype=float)))
        assert stats.min <= stats.median <= stats.max
        assert stats.min <= stats.avg <= stats.max


def test_numeric_values_sorted_and_filtered():
    rows = column("x", numbers(3, 1, 2) + texts("abc") + [MISSING, NumberCell(math.inf)])
    assert numeric_values(rows, "x").tolist() == [1.0, 2.0, 3.0]


def test_count_is_valid_cells_not_rows():
    rows = column("amount", numbers(10, 20, 30) + texts("n/a") + [MISSING, MISSING])
    stats = compute_column_stats(rows, ["amount"])
    assert stats["amount"].count == 3
    assert len(rows) == 6


def test_column_without_numbers_is_skipped():
    rows = [{"a": NumberCell(1.0), "b": TextCell("x")}]
    stats = compute_column_stats(rows, ["a", "b"])
    assert list(stats) == ["a"]


# =============================================================================
# CATEGORICAL BREAKDOWN
# =============================================================================

def test_top_categories_ties_keep_first_seen_order():
    rows = column("city", texts("Delhi", "Mumbai", "Delhi", "Delhi", "Pune"))
    top = compute_top_categories(rows, "city")
    assert top.column == "city"
    assert top.top == [("Delhi", 3), ("Mumbai", 1), ("Pune", 1)]


def test_top_categories_limited_to_five():
    rows = column("c", texts("a", "b", "c", "d", "e", "f", "f"))
    top = compute_top_categories(rows, "c")
    assert top.top == [("f", 2), ("a", 1), ("b", 1), ("c", 1), ("d", 1)]


def test_top_categories_trim_and_skip_blank():
    rows = column("c", texts(" Pune", "Pune ", "   ") + [MISSING])
    assert compute_top_categories(rows, "c").top == [("Pune", 2)]


def test_top_categories_render_numbers_as_text():
    rows = column("code", numbers(7, 7) + [NumberCell(1.5)] + texts("x"))
    assert compute_top_categories(rows, "code").top == [("7", 2), ("1.5", 1), ("x", 1)]


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
