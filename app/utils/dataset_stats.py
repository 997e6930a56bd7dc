"""
Column classification, per-column numeric statistics and the top-values
breakdown for a parsed CSV.
"""

import math
from collections import Counter

import numpy as np
from pydantic import BaseModel

from app.core.config import NUMERIC_MAJORITY, OUTLIER_SIGMA, TOP_CATEGORY_LIMIT
from app.utils.csv_parser import MISSING, MissingCell, NumberCell, TextCell, cell_text


class ColumnClassification(BaseModel):
    numeric: list[str] = []
    categorical: list[str] = []


class NumericColumnStats(BaseModel):
    sum: float
    avg: float
    min: float
    max: float
    median: float
    count: int
    std: float
    outlier_count: int


class CategoricalTopValues(BaseModel):
    column: str
    top: list[tuple[str, int]]


# ======================================================
# COLUMN CLASSIFICATION
# ======================================================
def _is_valid(cell):
    if isinstance(cell, MissingCell):
        return False
    if isinstance(cell, TextCell):
        return cell.value != ""
    return True


def classify_columns(header, rows):
    """
    Split the header into numeric and categorical columns.

    A column is numeric when more than half of its non-empty cells are
    numbers. A column with no non-empty cells is categorical.
    """
    classification = ColumnClassification()

    for col in header:
        valid = [row.get(col, MISSING) for row in rows]
        valid = [cell for cell in valid if _is_valid(cell)]
        numeric_count = sum(1 for cell in valid if isinstance(cell, NumberCell))

        if numeric_count > len(valid) * NUMERIC_MAJORITY:
            classification.numeric.append(col)
        else:
            classification.categorical.append(col)

    return classification


# ======================================================
# NUMERIC STATISTICS
# ======================================================
def numeric_values(rows, col):
    """Finite numeric values of a column, sorted ascending."""
    values = [
        row[col].value
        for row in rows
        if isinstance(row.get(col), NumberCell) and math.isfinite(row[col].value)
    ]
    return np.sort(np.array(values, dtype=float))


def compute_numeric_stats(values):
    """
    Aggregate statistics for one column of sorted values.

    Returns None for an empty column. Variance is the population variance
    and an outlier is any value further than OUTLIER_SIGMA standard
    deviations from the mean.
    """
    count = len(values)
    if count == 0:
        return None

    total = float(values.sum())
    avg = total / count
    if count % 2 == 0:
        median = (values[count // 2 - 1] + values[count // 2]) / 2
    else:
        median = values[count // 2]

    variance = float(((values - avg) ** 2).sum()) / count
    std = math.sqrt(variance)
    # std == 0 with float residue in avg flags every differing value
    outlier_count = int((np.abs(values - avg) > OUTLIER_SIGMA * std).sum())

    return NumericColumnStats(
        sum=total,
        avg=avg,
        min=float(values[0]),
        max=float(values[-1]),
        median=float(median),
        count=count,
        std=std,
        outlier_count=outlier_count,
    )


def compute_column_stats(rows, numeric_cols):
    """Stats per numeric column, in column order. Empty columns are skipped."""
    stats = {}
    for col in numeric_cols:
        col_stats = compute_numeric_stats(numeric_values(rows, col))
        if col_stats is None:
            continue
        stats[col] = col_stats
    return stats


# ======================================================
# CATEGORICAL BREAKDOWN
# ======================================================
def compute_top_categories(rows, col, limit=TOP_CATEGORY_LIMIT):
    """
    Most frequent trimmed values of a column.

    Ties keep the order in which values were first seen.
    """
    freq = Counter()
    for row in rows:
        value = cell_text(row.get(col, MISSING)).strip()
        if value:
            freq[value] += 1

    return CategoricalTopValues(column=col, top=freq.most_common(limit))
