from starlette.concurrency import run_in_threadpool

from app.api.schemas.schemas import Report, UploadedDataset
from app.utils.csv_parser import CSVParseError, EmptyCSVError, parse_csv
from app.utils.dataset_stats import (
    classify_columns,
    compute_column_stats,
    compute_top_categories,
)
from app.utils.formatters import format_count, format_metric, to_fixed


def _failure_report(badge, icon, what):
    return Report(badge=badge, icon=icon, what=what, why="", matters="", note="", chart=None)


def _empty_report():
    return _failure_report(
        "Analysis Failed", "❌",
        "The uploaded file appears to be empty or improperly formatted.",
    )


# ======================================================
# REPORT TEXT
# ======================================================
def compose_what(name, row_count, column_count, classification):
    return (
        f'Successfully analyzed "{name}" — '
        f"{format_count(row_count)} rows × {column_count} columns. "
        f"Found {len(classification.numeric)} numeric and "
        f"{len(classification.categorical)} categorical fields."
    )


def compose_why(stats):
    if not stats:
        return "No numeric columns found for statistical analysis."

    lines = []
    for col, s in stats.items():
        line = (
            f"• {col}: avg {format_metric(col, s.avg)}, "
            f"median {format_metric(col, s.median)}, "
            f"range [{format_metric(col, s.min)} – {format_metric(col, s.max)}]"
        )
        if s.outlier_count > 0:
            line += f" ⚠ {s.outlier_count} outliers detected"
        lines.append(line)

    return "\n".join(lines)


def compose_matters(top_categories, categorical_cols):
    text = ""
    if top_categories is not None and top_categories.top:
        pairs = ", ".join(f"{value} ({count})" for value, count in top_categories.top)
        text += f'Top values in "{top_categories.column}": {pairs}. '
    if len(categorical_cols) > 1:
        text += f"Other groupable fields: {', '.join(categorical_cols[1:])}. "
    text += "Ask follow-up questions to drill into specific columns or trends."
    return text


def compose_note(size, stats):
    text = f"File size: {to_fixed(size / 1024, 1)} KB. "
    total_outliers = sum(s.outlier_count for s in stats.values())
    if total_outliers > 0:
        text += (
            f"{total_outliers} statistical outliers detected across all numeric "
            "fields — review for data quality."
        )
    return text


# ======================================================
# ANALYZER
# ======================================================
def build_report(upload: UploadedDataset, table) -> Report:
    rows = table.rows
    classification = classify_columns(table.header, rows)
    stats = compute_column_stats(rows, classification.numeric)

    top_categories = None
    if classification.categorical:
        top_categories = compute_top_categories(rows, classification.categorical[0])

    return Report(
        badge="Dataset Analysis Complete",
        icon="📊",
        what=compose_what(upload.name, len(rows), len(table.header), classification),
        why=compose_why(stats),
        matters=compose_matters(top_categories, classification.categorical),
        note=compose_note(upload.size, stats),
        chart=None,
    )


async def analyze_csv(upload: UploadedDataset) -> Report:
    """
    Analyze an uploaded CSV and describe it as a Report.

    Never raises: empty files, parse failures and errors during analysis
    all come back as a Report describing the failure.
    """
    try:
        table = await run_in_threadpool(parse_csv, upload.content)
        if not table.rows:
            return _empty_report()
        report = build_report(upload, table)
    except EmptyCSVError:
        return _empty_report()
    except CSVParseError as e:
        print(f"❌ Could not parse {upload.name}: {e}")
        return _failure_report("Parse Error", "❌", f"Failed to read the CSV file: {e}")
    except Exception as e:
        print(f"❌ Error analyzing {upload.name}: {e}")
        return _failure_report(
            "Analysis Error", "⚠️",
            f"An error occurred while analyzing the dataset: {e}",
        )

    print(f"📊 Analyzed {upload.name}: {len(table.rows)} rows, {len(table.header)} columns")
    return report
