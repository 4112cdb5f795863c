"""Summary lines of a projection result for display (CLI, notebooks)."""

from __future__ import annotations

from typing import List, Tuple

import pandas as pd

from .projection import ProjectionResult
from .utils import format_currency

__all__ = [
    "summary_rows",
    "summary_text",
    "series_frame",
]


def summary_rows(result: ProjectionResult) -> List[Tuple[str, str]]:
    """
    Label/value pairs in display order.

    The months-to-goal row is present only when a goal was requested.
    """
    rows = [
        ("Total (Before Tax)", format_currency(result.total_before_tax)),
        ("Total (After Tax)", format_currency(result.total_after_tax)),
        ("Invested", format_currency(result.total_invested)),
        ("Gained (After Tax)", format_currency(result.gain_after_tax)),
        ("Tax Paid", format_currency(result.tax_paid)),
    ]
    if result.goal is not None:
        rows.append(("Months to reach goal", result.goal.describe()))
    return rows


def summary_text(result: ProjectionResult) -> str:
    return "\n".join(f"{label}: {value}" for label, value in summary_rows(result))


def series_frame(result: ProjectionResult) -> pd.DataFrame:
    """Series as a two-column table with formatted currency values."""
    return pd.DataFrame({
        "date": [ts.date().isoformat() for ts in result.series.index],
        "value": [format_currency(v) for v in result.series.to_numpy()],
    })
