"""General utilities for InvCalc

Contents
--------
- Rate conversions (annual ↔ monthly, compounded)
- Calendar helpers (add_months, month_range, default_date_range)
- Display helpers (format_currency, currency_formatter)
"""

from __future__ import annotations

import math
from datetime import date, timedelta
from typing import Optional, Tuple

import pandas as pd

from .constants import CURRENCY_SYMBOL, DEFAULT_HORIZON_MONTHS, MONTHS_PER_YEAR, SERIES_INDEX_NAME
from .exceptions import ValidationError

__all__ = [
    # Rates
    "annual_to_monthly",
    "monthly_to_annual",
    # Calendar
    "add_months",
    "month_range",
    "default_date_range",
    # Display
    "format_currency",
    "currency_formatter",
]

# ---------------------------------------------------------------------------
# Rate conversions (compounded)
# ---------------------------------------------------------------------------

def annual_to_monthly(r_annual: float) -> float:
    """Convert nominal annual rate to equivalent compounded monthly rate.

    Uses: (1 + r_a) ** (1/12) - 1. Accepts negative values down to -1
    (total loss).
    """
    if r_annual < -1.0:
        raise ValidationError(f"annual rate must be >= -1, got {r_annual}")
    return float((1.0 + r_annual) ** (1.0 / MONTHS_PER_YEAR) - 1.0)


def monthly_to_annual(r_monthly: float) -> float:
    """Convert nominal monthly rate to equivalent compounded annual rate.

    Uses: (1 + r_m) ** 12 - 1. Accepts negative values as well.
    """
    return float((1.0 + r_monthly) ** MONTHS_PER_YEAR - 1.0)


# ---------------------------------------------------------------------------
# Calendar helpers
# ---------------------------------------------------------------------------

def add_months(start: date, months: int) -> date:
    """Shift *start* by a whole number of calendar months.

    Day-of-month is clamped to the end of shorter months:
    2024-01-31 + 1 month -> 2024-02-29.
    """
    shifted = pd.Timestamp(start) + pd.DateOffset(months=int(months))
    return shifted.date()


def month_range(start: date, end: date) -> pd.DatetimeIndex:
    """Monthly dates from *start* through *end* inclusive.

    Each point is ``start + k months`` (k = 0, 1, ...), anchored on *start*
    so a clamped month-end never drifts the following dates:

        2025-01-31, 2025-02-28, 2025-03-31, ...

    Returns an empty index when ``start > end``.
    """
    dates = []
    k = 0
    current = start
    while current <= end:
        dates.append(current)
        k += 1
        current = add_months(start, k)
    return pd.DatetimeIndex(pd.to_datetime(dates), name=SERIES_INDEX_NAME)


def default_date_range(today: Optional[date] = None) -> Tuple[date, date]:
    """
    Default projection window: one year of monthly contributions.

    Runs from the first day of the current month to the last day of the
    month eleven months later, i.e. twelve contribution dates.

    >>> default_date_range(date(2025, 3, 14))
    (datetime.date(2025, 3, 1), datetime.date(2026, 2, 28))
    """
    today = today or date.today()
    first = date(today.year, today.month, 1)
    last = add_months(first, DEFAULT_HORIZON_MONTHS) - timedelta(days=1)
    return first, last


# ---------------------------------------------------------------------------
# Display helpers
# ---------------------------------------------------------------------------

def format_currency(value: float, symbol: str = CURRENCY_SYMBOL) -> str:
    """
    Format a monetary value the en-US / USD way.

    Two decimals, comma grouping, sign before the symbol.

    Parameters
    ----------
    value : float
        Amount in dollars.
    symbol : str, default '$'
        Currency symbol prefix.

    Returns
    -------
    str
        Formatted currency string, or ``"n/a"`` for NaN/inf.

    Examples
    --------
    >>> format_currency(12486)
    '$12,486.00'
    >>> format_currency(-72.9)
    '-$72.90'
    """
    value = float(value)
    if not math.isfinite(value):
        return "n/a"
    text = f"{symbol}{abs(value):,.2f}"
    return f"-{text}" if value < 0 and text != f"{symbol}0.00" else text


def currency_formatter(x, pos):
    """
    Format axis ticks as currency for matplotlib FuncFormatter.

    Examples
    --------
    >>> from matplotlib.ticker import FuncFormatter
    >>> ax.yaxis.set_major_formatter(FuncFormatter(currency_formatter))
    """
    return format_currency(x)
