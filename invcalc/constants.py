"""
Global constants for InvCalc.

Purpose
-------
Centralizes default values and magic numbers used throughout the InvCalc
codebase: calendar sizes, tax rates, display conventions and plotting
defaults.

Usage
-----
>>> from invcalc.constants import MONTHS_PER_YEAR, DEFAULT_FIGSIZE
>>> fig, ax = plt.subplots(figsize=DEFAULT_FIGSIZE)

Categories
----------
- Time: Calendar conversions
- Tax: Flat capital-gains rates per jurisdiction
- Display: Currency formatting and series labels
- Plotting: Figure sizes, colors, transparency values
"""

from typing import Tuple

__all__ = [
    # Time
    "MONTHS_PER_YEAR",
    "DEFAULT_HORIZON_MONTHS",
    # Rates
    "MIN_ANNUAL_RATE_PERCENT",
    # Tax
    "US_CAPITAL_GAINS_RATE",
    "GERMANY_CAPITAL_GAINS_RATE",
    # Display
    "CURRENCY_SYMBOL",
    "CURRENCY_CODE",
    "SERIES_NAME",
    "SERIES_INDEX_NAME",
    # Plotting
    "DEFAULT_FIGSIZE",
    "DEFAULT_LINE_COLOR",
    "DEFAULT_FILL_ALPHA",
    "DEFAULT_LINEWIDTH",
    "DEFAULT_DPI",
]


# =============================================================================
# Time
# =============================================================================

MONTHS_PER_YEAR: int = 12
"""Number of months in a year (used for rate conversions)."""

DEFAULT_HORIZON_MONTHS: int = 12
"""Number of monthly contributions in the default date range."""


# =============================================================================
# Rates
# =============================================================================

MIN_ANNUAL_RATE_PERCENT: float = -100.0
"""Lowest annual return in percent (total loss); below it (1 + r) is negative."""


# =============================================================================
# Tax
# =============================================================================

US_CAPITAL_GAINS_RATE: float = 0.15
"""Simplified US long-term capital gains rate (flat, no brackets)."""

GERMANY_CAPITAL_GAINS_RATE: float = 0.25
"""Simplified German capital gains rate (Abgeltungsteuer, no solidarity surcharge)."""


# =============================================================================
# Display
# =============================================================================

CURRENCY_SYMBOL: str = "$"
CURRENCY_CODE: str = "USD"

SERIES_NAME: str = "Portfolio Value"
"""Label of the projected series (legend entry and pandas Series name)."""

SERIES_INDEX_NAME: str = "date"


# =============================================================================
# Plotting Defaults
# =============================================================================

DEFAULT_FIGSIZE: Tuple[int, int] = (12, 6)
"""Default figure size (width, height) in inches."""

DEFAULT_LINE_COLOR: str = "#4CAF50"

DEFAULT_FILL_ALPHA: float = 0.1
"""Alpha of the area under the portfolio value line."""

DEFAULT_LINEWIDTH: float = 2.0

DEFAULT_DPI: int = 150
"""Resolution used when saving figures."""
