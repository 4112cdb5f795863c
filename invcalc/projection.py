"""
Projection engine for InvCalc.

Purpose
-------
Projects the value of a recurring monthly investment over a calendar range.
`project()` is a pure function of a `ProjectionConfig`: it resolves the
return rate, accumulates month by month, applies tax to the final gain and
optionally estimates the months needed to reach a savings goal.

Key Mathematical Framework
--------------------------
- Monthly rate: r_m = (1 + r_a)^(1/12) - 1
- Compound:     W_t = (W_{t-1} + A) (1 + r_m)
- Simple:       W_t = W_{t-1} + A + I_t r_m,   I_t = t A (invested principal)
- Inflation:    W_t <- W_t / (1 + i_a / 12)    applied every month
- Tax:          T = (W_T - I_T) tau,           W_T^net = W_T - T

Inflation is deflated at the naive annual/12 rate while returns use the
geometric monthly equivalent.

Example
-------
>>> from datetime import date
>>> from invcalc.config import ProjectionConfig
>>> config = ProjectionConfig(
...     start_date=date(2025, 1, 1), end_date=date(2025, 12, 1),
...     monthly_investment=1000.0, index="SP500", mode="future",
... )
>>> result = project(config)
>>> result.months, result.total_invested
(12, 12000.0)
>>> result.series.tail(1)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional, Tuple

import numpy as np
import pandas as pd

from .config import InterestType, ProjectionConfig
from .constants import MONTHS_PER_YEAR, SERIES_INDEX_NAME, SERIES_NAME
from .exceptions import DateRangeError, ValidationError
from .goals import GoalEstimate, GoalStatus, estimate_months_to_goal
from .indexes import resolve_annual_rate
from .tax import apply_tax
from .utils import annual_to_monthly, month_range

__all__ = [
    "ProjectionResult",
    "project",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProjectionResult:
    """
    Summary figures and monthly trajectory of one projection.

    Attributes
    ----------
    total_before_tax : float
        Final inflation-adjusted portfolio value.
    total_after_tax : float
        ``total_before_tax - tax_paid``.
    total_invested : float
        ``monthly_investment * months``.
    gain_after_tax : float
        ``total_after_tax - total_invested``.
    tax_paid : float
        Tax on the final gain; negative for a loss.
    months : int
        Number of monthly contributions (length of ``series``).
    annual_rate, monthly_rate : float
        Resolved annual return and its monthly equivalent.
    goal : GoalEstimate, optional
        Present only when the config has a goal amount > 0.
    series : pd.Series
        Portfolio value after each month's inflation adjustment, indexed by
        contribution date.
    """
    total_before_tax: float
    total_after_tax: float
    total_invested: float
    gain_after_tax: float
    tax_paid: float
    months: int
    annual_rate: float
    monthly_rate: float
    goal: Optional[GoalEstimate]
    series: pd.Series

    @property
    def months_to_goal(self) -> Optional[int]:
        """Month estimate, or None if there is no goal or it is undefined."""
        return self.goal.months if self.goal is not None else None

    @property
    def is_empty(self) -> bool:
        return self.months == 0

    @classmethod
    def empty(cls, config: ProjectionConfig, *, annual_rate: float = 0.0, monthly_rate: float = 0.0) -> "ProjectionResult":
        """Zero totals and an empty series, for a range with no contribution dates."""
        goal = GoalEstimate(config.goal_amount, GoalStatus.UNREACHABLE) if config.has_goal else None
        return cls(
            total_before_tax=0.0,
            total_after_tax=0.0,
            total_invested=0.0,
            gain_after_tax=0.0,
            tax_paid=0.0,
            months=0,
            annual_rate=annual_rate,
            monthly_rate=monthly_rate,
            goal=goal,
            series=_build_series([], pd.DatetimeIndex([], name=SERIES_INDEX_NAME)),
        )

    def summary(self) -> List[Tuple[str, str]]:
        """Formatted label/value rows, see `invcalc.reporting.summary_rows`."""
        from .reporting import summary_rows
        return summary_rows(self)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation (ISO dates, plain floats)."""
        data: Dict[str, Any] = {
            "total_before_tax": self.total_before_tax,
            "total_after_tax": self.total_after_tax,
            "total_invested": self.total_invested,
            "gain_after_tax": self.gain_after_tax,
            "tax_paid": self.tax_paid,
            "months": self.months,
            "annual_rate": self.annual_rate,
            "monthly_rate": self.monthly_rate,
            "goal": None,
            "series": [
                {"date": ts.date().isoformat(), "value": float(v)}
                for ts, v in self.series.items()
            ],
        }
        if self.goal is not None:
            data["goal"] = {
                "goal_amount": self.goal.goal_amount,
                "status": self.goal.status.value,
                "months": self.goal.months,
            }
        return data


def _build_series(values: List[float], index: pd.DatetimeIndex) -> pd.Series:
    return pd.Series(np.asarray(values, dtype=float), index=index, name=SERIES_NAME)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

def project(
    config: ProjectionConfig,
    *,
    errors: Literal["raise", "empty"] = "raise",
) -> ProjectionResult:
    """
    Project a recurring monthly investment over the configured date range.

    Order of operations (per month, starting at ``start_date``):
      1) Add the contribution to the invested principal.
      2) Accrue return: compound on the whole balance including the new
         contribution, or simple on the invested principal only.
      3) Deflate the balance by ``1 + inflation / 12``.
      4) Record the balance at the contribution date.
      5) Move to ``start_date + k months`` (clamped to month end).

    Parameters
    ----------
    config : ProjectionConfig
        Immutable projection input.
    errors : {"raise", "empty"}, default "raise"
        Behaviour for an inverted range (``start_date > end_date``):
        - "raise": raise DateRangeError
        - "empty": return `ProjectionResult.empty(config)`

    Returns
    -------
    ProjectionResult

    Raises
    ------
    DateRangeError
        If the range is inverted and ``errors="raise"``.
    ValidationError
        If the rate cannot be resolved (e.g. missing custom rate) or the
        balance overflows to a non-finite value.
    ValueError
        If ``errors`` is not 'raise' or 'empty'.
    """
    if errors not in ("raise", "empty"):
        raise ValueError(f"errors must be 'raise' or 'empty', got: {errors}")

    annual_rate = resolve_annual_rate(config.index, config.mode, config.custom_rate_percent)
    monthly_rate = annual_to_monthly(annual_rate)

    dates = month_range(config.start_date, config.end_date)
    if len(dates) == 0:
        logger.warning(
            "empty projection range start=%s end=%s",
            config.start_date.isoformat(), config.end_date.isoformat(),
        )
        if errors == "raise":
            raise DateRangeError(
                f"start_date {config.start_date} is after end_date {config.end_date}; "
                f"no monthly contributions fall in the range."
            )
        return ProjectionResult.empty(config, annual_rate=annual_rate, monthly_rate=monthly_rate)

    contribution = float(config.monthly_investment)
    inflation_factor = 1.0 + config.inflation_rate / MONTHS_PER_YEAR
    compound = InterestType(config.interest_type) is InterestType.COMPOUND

    total = 0.0
    invested = 0.0
    values: List[float] = []
    for n, _ in enumerate(dates, start=1):
        invested = contribution * n
        if compound:
            total = (total + contribution) * (1.0 + monthly_rate)
        else:
            total += contribution + invested * monthly_rate
        total /= inflation_factor
        values.append(total)

    if not (math.isfinite(total) and math.isfinite(invested)):
        raise ValidationError(
            f"projection overflowed: monthly_investment {config.monthly_investment} "
            f"over {len(values)} months exceeds the representable range."
        )

    taxed = apply_tax(total, invested, config.tax)
    goal = (
        estimate_months_to_goal(total, config.goal_amount, monthly_rate)
        if config.has_goal else None
    )

    logger.debug(
        "projected months=%d invested=%.2f total=%.2f tax=%.2f goal=%s",
        len(values), invested, total, taxed.tax_paid,
        goal.status.value if goal is not None else "-",
    )

    return ProjectionResult(
        total_before_tax=total,
        total_after_tax=taxed.total_after_tax,
        total_invested=invested,
        gain_after_tax=taxed.total_after_tax - invested,
        tax_paid=taxed.tax_paid,
        months=len(values),
        annual_rate=annual_rate,
        monthly_rate=monthly_rate,
        goal=goal,
        series=_build_series(values, dates),
    )
