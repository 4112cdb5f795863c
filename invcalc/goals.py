"""
Goal estimation for InvCalc.

Purpose
-------
Closed-form estimate of how many further months a portfolio needs to reach a
target value, extrapolating geometrically from the final (inflation-adjusted)
balance of a projection at its monthly rate:

    n = ceil( ln(goal / W_T) / ln(1 + r_m) )

No further contributions are assumed and nothing is re-simulated.

Degenerate cases are reported through `GoalStatus` instead of a month count,
so a caller can never mistake them for a real estimate:

- ALREADY_REACHED: the final balance already meets the goal (n <= 0).
- UNREACHABLE: the balance is not positive, the monthly rate is not
  positive, or the formula is not finite.

Example
-------
>>> est = estimate_months_to_goal(total=12486.0, goal_amount=13000.0,
...                               monthly_rate=0.006434)
>>> est.status, est.months
(<GoalStatus.REACHABLE: 'reachable'>, 7)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .exceptions import ValidationError

__all__ = [
    "GoalStatus",
    "GoalEstimate",
    "estimate_months_to_goal",
]


class GoalStatus(str, Enum):
    REACHABLE = "reachable"
    ALREADY_REACHED = "already_reached"
    UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class GoalEstimate:
    """
    Outcome of a months-to-goal estimate.

    Parameters
    ----------
    goal_amount : float
        Target portfolio value (> 0).
    status : GoalStatus
        Whether the estimate is a real month count.
    months : int, optional
        Months after the end of the projection, set only when status is
        REACHABLE (always >= 1).
    """
    goal_amount: float
    status: GoalStatus
    months: Optional[int] = None

    def __post_init__(self):
        if (self.status is GoalStatus.REACHABLE) != (self.months is not None):
            raise ValueError(
                f"months must be set exactly when status is reachable "
                f"(status={self.status.value}, months={self.months})"
            )

    @property
    def is_defined(self) -> bool:
        return self.status is GoalStatus.REACHABLE

    def describe(self) -> str:
        """Short display text: the month count or why there is none."""
        if self.status is GoalStatus.REACHABLE:
            return str(self.months)
        if self.status is GoalStatus.ALREADY_REACHED:
            return "n/a (already reached)"
        return "n/a (unreachable)"


def estimate_months_to_goal(total: float, goal_amount: float, monthly_rate: float) -> GoalEstimate:
    """
    Months needed for *total* to grow to *goal_amount* at *monthly_rate*.

    Parameters
    ----------
    total : float
        Final balance of the projection.
    goal_amount : float
        Target value, must be > 0.
    monthly_rate : float
        Monthly-equivalent return.

    Returns
    -------
    GoalEstimate

    Raises
    ------
    ValidationError
        If ``goal_amount`` is not a positive finite number.
    """
    if not math.isfinite(goal_amount) or goal_amount <= 0:
        raise ValidationError(f"goal_amount must be a positive finite number, got {goal_amount}")

    if total >= goal_amount:
        return GoalEstimate(goal_amount, GoalStatus.ALREADY_REACHED)
    if total <= 0 or monthly_rate <= 0 or not math.isfinite(total):
        return GoalEstimate(goal_amount, GoalStatus.UNREACHABLE)

    n = math.log(goal_amount / total) / math.log1p(monthly_rate)
    if not math.isfinite(n):
        return GoalEstimate(goal_amount, GoalStatus.UNREACHABLE)

    months = math.ceil(n)
    if months <= 0:
        return GoalEstimate(goal_amount, GoalStatus.ALREADY_REACHED)
    return GoalEstimate(goal_amount, GoalStatus.REACHABLE, months)
