"""
Capital gains tax for InvCalc.

Flat, simplified rates applied once to the final gain of a projection
(total value minus invested principal). Rates are not bracketed and do not
distinguish short- from long-term holdings. A loss produces a negative tax,
i.e. a refund; the amount is never floored at zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from .config import TaxJurisdiction
from .constants import GERMANY_CAPITAL_GAINS_RATE, US_CAPITAL_GAINS_RATE
from .exceptions import ValidationError

__all__ = [
    "TAX_RATES",
    "TaxSummary",
    "tax_rate",
    "apply_tax",
]


TAX_RATES = MappingProxyType({
    TaxJurisdiction.NONE: 0.0,
    TaxJurisdiction.US: US_CAPITAL_GAINS_RATE,
    TaxJurisdiction.GERMANY: GERMANY_CAPITAL_GAINS_RATE,
})


@dataclass(frozen=True)
class TaxSummary:
    rate: float
    gain_before_tax: float
    tax_paid: float
    total_after_tax: float


def tax_rate(jurisdiction: TaxJurisdiction | str) -> float:
    """Flat capital gains rate of *jurisdiction* as a decimal."""
    try:
        return TAX_RATES[TaxJurisdiction(jurisdiction)]
    except ValueError as e:
        raise ValidationError(str(e)) from e


def apply_tax(total: float, invested: float, jurisdiction: TaxJurisdiction | str) -> TaxSummary:
    """
    Tax the gain of a final portfolio value.

    >>> s = apply_tax(12486.0, 12000.0, "us")
    >>> round(s.tax_paid, 2), round(s.total_after_tax, 2)
    (72.9, 12413.1)
    """
    rate = tax_rate(jurisdiction)
    gain = total - invested
    tax = gain * rate
    return TaxSummary(
        rate=rate,
        gain_before_tax=gain,
        tax_paid=tax,
        total_after_tax=total - tax,
    )
