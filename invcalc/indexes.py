"""
Assumed index returns for InvCalc.

Purpose
-------
Static reference table of annual nominal returns per market index, with a
historical ("past") and a forward-looking ("future") assumption each, and the
rate-resolution step of the projection engine.

Key components
--------------
- IndexReturns:
    Pair of decimal annual rates (past, future). `IndexReturns.custom()`
    builds the pair for a user-supplied rate, identical in both modes.

- INDEX_RETURNS:
    Read-only mapping IndexKey -> IndexReturns. CUSTOM is not stored; it is
    resolved per call from the config's custom rate.

- resolve_annual_rate:
    Picks the annual rate for an index/mode pair.

Example
-------
>>> resolve_annual_rate(IndexKey.SP500, ReturnMode.FUTURE)
0.08
>>> resolve_annual_rate(IndexKey.CUSTOM, ReturnMode.PAST, custom_rate_percent=10)
0.1
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from .config import IndexKey, ReturnMode
from .constants import MIN_ANNUAL_RATE_PERCENT
from .exceptions import ValidationError

__all__ = [
    "IndexReturns",
    "INDEX_RETURNS",
    "resolve_annual_rate",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexReturns:
    """
    Assumed annual nominal returns of one index, as decimals (0.10 = 10%/yr).

    Parameters
    ----------
    past : float
        Historical average annual return.
    future : float
        Forward-looking annual return assumption.
    """
    past: float
    future: float

    def for_mode(self, mode: ReturnMode) -> float:
        return self.past if ReturnMode(mode) is ReturnMode.PAST else self.future

    @classmethod
    def custom(cls, rate_percent: float) -> "IndexReturns":
        """User-defined rate: the same value for both modes."""
        if rate_percent is None or not math.isfinite(rate_percent):
            raise ValidationError(
                f"custom rate must be a finite number of percent, got {rate_percent!r}"
            )
        if rate_percent < MIN_ANNUAL_RATE_PERCENT:
            raise ValidationError(
                f"custom rate must be >= {MIN_ANNUAL_RATE_PERCENT:g}%, got {rate_percent!r}"
            )
        rate = float(rate_percent) / 100.0
        return cls(past=rate, future=rate)


INDEX_RETURNS: Mapping[IndexKey, IndexReturns] = MappingProxyType({
    IndexKey.SP500: IndexReturns(past=0.10, future=0.08),
    IndexKey.STOXX600: IndexReturns(past=0.08, future=0.07),
    IndexKey.NIKKEI225: IndexReturns(past=0.09, future=0.07),
    IndexKey.MSCIWORLD: IndexReturns(past=0.09, future=0.075),
    IndexKey.NASDAQ: IndexReturns(past=0.12, future=0.10),
    IndexKey.RUSSELL2000: IndexReturns(past=0.11, future=0.09),
})


def resolve_annual_rate(
    index: IndexKey | str,
    mode: ReturnMode | str,
    custom_rate_percent: Optional[float] = None,
) -> float:
    """
    Annual return used for a projection.

    Parameters
    ----------
    index : IndexKey or str
        Index key; CUSTOM selects ``custom_rate_percent``.
    mode : ReturnMode or str
        "past" or "future". Irrelevant for CUSTOM.
    custom_rate_percent : float, optional
        Annual rate in percent, required for CUSTOM.

    Returns
    -------
    float
        Decimal annual rate.

    Raises
    ------
    ValidationError
        Unknown index or mode, or a missing/non-finite custom rate.
    """
    try:
        key = IndexKey(index)
        mode = ReturnMode(mode)
    except ValueError as e:
        raise ValidationError(str(e)) from e

    if key is IndexKey.CUSTOM:
        returns = IndexReturns.custom(custom_rate_percent)
    else:
        returns = INDEX_RETURNS[key]

    rate = returns.for_mode(mode)
    logger.debug("resolved annual rate index=%s mode=%s rate=%.6f", key.value, mode.value, rate)
    return rate
