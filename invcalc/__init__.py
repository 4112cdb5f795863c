"""
InvCalc - Monthly Investment Projection Calculator

Projects the future value of a recurring monthly investment over a date
range under index return, inflation and tax assumptions.

Modules
-------
- config     : ProjectionConfig (immutable input), enums, AppSettings
- indexes    : Assumed annual returns per index, rate resolution
- projection : Projection engine (`project`) and ProjectionResult
- tax        : Flat capital gains tax
- goals      : Months-to-goal estimate
- reporting  : Display rows for a result
- plotting   : Matplotlib chart of the projected series
- utils      : Shared utilities (rates, calendar, currency)
"""

from .config import (
    IndexKey,
    InterestType,
    ProjectionConfig,
    ReturnMode,
    TaxJurisdiction,
)
from .exceptions import DateRangeError, InvCalcError, ValidationError
from .goals import GoalEstimate, GoalStatus
from .projection import ProjectionResult, project
from . import utils
