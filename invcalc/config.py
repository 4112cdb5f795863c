"""
Configuration management module for InvCalc.

Purpose
-------
Centralized configuration using Pydantic models for type-safe parameter management,
validation, and serialization. A `ProjectionConfig` is the single immutable input
of the projection engine: the input provider (CLI, notebook, web form) builds a
fresh one for every recalculation instead of sharing mutable selection state.

Design Principles
-----------------
- Type-safe: Pydantic enforces types and validates ranges
- Immutable: Frozen models prevent accidental mutation
- Serializable: Easy conversion to/from JSON for the CLI's --config option
- Environment-aware: AppSettings reads INVCALC_* variables and .env files

Example
-------
>>> from datetime import date
>>> from invcalc.config import ProjectionConfig
>>> config = ProjectionConfig(
...     start_date=date(2025, 1, 1),
...     end_date=date(2025, 12, 31),
...     monthly_investment=1000.0,
...     index="SP500",
...     mode="future",
... )
>>> config.model_dump_json()
>>> ProjectionConfig.model_validate_json('{"start_date": "2025-01-01", ...}')
"""

from __future__ import annotations
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Tuple
import json
import math

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_DPI, MIN_ANNUAL_RATE_PERCENT
from .exceptions import ConfigurationError, ValidationError
from .utils import default_date_range

__all__ = [
    "IndexKey",
    "ReturnMode",
    "InterestType",
    "TaxJurisdiction",
    "ProjectionConfig",
    "AppSettings",
    "read_config_file",
]


# ---------------------------------------------------------------------------
# Enumerated choices
# ---------------------------------------------------------------------------

class IndexKey(str, Enum):
    """Market indexes with assumed annual returns, plus a user-defined rate."""

    SP500 = "SP500"
    STOXX600 = "STOXX600"
    NIKKEI225 = "NIKKEI225"
    MSCIWORLD = "MSCIWORLD"
    NASDAQ = "NASDAQ"
    RUSSELL2000 = "RUSSELL2000"
    CUSTOM = "CUSTOM"


class ReturnMode(str, Enum):
    """Which assumed annual return to use: historical or forward-looking."""

    PAST = "past"
    FUTURE = "future"


class InterestType(str, Enum):
    SIMPLE = "simple"
    COMPOUND = "compound"


class TaxJurisdiction(str, Enum):
    NONE = "none"
    US = "us"
    GERMANY = "germany"


# ---------------------------------------------------------------------------
# Projection Configuration
# ---------------------------------------------------------------------------

class ProjectionConfig(BaseModel):
    """
    Input of a single projection run.

    Attributes
    ----------
    start_date, end_date : date
        First and last calendar dates of the contribution schedule. Their
        ordering is checked by the engine, not here, so an inverted range can
        still be projected to an empty result with ``errors="empty"``.
    monthly_investment : float
        Contribution added every month (>= 0).
    index : IndexKey
        Market index whose assumed return is used, or CUSTOM.
    mode : ReturnMode
        "past" (historical) or "future" (forward-looking) annual return.
    interest_type : InterestType
        "compound" or "simple" accrual.
    custom_rate_percent : float, optional
        Annual return in percent, required when ``index`` is CUSTOM and
        ignored otherwise.
    inflation_rate_percent : float
        Annual inflation in percent (>= 0), deflated monthly at rate/12.
    tax : TaxJurisdiction
        Flat capital-gains regime applied to the final gain.
    goal_amount : float
        Target portfolio value; 0 disables the months-to-goal estimate.

    Examples
    --------
    >>> config = ProjectionConfig(
    ...     start_date=date(2025, 1, 1), end_date=date(2025, 12, 1),
    ...     monthly_investment=1000, index="CUSTOM", custom_rate_percent=10,
    ... )
    >>> config.index
    <IndexKey.CUSTOM: 'CUSTOM'>
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    start_date: date = Field(description="First contribution date")
    end_date: date = Field(description="Last date of the projection range (inclusive)")
    monthly_investment: float = Field(
        ge=0,
        allow_inf_nan=False,
        description="Monthly contribution amount"
    )
    index: IndexKey = Field(
        default=IndexKey.SP500,
        description="Market index providing the assumed annual return"
    )
    mode: ReturnMode = Field(
        default=ReturnMode.FUTURE,
        description="Historical (past) or forward-looking (future) return"
    )
    interest_type: InterestType = Field(
        default=InterestType.COMPOUND,
        description="Compound or simple interest accrual"
    )
    custom_rate_percent: Optional[float] = Field(
        default=None,
        description="Annual return in percent when index is CUSTOM"
    )
    inflation_rate_percent: float = Field(
        default=0.0,
        ge=0,
        allow_inf_nan=False,
        description="Annual inflation rate in percent"
    )
    tax: TaxJurisdiction = Field(
        default=TaxJurisdiction.NONE,
        description="Capital gains tax regime"
    )
    goal_amount: float = Field(
        default=0.0,
        ge=0,
        allow_inf_nan=False,
        description="Target portfolio value (0 = no goal)"
    )

    @model_validator(mode="after")
    def validate_custom_rate(self):
        """CUSTOM index needs an explicit rate."""
        if self.index is IndexKey.CUSTOM and self.custom_rate_percent is None:
            raise ValueError("custom_rate_percent is required when index is CUSTOM")
        if self.custom_rate_percent is not None and not math.isfinite(self.custom_rate_percent):
            raise ValueError(f"custom_rate_percent must be finite, got {self.custom_rate_percent}")
        if self.custom_rate_percent is not None and self.custom_rate_percent < MIN_ANNUAL_RATE_PERCENT:
            raise ValueError(
                f"custom_rate_percent must be >= {MIN_ANNUAL_RATE_PERCENT:g}, "
                f"got {self.custom_rate_percent}"
            )
        return self

    @property
    def inflation_rate(self) -> float:
        """Annual inflation as a decimal."""
        return self.inflation_rate_percent / 100.0

    @property
    def has_goal(self) -> bool:
        return self.goal_amount > 0

    @staticmethod
    def default_range(today: Optional[date] = None) -> Tuple[date, date]:
        """First day of this month through the end of the twelfth month."""
        return default_date_range(today)

    @classmethod
    def create(cls, **fields) -> "ProjectionConfig":
        """
        Build a config from raw input values.

        Missing dates fall back to `default_range()`. Any validation failure
        is re-raised as `invcalc.exceptions.ValidationError` with one line
        per offending field.

        Raises
        ------
        ValidationError
            If a field is missing, non-numeric, non-finite or out of range.
        """
        if fields.get("start_date") is None or fields.get("end_date") is None:
            start, end = default_date_range()
            if fields.get("start_date") is None:
                fields["start_date"] = start
            if fields.get("end_date") is None:
                fields["end_date"] = end
        try:
            return cls(**fields)
        except PydanticValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
                for err in e.errors()
            )
            raise ValidationError(f"Invalid projection config: {details}") from e


def read_config_file(path: Path) -> Dict[str, Any]:
    """
    Read raw ProjectionConfig fields from a JSON file.

    Values are returned undecoded so callers can merge overrides before
    building the config with `ProjectionConfig.create`.

    Raises
    ------
    ConfigurationError
        If the file cannot be read, is not valid JSON, or is not an object.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {path} must contain a JSON object, got {type(data).__name__}."
        )
    return data


# ---------------------------------------------------------------------------
# Application Settings (Environment Variables)
# ---------------------------------------------------------------------------

class AppSettings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Supports .env files for local development. Environment variables
    should be prefixed with INVCALC_ (e.g., INVCALC_LOG_LEVEL=DEBUG).

    Attributes
    ----------
    log_level : str
        Logging level: "DEBUG", "INFO", "WARNING", "ERROR"
    figure_dpi : int
        Resolution used when the CLI saves a chart

    Examples
    --------
    >>> settings = AppSettings()
    >>> settings.log_level
    'WARNING'
    """

    model_config = SettingsConfigDict(
        env_prefix="INVCALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level"
    )
    figure_dpi: int = Field(
        default=DEFAULT_DPI,
        ge=50,
        le=600,
        description="DPI for saved charts"
    )
