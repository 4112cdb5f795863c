"""
Custom exceptions for InvCalc.

Purpose
-------
Provides a unified exception hierarchy for consistent error handling
across all InvCalc modules. All exceptions inherit from InvCalcError,
enabling catch-all handling when needed.

Exception Hierarchy
-------------------
InvCalcError (base)
├── ConfigurationError - Invalid configuration files or settings
└── ValidationError - Input validation failures (also a ValueError)
    └── DateRangeError - Empty or inverted projection date range

An unreachable or already-reached savings goal is NOT an error: it is
reported through `invcalc.goals.GoalEstimate.status`.

Usage
-----
>>> from invcalc.exceptions import ValidationError, DateRangeError
>>>
>>> try:
...     result = project(config)
... except DateRangeError as e:
...     print(f"Nothing to project: {e}")
"""


class InvCalcError(Exception):
    """
    Base exception for all InvCalc errors.

    Examples
    --------
    >>> try:
    ...     project(config)
    ... except InvCalcError as e:
    ...     logger.error("Projection failed: %s", e)
    """
    pass


class ConfigurationError(InvCalcError):
    """
    Invalid configuration source.

    Raised when a configuration file cannot be read or decoded, such as:
    - Missing or unreadable JSON file
    - JSON document that is not an object

    Examples
    --------
    >>> raise ConfigurationError(
    ...     f"Config file {path} must contain a JSON object, got list."
    ... )
    """
    pass


class ValidationError(InvCalcError, ValueError):
    """
    Input validation failures.

    Raised when projection inputs fail validation checks, such as:
    - Non-numeric or non-finite amounts and rates
    - Negative monthly investment, inflation or goal amount
    - Missing custom rate when the CUSTOM index is selected

    Examples
    --------
    >>> raise ValidationError(
    ...     "custom_rate_percent is required when index is CUSTOM."
    ... )
    """
    pass


class DateRangeError(ValidationError):
    """
    Empty or inverted projection date range.

    Raised by `project()` when `start_date > end_date` and the caller asked
    for errors to be raised rather than an empty result.

    Examples
    --------
    >>> raise DateRangeError(
    ...     f"start_date {start} is after end_date {end}; "
    ...     f"no monthly contributions fall in the range."
    ... )
    """
    pass
