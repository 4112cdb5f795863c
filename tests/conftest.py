"""
Pytest configuration and fixtures for InvCalc test suite.

This module provides reusable fixtures for testing all InvCalc components.
Fixtures follow the principle of "arrange-act-assert" with clear separation.
"""

from datetime import date

import pytest

from invcalc.config import ProjectionConfig


# ---------------------------------------------------------------------------
# Date Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def start_date() -> date:
    """Standard start date for tests."""
    return date(2025, 1, 1)


@pytest.fixture
def end_date() -> date:
    """End date giving exactly 12 monthly contributions from start_date."""
    return date(2025, 12, 31)


# ---------------------------------------------------------------------------
# Config Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def make_config(start_date, end_date):
    """
    Factory for ProjectionConfig with sensible defaults.

    Defaults: 1,000/month, SP500 future (8%), compound, no inflation,
    no tax, no goal, 12 months.
    """
    def _make(**overrides) -> ProjectionConfig:
        fields = dict(
            start_date=start_date,
            end_date=end_date,
            monthly_investment=1000.0,
            index="SP500",
            mode="future",
            interest_type="compound",
            inflation_rate_percent=0.0,
            tax="none",
            goal_amount=0.0,
        )
        fields.update(overrides)
        return ProjectionConfig(**fields)

    return _make


@pytest.fixture
def sp500_config(make_config) -> ProjectionConfig:
    """One year of 1,000/month in the S&P 500 at the forward-looking 8%."""
    return make_config()


@pytest.fixture
def config_dict() -> dict:
    """Raw config fields as an input provider or JSON file would send them."""
    return {
        "start_date": "2025-01-01",
        "end_date": "2025-12-31",
        "monthly_investment": 500,
        "index": "NASDAQ",
        "mode": "past",
        "interest_type": "compound",
        "inflation_rate_percent": 2.0,
        "tax": "germany",
        "goal_amount": 10000,
    }
