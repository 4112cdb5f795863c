"""
Unit tests for CLI module.

Tests command-line interface functionality using Click's testing utilities.
"""

import json
import logging
import pytest
from click.testing import CliRunner

from invcalc.cli import main, __version__


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop the handler bound to the runner's stderr after each invocation."""
    yield
    logging.getLogger("invcalc").handlers = []


@pytest.fixture
def base_args():
    """One year of 1,000/month in the S&P 500."""
    return ["--start", "2025-01-01", "--end", "2025-12-31", "--monthly", "1000"]


@pytest.fixture
def temp_config(tmp_path, config_dict):
    """Create temporary config file."""
    config_file = tmp_path / "plan.json"
    with open(config_file, "w") as f:
        json.dump(config_dict, f)
    return config_file


# ============================================================================
# MAIN COMMAND TESTS
# ============================================================================

class TestMainCommand:
    """Test main CLI entry point."""

    def test_main_help(self, runner):
        """Test main --help shows help message."""
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "InvCalc" in result.output
        assert "project" in result.output
        assert "indexes" in result.output

    def test_main_version(self, runner):
        """Test main --version shows version."""
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_log_level_option(self, runner):
        result = runner.invoke(main, ["--log-level", "DEBUG", "indexes"])
        assert result.exit_code == 0


# ============================================================================
# PROJECT COMMAND TESTS
# ============================================================================

class TestProjectCommand:
    """Test project command."""

    def test_project_help(self, runner):
        result = runner.invoke(main, ["project", "--help"])
        assert result.exit_code == 0
        assert "--monthly" in result.output
        assert "--custom-rate" in result.output

    def test_project_table(self, runner, base_args):
        result = runner.invoke(main, ["project", *base_args])

        assert result.exit_code == 0, result.output
        assert "Total (Before Tax)" in result.output
        assert "$12,000.00" in result.output
        assert "Value (USD)" in result.output

    def test_rate_below_total_loss_fails(self, runner, base_args):
        result = runner.invoke(main, [
            "project", *base_args, "--index", "CUSTOM", "--custom-rate", "-150",
        ])

        assert result.exit_code == 1
        assert "custom_rate_percent" in result.output

    def test_overflow_fails_cleanly(self, runner):
        result = runner.invoke(main, [
            "project", "--start", "2025-01-01", "--end", "2025-12-31",
            "--monthly", "1e308", "--json",
        ])

        assert result.exit_code == 1
        assert "overflowed" in result.output
        assert "NaN" not in result.output

    def test_project_quiet(self, runner, base_args):
        result = runner.invoke(main, ["--quiet", "project", *base_args, "--tax", "us"])

        assert result.exit_code == 0, result.output
        assert "Invested: $12,000.00" in result.output
        assert "Tax Paid: $" in result.output

    def test_project_json(self, runner, base_args):
        result = runner.invoke(main, ["project", *base_args, "--goal", "13000", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["months"] == 12
        assert data["total_invested"] == 12000.0
        assert data["total_before_tax"] == pytest.approx(12513.9, abs=0.5)
        assert data["goal"]["months"] == 6

    def test_project_custom_rate(self, runner, base_args):
        result = runner.invoke(main, [
            "project", *base_args, "--index", "CUSTOM", "--custom-rate", "0", "--json",
        ])

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["total_before_tax"] == pytest.approx(12000.0)

    def test_choices_case_insensitive(self, runner, base_args):
        result = runner.invoke(main, [
            "project", *base_args, "--index", "nasdaq", "--mode", "PAST", "--json",
        ])

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["annual_rate"] == 0.12

    def test_project_series(self, runner, base_args):
        result = runner.invoke(main, ["--quiet", "project", *base_args, "--series"])

        assert result.exit_code == 0, result.output
        assert "2025-01-01" in result.output
        assert "2025-12-01" in result.output

    def test_custom_without_rate_fails(self, runner, base_args):
        result = runner.invoke(main, ["project", *base_args, "--index", "CUSTOM"])

        assert result.exit_code == 1
        assert "custom_rate_percent" in result.output

    def test_inverted_range_fails(self, runner):
        result = runner.invoke(main, [
            "project", "--start", "2025-06-01", "--end", "2025-01-01", "--monthly", "100",
        ])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_negative_investment_fails(self, runner, base_args):
        result = runner.invoke(main, ["project", "--start", "2025-01-01", "--monthly", "-5"])

        assert result.exit_code == 1
        assert "monthly_investment" in result.output

    def test_missing_investment_fails(self, runner):
        result = runner.invoke(main, ["project"])
        assert result.exit_code == 1

    def test_invalid_index_choice(self, runner, base_args):
        result = runner.invoke(main, ["project", *base_args, "--index", "FTSE"])
        assert result.exit_code == 2

    def test_project_from_config(self, runner, temp_config):
        result = runner.invoke(main, ["project", "--config", str(temp_config), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["annual_rate"] == 0.12
        assert data["total_invested"] == 6000.0

    def test_options_override_config(self, runner, temp_config):
        result = runner.invoke(main, [
            "project", "--config", str(temp_config), "--monthly", "100", "--json",
        ])

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["total_invested"] == 1200.0

    def test_bad_config_file(self, runner, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[]")
        result = runner.invoke(main, ["project", "--config", str(path)])

        assert result.exit_code == 1
        assert "JSON object" in result.output

    def test_project_plot(self, runner, base_args, tmp_path):
        chart = tmp_path / "out" / "chart.png"
        result = runner.invoke(main, ["project", *base_args, "--plot", str(chart)])

        assert result.exit_code == 0, result.output
        assert chart.exists()
        assert "Chart saved" in result.output


# ============================================================================
# OTHER COMMANDS
# ============================================================================

class TestIndexesCommand:

    def test_indexes_table(self, runner):
        result = runner.invoke(main, ["indexes"])

        assert result.exit_code == 0
        assert "SP500" in result.output
        assert "CUSTOM" in result.output

    def test_indexes_quiet(self, runner):
        result = runner.invoke(main, ["--quiet", "indexes"])

        assert result.exit_code == 0
        assert "SP500: past=10.0% future=8.0%" in result.output


class TestInfoCommand:

    def test_info(self, runner):
        result = runner.invoke(main, ["--quiet", "info"])

        assert result.exit_code == 0
        assert f"InvCalc Version: {__version__}" in result.output
        assert "pandas:" in result.output
