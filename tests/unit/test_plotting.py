"""
Unit tests for plotting.py module.

Tests the projection chart renderer.
"""

import pytest
from datetime import date

# Use non-interactive backend for testing
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from invcalc.plotting import plot_projection
from invcalc.projection import project


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestPlotProjection:

    def test_returns_fig_ax(self, sp500_config):
        fig, ax = plot_projection(project(sp500_config), return_fig_ax=True)

        assert fig is not None
        assert ax.get_ylabel() == "Portfolio Value"
        assert ax.get_xlabel() == "Date"

    def test_line_data(self, sp500_config):
        result = project(sp500_config)
        _, ax = plot_projection(result, return_fig_ax=True)

        lines = ax.get_lines()
        assert len(lines) == 1
        assert lines[0].get_label() == "Portfolio Value"
        assert list(lines[0].get_ydata()) == pytest.approx(list(result.series))
        assert lines[0].get_color() == "#4CAF50"

    def test_y_axis_from_zero_with_currency_ticks(self, sp500_config):
        _, ax = plot_projection(project(sp500_config), return_fig_ax=True)

        assert ax.get_ylim()[0] == 0.0
        assert ax.yaxis.get_major_formatter()(5000, 0) == "$5,000.00"

    def test_title(self, sp500_config):
        _, ax = plot_projection(project(sp500_config), title="S&P 500", return_fig_ax=True)
        assert ax.get_title() == "S&P 500"

    def test_existing_axes(self, sp500_config):
        fig, ax = plt.subplots()
        out_fig, out_ax = plot_projection(project(sp500_config), ax=ax, return_fig_ax=True)

        assert out_ax is ax
        assert out_fig is fig

    def test_returns_none_by_default(self, sp500_config):
        assert plot_projection(project(sp500_config)) is None

    def test_save_path(self, sp500_config, tmp_path):
        path = tmp_path / "chart.png"
        plot_projection(project(sp500_config), save_path=str(path), dpi=50)

        assert path.exists()
        assert path.stat().st_size > 0

    def test_empty_result_placeholder(self, make_config):
        config = make_config(start_date=date(2025, 6, 1), end_date=date(2025, 1, 1))
        _, ax = plot_projection(project(config, errors="empty"), return_fig_ax=True)

        assert not ax.axison
        assert "No data" in ax.texts[0].get_text()
