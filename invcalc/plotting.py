"""
Plotting utilities for InvCalc projections.

Purpose
-------
Renders a `ProjectionResult` series as a filled time-series line chart with
currency-formatted y-axis. The engine never holds a figure: every call draws
from the result's data only, on a new or caller-supplied Axes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .constants import (
    DEFAULT_DPI,
    DEFAULT_FIGSIZE,
    DEFAULT_FILL_ALPHA,
    DEFAULT_LINE_COLOR,
    DEFAULT_LINEWIDTH,
    SERIES_NAME,
)
from .utils import currency_formatter

if TYPE_CHECKING:
    from .projection import ProjectionResult

__all__ = ["plot_projection"]


def plot_projection(
    result: ProjectionResult,
    *,
    ax=None,
    figsize: tuple = DEFAULT_FIGSIZE,
    title: Optional[str] = None,
    color: str = DEFAULT_LINE_COLOR,
    grid: bool = True,
    legend: bool = True,
    save_path: Optional[str] = None,
    dpi: int = DEFAULT_DPI,
    return_fig_ax: bool = False,
):
    """
    Plot the projected portfolio value over time.

    Parameters
    ----------
    result : ProjectionResult
        Output of `project()`.
    ax : matplotlib.axes.Axes, optional
        Existing Axes object to plot on. If None, a new figure and axes are created.
    figsize : tuple, default (12, 6)
        Figure size (width, height) in inches when creating a new figure.
    title : str, optional
        Plot title.
    color : str, default "#4CAF50"
        Line and fill color.
    grid, legend : bool, default True
        Toggle grid lines and legend.
    save_path : str, optional
        File path to save the figure. If None, the figure is not saved.
    dpi : int, default 150
        Resolution of the saved figure.
    return_fig_ax : bool, default False
        If True, returns a tuple (fig, ax) for further customization.

    Returns
    -------
    None or (matplotlib.figure.Figure, matplotlib.axes.Axes)
        If `return_fig_ax=True`, returns (fig, ax) tuple for further customization.

    Examples
    --------
    >>> result = project(config)
    >>> fig, ax = plot_projection(result, title="S&P 500, 1 year", return_fig_ax=True)
    """
    import matplotlib.pyplot as plt
    from matplotlib.dates import DateFormatter
    from matplotlib.ticker import FuncFormatter

    series = result.series

    fig = None
    if ax is None: fig, ax = plt.subplots(figsize=figsize)

    if series.empty:
        ax.set_axis_off()
        ax.text(0.5, 0.5, "No data (empty date range)", ha="center", va="center", transform=ax.transAxes)
        if save_path: (fig or ax.figure).savefig(save_path, bbox_inches="tight", dpi=dpi)
        if return_fig_ax: return (fig or ax.figure, ax)
        return

    idx = series.index
    values = series.to_numpy()

    ax.plot(idx, values, label=SERIES_NAME, color=color, linewidth=DEFAULT_LINEWIDTH, zorder=3)
    ax.fill_between(idx, 0, values, color=color, alpha=DEFAULT_FILL_ALPHA, zorder=2)

    # Formatting
    ax.set_ylim(bottom=min(0.0, float(values.min())))
    ax.yaxis.set_major_formatter(FuncFormatter(currency_formatter))
    ax.xaxis.set_major_formatter(DateFormatter("%Y-%m-%d"))
    if grid: ax.grid(True, linestyle="--", alpha=0.4, zorder=0)
    if title: ax.set_title(title)
    ax.set_xlabel("Date")
    ax.set_ylabel(SERIES_NAME)
    for label in ax.get_xticklabels():
        label.set_rotation(45)
        label.set_ha("right")
    if legend: ax.legend(loc="best")

    if save_path: (fig or ax.figure).savefig(save_path, bbox_inches="tight", dpi=dpi)
    if return_fig_ax: return (fig or ax.figure, ax)
