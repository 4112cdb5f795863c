"""
Command-Line Interface for InvCalc.

Purpose
-------
Runs investment projections from the terminal: builds a fresh
ProjectionConfig from options (or a JSON file), calls `project()` and
renders the summary, the monthly series and optionally a chart.

Commands
--------
- project: Project a recurring monthly investment
- indexes: Show the assumed annual returns per index
- info: Show version and dependency information

Example Usage
-------------
    # One year of $500/month in the S&P 500, forward-looking return
    $ invcalc project --monthly 500 --index SP500 --mode future

    # Custom 6% rate, 2% inflation, German tax, chart saved to disk
    $ invcalc project -m 300 --index CUSTOM --custom-rate 6 \\
        --inflation 2 --tax germany --plot chart.png

    # From a JSON file, machine-readable output
    $ invcalc project --config plan.json --json
"""

from __future__ import annotations

import json
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

import click
from rich.console import Console
from rich.table import Table

from .config import (
    AppSettings,
    IndexKey,
    InterestType,
    ProjectionConfig,
    ReturnMode,
    TaxJurisdiction,
    read_config_file,
)
from .constants import CURRENCY_CODE
from .exceptions import InvCalcError
from .log import get_logger, setup_logging

logger = get_logger(__name__)

# Version
__version__ = "0.1.0"

_DATE = click.DateTime(formats=["%Y-%m-%d"])


def _choices(enum_cls) -> click.Choice:
    return click.Choice([member.value for member in enum_cls], case_sensitive=False)


@click.group()
@click.version_option(version=__version__, prog_name="invcalc")
@click.option("--quiet", "-q", is_flag=True, help="Plain output without tables")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (default: INVCALC_LOG_LEVEL or WARNING)"
)
@click.pass_context
def main(ctx: click.Context, quiet: bool, log_level: Optional[str]) -> None:
    """
    InvCalc - Monthly Investment Projection Calculator.

    Projects the inflation-adjusted value of a recurring monthly investment
    under index return, interest, inflation and tax assumptions.

    Use 'invcalc COMMAND --help' for command-specific help.
    """
    settings = AppSettings()
    setup_logging(log_level or settings.log_level)

    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["settings"] = settings
    ctx.obj["console"] = Console()


@main.command()
@click.option(
    "--config", "-c", "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON file with ProjectionConfig fields (options override it)"
)
@click.option("--start", "-s", type=_DATE, default=None,
              help="Start date YYYY-MM-DD (default: first day of this month)")
@click.option("--end", "-e", type=_DATE, default=None,
              help="End date YYYY-MM-DD (default: end of the twelfth month)")
@click.option("--monthly", "-m", type=float, default=None, help="Monthly investment amount")
@click.option("--index", "-i", type=_choices(IndexKey), default=None,
              help="Market index (default: SP500)")
@click.option("--mode", type=_choices(ReturnMode), default=None,
              help="Past or future annual return (default: future)")
@click.option("--interest", type=_choices(InterestType), default=None,
              help="Interest type (default: compound)")
@click.option("--custom-rate", type=float, default=None,
              help="Annual return in percent, required with --index CUSTOM")
@click.option("--inflation", type=float, default=None, help="Annual inflation in percent")
@click.option("--tax", type=_choices(TaxJurisdiction), default=None,
              help="Capital gains tax regime (default: none)")
@click.option("--goal", type=float, default=None, help="Target portfolio value (0 = none)")
@click.option("--series", "show_series", is_flag=True, help="Also print the monthly series")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option(
    "--plot", "plot_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Save a chart of the series to this image file"
)
@click.pass_context
def project(
    ctx: click.Context,
    config_file: Optional[Path],
    start: Optional[datetime],
    end: Optional[datetime],
    monthly: Optional[float],
    index: Optional[str],
    mode: Optional[str],
    interest: Optional[str],
    custom_rate: Optional[float],
    inflation: Optional[float],
    tax: Optional[str],
    goal: Optional[float],
    show_series: bool,
    as_json: bool,
    plot_path: Optional[Path],
) -> None:
    """
    Project a recurring monthly investment.

    Example:
        invcalc project -m 1000 --index NASDAQ --mode past --goal 20000
    """
    console: Console = ctx.obj["console"]
    quiet = ctx.obj.get("quiet", False)
    settings: AppSettings = ctx.obj["settings"]

    # Import here to avoid slow startup
    from .projection import project as run_projection
    from .reporting import series_frame, summary_rows, summary_text

    fields: Dict[str, Any] = {}
    overrides = {
        "start_date": start.date() if start else None,
        "end_date": end.date() if end else None,
        "monthly_investment": monthly,
        "index": index,
        "mode": mode,
        "interest_type": interest,
        "custom_rate_percent": custom_rate,
        "inflation_rate_percent": inflation,
        "tax": tax,
        "goal_amount": goal,
    }

    try:
        if config_file is not None:
            fields.update(read_config_file(config_file))
        fields.update({k: v for k, v in overrides.items() if v is not None})
        config = ProjectionConfig.create(**fields)
        result = run_projection(config)
    except InvCalcError as e:
        logger.debug("projection rejected: %s", e)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    elif quiet:
        click.echo(summary_text(result))
    else:
        table = Table(
            title=f"Projection {config.start_date} → {config.end_date} ({result.months} months)",
            show_header=True,
        )
        table.add_column("Metric", style="cyan")
        table.add_column(f"Value ({CURRENCY_CODE})", style="green", justify="right")
        for label, value in summary_rows(result):
            table.add_row(label, value)
        table.add_row("", "")
        table.add_row("Annual Return", f"{result.annual_rate * 100:.2f}%")
        table.add_row("Monthly Return", f"{result.monthly_rate * 100:.4f}%")
        console.print(table)

    if show_series and not as_json:
        frame = series_frame(result)
        if quiet:
            for row in frame.itertuples(index=False):
                click.echo(f"{row.date}  {row.value}")
        else:
            series_table = Table(title="Portfolio Value", show_header=True)
            series_table.add_column("Date", style="cyan")
            series_table.add_column(f"Value ({CURRENCY_CODE})", justify="right")
            for row in frame.itertuples(index=False):
                series_table.add_row(row.date, row.value)
            console.print(series_table)

    if plot_path is not None:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        from .plotting import plot_projection

        plot_path.parent.mkdir(parents=True, exist_ok=True)
        fig, _ = plot_projection(
            result,
            title=f"{config.index.value} ({config.mode.value}, {config.interest_type.value})",
            save_path=str(plot_path),
            dpi=settings.figure_dpi,
            return_fig_ax=True,
        )
        plt.close(fig)
        if not quiet and not as_json:
            click.echo(f"Chart saved to {plot_path}")


@main.command()
@click.pass_context
def indexes(ctx: click.Context) -> None:
    """
    Show assumed annual returns per index.

    CUSTOM uses the rate given with --custom-rate for both modes.
    """
    console: Console = ctx.obj["console"]
    quiet = ctx.obj.get("quiet", False)

    from .indexes import INDEX_RETURNS

    if quiet:
        for key, returns in INDEX_RETURNS.items():
            click.echo(f"{key.value}: past={returns.past * 100:.1f}% future={returns.future * 100:.1f}%")
        return

    table = Table(title="Assumed Annual Returns", show_header=True)
    table.add_column("Index", style="cyan")
    table.add_column("Past", justify="right")
    table.add_column("Future", justify="right")
    for key, returns in INDEX_RETURNS.items():
        table.add_row(key.value, f"{returns.past * 100:.1f}%", f"{returns.future * 100:.1f}%")
    table.add_row(IndexKey.CUSTOM.value, "--custom-rate", "--custom-rate")
    console.print(table)


@main.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """
    Display system and package information.

    Shows version numbers and installed dependencies.
    """
    console: Console = ctx.obj["console"]

    info_lines = [
        f"InvCalc Version: {__version__}",
        f"Python: {sys.version.split()[0]}",
    ]

    # Check dependencies
    dependencies = {
        "numpy": "numpy",
        "pandas": "pandas",
        "pydantic": "pydantic",
        "matplotlib": "matplotlib",
        "rich": "rich",
        "click": "click",
    }

    for name, module in dependencies.items():
        try:
            mod = __import__(module)
            version = getattr(mod, "__version__", "installed")
            info_lines.append(f"{name}: {version}")
        except ImportError:
            info_lines.append(f"{name}: not installed")

    if ctx.obj.get("quiet", False):
        for line in info_lines:
            click.echo(line)
    else:
        from rich.panel import Panel
        console.print(Panel("\n".join(info_lines), title="System Information"))


if __name__ == "__main__":
    main()
