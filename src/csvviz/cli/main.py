"""
Typer-based CLI for csvviz.

Commands:
- profile: show the inferred role of every column and the default selection
- bar / line / pie: build a chart from a CSV file and print its data

Every chart command accepts column overrides; unset columns fall back to the
inferred defaults. ``--json`` prints the full chart result instead of tables.

Exit codes are listed in ``csvviz.cli.exit_codes``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console

from csvviz.cli.display_utils import show_chart, show_profile
from csvviz.cli.exit_codes import EXIT_USER_CANCEL, CliExit
from csvviz.core.analysis.roles import classify_columns, default_columns
from csvviz.core.domain.dataset import Dataset
from csvviz.core.domain.session import VisualizerSession
from csvviz.core.utils.config import get_config, load_config
from csvviz.core.utils.logger import log_configuration_change, log_error, setup_logging
from csvviz.core.viz.charts import ChartResult, ChartStatus
from csvviz.io.csv_loader import load_csv

app = typer.Typer(
    name="csvviz",
    help="csvviz - infer column roles in CSV files and build chart data",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

FileArgument = typer.Argument(..., help="CSV file to load")
JsonOption = typer.Option(False, "--json", help="Emit JSON output")


@app.callback()
def callback(
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to a JSON configuration file"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    ),
) -> None:
    """Apply global options before a command runs."""
    if config_file is not None:
        if not config_file.exists():
            raise CliExit.config_error(f"Configuration file not found: {config_file}")
        try:
            config = load_config(str(config_file))
        except ValueError as e:
            raise CliExit.config_error(f"Configuration error: {e}")
    else:
        config = get_config()

    previous_level = config.logging.level
    if log_level:
        config.logging.level = log_level
        config.logging.validate()
    setup_logging(
        level=config.logging.level,
        log_file=config.logging.file,
        format_string=config.logging.format,
    )
    if config.logging.level != previous_level:
        log_configuration_change("logging.level", previous_level, config.logging.level)


def _load(file: Path) -> Dataset:
    result = load_csv(file)
    if not result.success or result.dataset is None:
        raise CliExit.error(f"Failed to load {file}: {result.error}")
    return result.dataset


def _session(file: Path) -> VisualizerSession:
    session = VisualizerSession.from_config(get_config())
    session.load(_load(file))
    return session


def _select(session: VisualizerSession, chart: str, **changes: Any) -> None:
    changes = {name: value for name, value in changes.items() if value is not None}
    if not changes:
        return
    try:
        session.update_selection(chart, **changes)
    except ValueError as e:
        log_error("CLI", str(e))
        raise CliExit.error(str(e))


def _emit(result: ChartResult, json_output: bool) -> None:
    if json_output:
        typer.echo(json.dumps(result.to_dict(), indent=2, default=str))
    elif result.ok:
        show_chart(console, result)

    message = None if json_output else result.message
    if result.status is ChartStatus.INSUFFICIENT_COLUMNS:
        raise CliExit.insufficient_columns(message)
    if result.status is ChartStatus.NO_DATA:
        raise CliExit.no_data(message)


@app.command("profile")
def profile(file: Path = FileArgument, json_output: bool = JsonOption) -> None:
    """Show inferred column roles and default chart columns."""
    dataset = _load(file)
    config = get_config()
    roles = classify_columns(dataset, config.inference)
    defaults = default_columns(dataset, roles)
    if json_output:
        payload = {
            "dataset": dataset.describe(),
            "columns": roles.to_dict(),
            "defaults": {
                "category": defaults.category,
                "sequence": defaults.sequence,
                "measure": defaults.measure,
                "group": defaults.group,
            },
        }
        typer.echo(json.dumps(payload, indent=2))
        return
    show_profile(console, dataset, roles, defaults)


@app.command("bar")
def bar(
    file: Path = FileArgument,
    x: Optional[str] = typer.Option(None, "--x", help="Category column"),
    y: Optional[str] = typer.Option(None, "--y", help="Value column"),
    json_output: bool = JsonOption,
) -> None:
    """Sum a value column per category (first 20 categories)."""
    session = _session(file)
    _select(session, "bar", x_column=x, y_column=y)
    _emit(session.bar_chart(), json_output)


@app.command("line")
def line(
    file: Path = FileArgument,
    x: Optional[str] = typer.Option(None, "--x", help="X axis column"),
    y: Optional[str] = typer.Option(None, "--y", help="Y axis column"),
    group: Optional[str] = typer.Option(None, "--group", help="Grouping column"),
    no_group: bool = typer.Option(False, "--no-group", help="Ignore any grouping column"),
    select_group: Optional[str] = typer.Option(
        None, "--select-group", help="Plot only this group"
    ),
    json_output: bool = JsonOption,
) -> None:
    """Plot a value column over a sorted x column, optionally split by group."""
    session = _session(file)
    _select(session, "line", x_column=x, y_column=y, group_column=group)
    if no_group:
        session.update_selection("line", group_column=None)
    if select_group is not None:
        session.update_selection(
            "line", selected_group=select_group, show_all_groups=False
        )
    _emit(session.line_chart(), json_output)


@app.command("pie")
def pie(
    file: Path = FileArgument,
    label: Optional[str] = typer.Option(None, "--label", help="Label column"),
    value: Optional[str] = typer.Option(None, "--value", help="Value column"),
    group: Optional[str] = typer.Option(None, "--group", help="Grouping column"),
    select_group: Optional[str] = typer.Option(
        None, "--select-group", help="Only use rows of this group"
    ),
    by_group: bool = typer.Option(
        False, "--by-group", help="Slice by the grouping column instead of the label"
    ),
    json_output: bool = JsonOption,
) -> None:
    """Show the largest positive groups of a value column (at most 12)."""
    session = _session(file)
    _select(
        session,
        "pie",
        label_column=label,
        value_column=value,
        group_column=group,
        selected_group=select_group,
    )
    if by_group:
        session.update_selection("pie", group_by_region=True)
    _emit(session.pie_chart(), json_output)


def main() -> None:
    """Console script entry point."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled.[/yellow]")
        sys.exit(EXIT_USER_CANCEL)


if __name__ == "__main__":
    main()
