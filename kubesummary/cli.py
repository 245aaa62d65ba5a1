"""Command-line entry point for KubeSummary."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from textual.logging import TextualHandler

from kubesummary import __version__
from kubesummary.controllers import SummaryController, SummarySnapshot
from kubesummary.models.state.app_settings import AppSettings, ConfigLoadError
from kubesummary.models.state.config_manager import ConfigManager
from kubesummary.screens.summary.config import (
    AGENT_TABLE_COLUMNS,
    CONTROLLER_TABLE_COLUMNS,
    FEATURE_GATE_TABLE_COLUMNS,
)
from kubesummary.utils.formatting import (
    agent_property_values,
    controller_property_values,
    feature_gate_property_values,
)
from kubesummary.widgets.data.heatmap.latency_heatmap import build_heatmap_table

console = Console()


def setup_logging(verbose: bool = False, *, tui: bool = False) -> None:
    """Setup logging configuration.

    The TUI owns the terminal, so its records go to the Textual devtools
    console instead of stderr.
    """
    level = logging.DEBUG if verbose else logging.INFO
    handler: logging.Handler
    if tui:
        handler = TextualHandler()
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(
        level=level, format="%(message)s", handlers=[handler], force=True
    )


def _load_settings(settings_path: Path | None, context: str | None) -> AppSettings:
    try:
        settings = ConfigManager.load(settings_path)
    except ConfigLoadError as exc:
        console.print(f"[yellow]Using default settings:[/yellow] {exc}")
        settings = AppSettings()
    if context is not None:
        settings.context = context
    return settings


def _render_table(title: str, columns: list[str], rows: list[list[str]]) -> Table:
    table = Table(title=title, title_justify="left")
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*row)
    return table


def _print_snapshot(snapshot: SummarySnapshot) -> None:
    if snapshot.controller_info is not None:
        console.print(
            _render_table(
                "Controller",
                CONTROLLER_TABLE_COLUMNS,
                [controller_property_values(snapshot.controller_info)],
            )
        )
    if snapshot.agent_infos is not None:
        console.print(
            _render_table(
                "Agents",
                AGENT_TABLE_COLUMNS,
                [agent_property_values(agent) for agent in snapshot.agent_infos],
            )
        )
    if snapshot.latency_matrix is not None:
        console.print(build_heatmap_table(snapshot.latency_matrix, title="NodeLatency"))
    if snapshot.feature_gate_partition is not None:
        partition = snapshot.feature_gate_partition
        console.print(
            _render_table(
                "Controller Feature Gates",
                FEATURE_GATE_TABLE_COLUMNS,
                [feature_gate_property_values(gate) for gate in partition.controller],
            )
        )
        console.print(
            _render_table(
                "Agent Feature Gates",
                FEATURE_GATE_TABLE_COLUMNS,
                [feature_gate_property_values(gate) for gate in partition.agent],
            )
        )
    for source, error in snapshot.errors.items():
        console.print(f"[red]✗ {source}:[/red] {error}")


@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--context", "context", default=None, help="kubectl context to use")
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Settings file path",
)
@click.version_option(__version__, prog_name="kubesummary")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    context: str | None,
    settings_path: Path | None,
) -> None:
    """KubeSummary - cluster network status at a glance."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["context"] = context
    ctx.obj["settings_path"] = settings_path
    if ctx.invoked_subcommand is None:
        ctx.invoke(tui)


@cli.command()
@click.pass_context
def tui(ctx: click.Context) -> None:
    """Launch the interactive summary dashboard."""
    from kubesummary.app import KubeSummaryApp

    setup_logging(ctx.obj["verbose"], tui=True)
    app = KubeSummaryApp(
        context=ctx.obj["context"], settings_path=ctx.obj["settings_path"]
    )
    app.run()


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Print the snapshot as JSON")
@click.pass_context
def snapshot(ctx: click.Context, as_json: bool) -> None:
    """Run one aggregation cycle and print the result."""
    setup_logging(ctx.obj["verbose"])
    settings = _load_settings(ctx.obj["settings_path"], ctx.obj["context"])
    controller = SummaryController(settings=settings)
    result = asyncio.run(controller.fetch_all())

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2, default=str))
    else:
        _print_snapshot(result)

    if not result.all_succeeded:
        sys.exit(1)


def main() -> None:
    """Main entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
