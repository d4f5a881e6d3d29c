"""Command-line interface for the station tracker."""

import asyncio
import json
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich import print as rprint

from station_tracker import __version__, setup_logger
from station_tracker.config.settings import ConfigManager, create_default_config
from station_tracker.core.exceptions import ConfigurationError
from station_tracker.core.types import EnrichedPosition, TrackerConfig
from station_tracker.pipeline.enrichment import open_pipeline
from station_tracker.presentation.annotations import MeasurementSystem, make_annotations
from station_tracker.presentation.fallback import positions_or_samples
from station_tracker.presentation.timeline import WidgetFamily, inline_text, make_timeline

app = typer.Typer(
    name="station-tracker",
    help="Hourly ground track of an orbiting object, tagged with place names",
    add_completion=False,
)

console = Console()


def _manager(ctx: typer.Context) -> ConfigManager:
    return ctx.obj["config"]


def _tracker_config(ctx: typer.Context) -> TrackerConfig:
    try:
        return _manager(ctx).get_tracker_config()
    except ConfigurationError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def _parse_start(start: Optional[str]) -> Optional[datetime]:
    if start is None:
        return None
    try:
        return datetime.fromisoformat(start)
    except ValueError:
        rprint("[red]Error:[/red] Invalid start time. Use ISO format, e.g. 2022-11-12T16:00")
        raise typer.Exit(1)


async def _load_positions(
    config: TrackerConfig,
    starting_at: Optional[datetime],
    count: int,
) -> List[EnrichedPosition]:
    async with open_pipeline(config) as pipeline:
        return await positions_or_samples(pipeline, starting_at, count)


def _show_version(value: bool):
    if value:
        typer.echo(f"station-tracker {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-v", callback=_show_version, is_eager=True, help="Show version"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML configuration file"
    ),
):
    """Station Tracker"""
    try:
        manager = ConfigManager(config_file)
    except ConfigurationError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    log_level = "DEBUG" if verbose else manager.get("logging.level", "INFO")
    log_file = manager.get("logging.log_file")
    try:
        setup_logger(level=log_level, log_file=Path(log_file) if log_file else None)
    except ValueError as e:
        rprint(f"[red]Error:[/red] Invalid logging.level in configuration. {e}")
        raise typer.Exit(1)

    ctx.obj = {"config": manager}


@app.command()
def track(
    ctx: typer.Context,
    count: Optional[int] = typer.Option(None, "--count", "-n", min=0, help="Number of hourly positions"),
    start: Optional[str] = typer.Option(None, "--start", help="Start time (ISO 8601), default now"),
    imperial: Optional[bool] = typer.Option(
        None, "--imperial/--metric", help="Unit system for altitude and velocity"
    ),
    json_output: bool = typer.Option(False, "--json", help="Print enriched records as JSON"),
):
    """Show where the object will be over the coming hours."""
    config = _tracker_config(ctx)
    starting_at = _parse_start(start)
    count = config.hourly_intervals if count is None else count

    with console.status("[bold green]Fetching positions..."):
        positions = asyncio.run(_load_positions(config, starting_at, count))

    if json_output:
        typer.echo(
            json.dumps(
                [position.to_dict() for position in positions],
                indent=2,
                sort_keys=True,
                ensure_ascii=False,
            )
        )
        return

    if imperial is None:
        system = MeasurementSystem(config.measurement_system)
    else:
        system = MeasurementSystem.IMPERIAL if imperial else MeasurementSystem.METRIC

    table = Table(title="ISS Location")
    table.add_column("Time", style="cyan", no_wrap=True)
    table.add_column("Place", style="green")
    table.add_column("Lat", style="yellow", justify="right")
    table.add_column("Lon", style="yellow", justify="right")
    table.add_column("Altitude", style="magenta", justify="right")
    table.add_column("Velocity", style="blue", justify="right")

    for annotation in make_annotations(positions, system):
        latitude, longitude = annotation.coordinate
        table.add_row(
            annotation.time,
            annotation.name,
            f"{latitude:.2f}",
            f"{longitude:.2f}",
            annotation.altitude,
            annotation.velocity,
        )

    console.print(table)


@app.command()
def timeline(
    ctx: typer.Context,
    family: WidgetFamily = typer.Option(
        WidgetFamily.ACCESSORY_INLINE, "--family", help="Widget family to build entries for"
    ),
    count: Optional[int] = typer.Option(None, "--count", "-n", min=0, help="Number of hourly positions"),
    start: Optional[str] = typer.Option(None, "--start", help="Start time (ISO 8601), default now"),
):
    """List the widget timeline entries for the coming hours."""
    config = _tracker_config(ctx)
    starting_at = _parse_start(start)
    count = config.hourly_intervals if count is None else count

    positions = asyncio.run(_load_positions(config, starting_at, count))
    entries = asyncio.run(make_timeline(positions, family))

    table = Table(title=f"Timeline ({family.value})")
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Kind", style="yellow")
    table.add_column("Text", style="green")

    for entry in entries:
        table.add_row(
            entry.position.local_time().strftime("%Y-%m-%d %H:%M"),
            entry.kind.value,
            inline_text(entry.position),
        )

    console.print(table)


@app.command()
def config(
    ctx: typer.Context,
    action: str = typer.Argument(..., help="Action: show, create, validate"),
    config_file: Optional[Path] = typer.Option(None, "--file", "-f", help="Configuration file"),
):
    """Manage configuration files."""
    manager = _manager(ctx)

    if action == "show":
        table = Table(title="Effective Configuration")
        table.add_column("Section", style="cyan")
        table.add_column("Parameter", style="yellow")
        table.add_column("Value", style="green")

        for section, values in manager.to_dict().items():
            if not isinstance(values, dict):
                table.add_row(section, "", str(values))
                continue
            for key, value in values.items():
                table.add_row(section, key, str(value))

        console.print(table)

    elif action == "create":
        if config_file is None:
            config_file = Path("station_tracker.yaml")

        try:
            create_default_config(config_file)
        except ConfigurationError as e:
            rprint(f"[red]Error:[/red] {e}")
            raise typer.Exit(1)
        rprint(f"[green]Created default config: {config_file}[/green]")

    elif action == "validate":
        issues = manager.validate()
        if issues:
            for issue in issues:
                rprint(f"[red]-[/red] {issue}")
            raise typer.Exit(1)
        rprint("[green]Configuration is valid[/green]")

    else:
        rprint(f"[red]Error:[/red] Unknown action '{action}'. Use: show, create, validate")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
