"""CLI principal (Typer + Rich).

Comandos:
- `stats`: estadísticas de una o varias regiones (global por defecto).
- `regions`: catálogo de regiones seleccionables.
- `doctor`: diagnóstico y persistencia de la región elegida.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from adapters.json_exporter import dump_models_json, export_models_json
from cli import sources
from cli.doctor import app as doctor_app
from cli.ui_components import build_regions_table, build_stats_table, print_banner
from core.config import AppSettings
from core.domain.errors import StatsClientError
from core.services.snapshot import load_snapshots

app = typer.Typer(
    no_args_is_help=True,
    help="Quick look at the newest COVID-19 statistics (covid19api.com).",
)
app.add_typer(doctor_app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        _err_console.print(f"[red]Invalid configuration:[/red] {exc}")
        raise typer.Exit(code=2) from exc
    configure_logging("DEBUG" if verbose else settings.log_level)


@app.command()
def stats(
    regions: Optional[List[str]] = typer.Argument(
        None,
        help="Region slugs (e.g. brazil). Defaults to the configured region or global.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print snapshots as JSON."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write snapshots to a JSON file."),
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Show the welcome banner."),
) -> None:
    """Show confirmed, deaths and recovered counts."""

    settings = AppSettings()
    targets: list[str | None] = list(regions) if regions else [settings.region]
    source = sources.build_stats_source(settings)

    snapshots = asyncio.run(load_snapshots(source, targets))

    if output is not None:
        path = export_models_json(models=snapshots, output_path=output)
        _err_console.print(f"[green]Saved snapshots to:[/green] {path}")

    if as_json:
        typer.echo(dump_models_json(snapshots), nl=False)
        return

    if banner:
        print_banner(_console)
    _console.print(build_stats_table(snapshots))


@app.command(name="regions")
def list_regions(
    as_json: bool = typer.Option(False, "--json", help="Print regions as JSON."),
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Filter by slug or name."),
) -> None:
    """List the selectable regions (Global first)."""

    settings = AppSettings()
    source = sources.build_stats_source(settings)

    try:
        regions = asyncio.run(source.list_regions())
    except StatsClientError as exc:
        _err_console.print(f"[red]Could not list regions:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if search:
        needle = search.strip().lower()
        regions = [r for r in regions if needle in r.slug.lower() or needle in r.name.lower()]

    if as_json:
        typer.echo(dump_models_json(regions), nl=False)
        return
    _console.print(build_regions_table(regions))


def run() -> None:
    app()
