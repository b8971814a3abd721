"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from cli import sources
from core.config import AppSettings, get_user_env_file, read_user_env_vars, write_user_env_vars
from core.domain.errors import StatsClientError
from core.domain.models import GLOBAL_SLUG
from core.services.snapshot import resolve_region

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(settings: AppSettings) -> tuple[bool, str]:
    source = sources.build_stats_source(settings)
    try:
        stats = await source.fetch_global_stats()
    except StatsClientError as exc:
        return False, str(exc)
    return True, f"global total {stats.total:,}"


@app.command()
def run() -> None:
    """Run baseline diagnostics."""

    settings = AppSettings()

    table = Table(title="QuickCheck Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("Global endpoint", "OK", settings.global_stats_path)
    timeout = settings.http_timeout_seconds
    table.add_row("HTTP timeout", "OK", f"{timeout}s" if timeout is not None else "transport default")
    table.add_row("Region", "OK", resolve_region(settings.region).slug)
    env_file = get_user_env_file()
    saved = read_user_env_vars()
    if saved:
        pairs = ", ".join(f"{key}={value}" for key, value in sorted(saved.items()))
        table.add_row("User config", "OK", f"{env_file} ({pairs})")
    else:
        table.add_row("User config", "OPTIONAL", str(env_file))

    ok_api, detail_api = asyncio.run(_check_api(settings))
    table.add_row("API connectivity", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)


@app.command(name="set-region")
def set_region(
    slug: str = typer.Argument(..., help="Region slug from `quickcheck regions` (or 'global')."),
) -> None:
    """Persist the selected region in the user config .env."""

    settings = AppSettings()
    cleaned = slug.strip()
    if not cleaned:
        raise typer.BadParameter("slug must not be empty")

    if cleaned.lower() != GLOBAL_SLUG:
        source = sources.build_stats_source(settings)
        try:
            regions = asyncio.run(source.list_regions())
        except StatsClientError as exc:
            _console.print(f"[red]Could not validate region:[/red] {exc}")
            raise typer.Exit(code=1) from exc
        if not any(region.slug == cleaned for region in regions):
            raise typer.BadParameter(f"unknown region slug: {cleaned}")

    env_path = write_user_env_vars({"region": cleaned})
    _console.print(f"[green]Saved region to:[/green] {env_path}")
