"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Region, StatsSnapshot


def print_banner(console: Console) -> None:
    title = Text("QuickCheck", style="bold cyan")
    subtitle = Text("COVID-19 • Confirmed • Deaths • Recovered", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def format_number(number: int) -> str:
    return f"{number:,}"


def _format_share(value: float) -> str:
    return f"{value * 100:.1f}%"


def build_stats_table(snapshots: Sequence[StatsSnapshot]) -> Table:
    """Tabla con una fila por snapshot (región)."""

    table = Table(title="COVID-19 Quick Check")
    table.add_column("Region", style="cyan", no_wrap=True)
    table.add_column("Confirmed", style="yellow", justify="right")
    table.add_column("Deaths", style="red", justify="right")
    table.add_column("Recovered", style="green", justify="right")
    table.add_column("Total", style="white", justify="right")
    table.add_column("Error", style="red")

    for snapshot in snapshots:
        stats = snapshot.stats
        if snapshot.ok:
            confirmed = f"{format_number(stats.confirmed)} ({_format_share(stats.proportion('confirmed'))})"
            deaths = f"{format_number(stats.deaths)} ({_format_share(stats.proportion('deaths'))})"
            recovered = f"{format_number(stats.recovered)} ({_format_share(stats.proportion('recovered'))})"
            total = format_number(stats.total)
        else:
            # Sin datos: guiones en lugar de ceros.
            confirmed = deaths = recovered = total = "-"
        table.add_row(
            snapshot.region.name,
            confirmed,
            deaths,
            recovered,
            total,
            snapshot.error or "",
        )
    return table


def build_regions_table(regions: Sequence[Region]) -> Table:
    table = Table(title=f"Regions ({len(regions)})")
    table.add_column("Slug", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    for region in regions:
        table.add_row(region.slug, region.name)
    return table
