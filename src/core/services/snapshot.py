"""Carga de snapshots de estadísticas.

Elige la operación según la región configurada (totales globales o serie
de un país) y fecha el resultado. Si la carga falla, `load_snapshot`
entrega el placeholder a cero junto con el motivo. Los errores del cliente
solo se absorben aquí; `fetch_stats_for` los propaga.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, Sequence

from core.domain.errors import StatsClientError
from core.domain.models import GLOBAL_REGION, GLOBAL_SLUG, Region, Stats, StatsSnapshot
from core.interfaces.stats_source import StatsSource

logger = logging.getLogger(__name__)


def resolve_region(slug: str | None, regions: Iterable[Region] | None = None) -> Region:
    """Convierte un slug configurado en una `Region`.

    `None`, cadena vacía o `"global"` devuelven el centinela global. Si se
    pasa el catálogo se usa su nombre visible; si no, el slug hace de nombre.
    """

    cleaned = (slug or "").strip()
    if not cleaned or cleaned.lower() == GLOBAL_SLUG:
        return GLOBAL_REGION

    for region in regions or ():
        if region.slug == cleaned:
            return region
    return Region(slug=cleaned, name=cleaned)


async def fetch_stats_for(source: StatsSource, region: Region | str | None) -> Stats:
    if not isinstance(region, Region):
        region = resolve_region(region)
    if region.is_global:
        return await source.fetch_global_stats()
    return await source.fetch_region_stats(region.slug)


async def load_snapshot(source: StatsSource, region: Region | str | None) -> StatsSnapshot:
    """Carga un snapshot; nunca lanza `StatsClientError`."""

    if not isinstance(region, Region):
        region = resolve_region(region)

    try:
        stats = await fetch_stats_for(source, region)
    except StatsClientError as exc:
        logger.warning("Could not load stats for %s: %s", region.slug, exc)
        return StatsSnapshot(region=region, stats=Stats.zero(), error=str(exc))

    logger.debug("Loaded stats for %s: total=%d", region.slug, stats.total)
    return StatsSnapshot(region=region, stats=stats)


async def load_snapshots(
    source: StatsSource,
    regions: Sequence[Region | str | None],
) -> list[StatsSnapshot]:
    """Carga varios snapshots en paralelo, conservando el orden de entrada."""

    return list(await asyncio.gather(*(load_snapshot(source, region) for region in regions)))
