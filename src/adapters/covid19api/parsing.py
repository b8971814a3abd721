"""Decodificación tipada de las respuestas de covid19api.

Reglas:
- Entrada: el árbol JSON sin tipar tal como sale de `json.loads`.
- Salida: `Stats` / `list[Region]`, o `ParseError`. Ningún dict sin tipar
  sale de este módulo y ninguna otra excepción escapa.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from core.domain.errors import ParseError
from core.domain.models import (
    GLOBAL_REGION,
    CountryPayload,
    DailySnapshotPayload,
    GlobalTotalsPayload,
    Region,
    Stats,
    SummaryPayload,
)


def _describe(value: Any) -> str:
    return type(value).__name__


def parse_global_stats(payload: Any) -> Stats:
    """Totales globales desde `/summary` (anidado en `Global`) o `/world/total` (plano)."""

    if not isinstance(payload, dict):
        raise ParseError(f"expected a JSON object for global totals, got {_describe(payload)}")

    try:
        if "Global" in payload:
            return SummaryPayload.model_validate(payload).global_totals.to_stats()
        return GlobalTotalsPayload.model_validate(payload).to_stats()
    except ValidationError as exc:
        raise ParseError(f"invalid global totals: {exc.error_count()} error(s): {exc.errors()[0]['msg']}") from exc


def parse_region_stats(payload: Any) -> Stats:
    """Estadísticas de una serie diaria ordenada ascendentemente.

    Se toma el penúltimo elemento (índice L-2), no el último; el día más
    reciente se omite. Con menos de 2 elementos no hay selección posible.
    """

    if not isinstance(payload, list):
        raise ParseError(f"expected a JSON array for the region series, got {_describe(payload)}")
    if len(payload) < 2:
        raise ParseError(f"region series needs at least 2 entries, got {len(payload)}")

    selected = payload[-2]
    try:
        return DailySnapshotPayload.model_validate(selected).to_stats()
    except ValidationError as exc:
        raise ParseError(
            f"invalid daily entry at index {len(payload) - 2}: {exc.errors()[0]['msg']}"
        ) from exc


def parse_regions(payload: Any) -> list[Region]:
    """Catálogo de regiones con `Global` sintetizado en la posición 0."""

    if not isinstance(payload, list):
        raise ParseError(f"expected a JSON array for the region catalog, got {_describe(payload)}")

    regions: list[Region] = [GLOBAL_REGION]
    for index, item in enumerate(payload):
        try:
            regions.append(CountryPayload.model_validate(item).to_region())
        except ValidationError as exc:
            raise ParseError(f"invalid catalog entry at index {index}: {exc.errors()[0]['msg']}") from exc
    return regions
