"""Contrato de una fuente de estadísticas.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Los servicios y la CLI dependen de esto, no del cliente HTTP concreto.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Region, Stats


@runtime_checkable
class StatsSource(Protocol):
    """Contrato mínimo para obtener estadísticas y regiones.

    Reglas de diseño:
    - Todo es asíncrono porque típicamente hará I/O (HTTP).
    - Cada llamada se resuelve una sola vez: valor o `StatsClientError`.
    """

    async def fetch_global_stats(self) -> Stats:
        """Totales globales."""

        ...

    async def fetch_region_stats(self, region_slug: str) -> Stats:
        """Totales más recientes de una región."""

        ...

    async def list_regions(self) -> list[Region]:
        """Catálogo de regiones con `global` en la posición 0."""

        ...
