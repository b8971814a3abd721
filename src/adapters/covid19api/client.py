"""Cliente de covid19api (https://api.covid19api.com/).

Cada operación hace exactamente una petición GET, decodifica el cuerpo y
devuelve un registro tipado. No hay caché ni reintentos; los fallos se
propagan como `NetworkError` o `ParseError`.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar
from urllib.parse import quote

import httpx

from adapters.covid19api.parsing import parse_global_stats, parse_region_stats, parse_regions
from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import NetworkError, ParseError
from core.domain.models import Region, Stats
from core.interfaces.stats_source import StatsSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Covid19ApiClient(StatsSource):
    """Implementación HTTP de `StatsSource`."""

    _countries_path = "countries"
    _region_series_path = "total/country/{slug}"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def fetch_global_stats(self) -> Stats:
        return await self._fetch(self._settings.global_stats_path, parse_global_stats)

    async def fetch_region_stats(self, region_slug: str) -> Stats:
        if not isinstance(region_slug, str) or not region_slug.strip():
            raise ValueError("region_slug must be a non-empty string")

        path = self._region_series_path.format(slug=quote(region_slug.strip(), safe=""))
        return await self._fetch(path, parse_region_stats)

    async def list_regions(self) -> list[Region]:
        return await self._fetch(self._countries_path, parse_regions)

    async def _fetch(self, path: str, parser: Callable[[Any], T]) -> T:
        url = f"{self._settings.api_base_url}{path}"
        logger.debug("GET %s", url)

        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.get(path)
        except httpx.HTTPError as exc:
            raise NetworkError(f"request to {url} failed: {exc!r}", url=url) from exc

        if not response.is_success:
            raise NetworkError(
                f"{url} answered HTTP {response.status_code}",
                url=url,
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except (ValueError, RecursionError) as exc:
            raise ParseError(f"response from {url} is not valid JSON", url=url) from exc

        try:
            return parser(payload)
        except ParseError as exc:
            exc.url = url
            raise
