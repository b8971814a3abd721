from __future__ import annotations

from typing import Any

import httpx
import pytest

from core.config import AppSettings
from core.domain.errors import NetworkError
from core.domain.models import GLOBAL_REGION, Region, Stats


class FakeApi:
    """Routes `httpx.MockTransport` requests by URL path and records them."""

    def __init__(self) -> None:
        self.routes: dict[str, dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        path: str,
        *,
        json: Any = None,
        text: str | None = None,
        status: int = 200,
        exc: type[httpx.HTTPError] | None = None,
    ) -> None:
        self.routes[path] = {"json": json, "text": text, "status": status, "exc": exc}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"message": "not found"})
        if route["exc"] is not None:
            raise route["exc"]("simulated failure", request=request)
        if route["text"] is not None:
            return httpx.Response(route["status"], text=route["text"])
        return httpx.Response(route["status"], json=route["json"])

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


class FakeSource:
    """In-memory `StatsSource` for service and CLI tests."""

    def __init__(
        self,
        *,
        global_stats: Stats | None = None,
        region_stats: dict[str, Stats] | None = None,
        regions: list[Region] | None = None,
        fail: bool = False,
    ) -> None:
        self.global_stats = global_stats or Stats(confirmed=100, deaths=5, recovered=50)
        self.region_stats = region_stats or {}
        self.regions = regions if regions is not None else [GLOBAL_REGION, Region(slug="brazil", name="Brazil")]
        self.fail = fail
        self.calls: list[tuple[str, str | None]] = []

    async def fetch_global_stats(self) -> Stats:
        self.calls.append(("global", None))
        if self.fail:
            raise NetworkError("offline", url="https://api.test/summary")
        return self.global_stats

    async def fetch_region_stats(self, region_slug: str) -> Stats:
        self.calls.append(("region", region_slug))
        if self.fail:
            raise NetworkError("offline", url=f"https://api.test/total/country/{region_slug}")
        if region_slug not in self.region_stats:
            raise NetworkError("HTTP 404", url=f"https://api.test/total/country/{region_slug}", status_code=404)
        return self.region_stats[region_slug]

    async def list_regions(self) -> list[Region]:
        self.calls.append(("regions", None))
        if self.fail:
            raise NetworkError("offline", url="https://api.test/countries")
        return list(self.regions)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for key in (
        "QUICKCHECK_API_BASE_URL",
        "QUICKCHECK_GLOBAL_STATS_PATH",
        "QUICKCHECK_HTTP_TIMEOUT_SECONDS",
        "QUICKCHECK_USER_AGENT",
        "QUICKCHECK_REGION",
        "QUICKCHECK_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        api_base_url="https://api.test/",
        user_agent="quickcheck-tests",
    )


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()
