import asyncio

import pytest
from conftest import FakeSource

from core.domain.errors import NetworkError
from core.domain.models import GLOBAL_REGION, Region, Stats
from core.services.snapshot import fetch_stats_for, load_snapshot, load_snapshots, resolve_region

BRAZIL = Region(slug="brazil", name="Brazil")


class TestResolveRegion:
    @pytest.mark.parametrize("slug", [None, "", "  ", "global", "GLOBAL"])
    def test_global_aliases(self, slug):
        assert resolve_region(slug) is GLOBAL_REGION

    def test_uses_catalog_name(self):
        assert resolve_region("brazil", [GLOBAL_REGION, BRAZIL]) == BRAZIL

    def test_falls_back_to_slug_as_name(self):
        assert resolve_region("peru") == Region(slug="peru", name="peru")


class TestFetchStatsFor:
    def test_global(self):
        source = FakeSource()
        assert asyncio.run(fetch_stats_for(source, None)).total == 155
        assert source.calls == [("global", None)]

    def test_region(self):
        source = FakeSource(region_stats={"brazil": Stats(confirmed=3, deaths=2, recovered=1)})
        assert asyncio.run(fetch_stats_for(source, "brazil")).total == 6
        assert source.calls == [("region", "brazil")]

    def test_errors_propagate(self):
        with pytest.raises(NetworkError):
            asyncio.run(fetch_stats_for(FakeSource(fail=True), GLOBAL_REGION))


class TestLoadSnapshot:
    def test_success(self):
        snapshot = asyncio.run(load_snapshot(FakeSource(), "global"))
        assert snapshot.ok
        assert snapshot.region == GLOBAL_REGION
        assert snapshot.stats.total == 155

    def test_failure_returns_zero_placeholder(self):
        snapshot = asyncio.run(load_snapshot(FakeSource(fail=True), BRAZIL))
        assert not snapshot.ok
        assert snapshot.region == BRAZIL
        assert snapshot.stats == Stats.zero()
        assert "offline" in snapshot.error

    def test_load_snapshots_keeps_order(self):
        source = FakeSource(region_stats={"brazil": Stats(confirmed=1, deaths=1, recovered=1)})
        snapshots = asyncio.run(load_snapshots(source, ["brazil", None, "atlantis"]))
        assert [s.region.slug for s in snapshots] == ["brazil", "global", "atlantis"]
        assert [s.ok for s in snapshots] == [True, True, False]
        assert snapshots[2].stats.total == 0
