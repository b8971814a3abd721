from core.services.snapshot import fetch_stats_for, load_snapshot, load_snapshots, resolve_region

__all__ = [
    "fetch_stats_for",
    "load_snapshot",
    "load_snapshots",
    "resolve_region",
]
