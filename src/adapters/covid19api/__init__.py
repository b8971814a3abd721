from adapters.covid19api.client import Covid19ApiClient
from adapters.covid19api.parsing import parse_global_stats, parse_region_stats, parse_regions

__all__ = [
    "Covid19ApiClient",
    "parse_global_stats",
    "parse_region_stats",
    "parse_regions",
]
