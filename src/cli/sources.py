"""Construcción de la fuente de estadísticas usada por los comandos."""

from __future__ import annotations

from adapters.covid19api import Covid19ApiClient
from core.config import AppSettings
from core.interfaces.stats_source import StatsSource


def build_stats_source(settings: AppSettings) -> StatsSource:
    return Covid19ApiClient(settings)
