"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los modelos "wire" (con alias de la API) convierten el JSON sin tipar en
  registros tipados en un único punto.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, Field, StrictInt, StrictStr, computed_field
from pydantic.config import ConfigDict

GLOBAL_SLUG = "global"

StatField = Literal["confirmed", "deaths", "recovered"]


class Stats(BaseModel):
    """Estadísticas normalizadas de una región (o del mundo).

    `total` siempre es `confirmed + deaths + recovered`; no se puede
    asignar ni se lee de la API.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    confirmed: int = Field(..., ge=0, description="Casos confirmados acumulados.")
    deaths: int = Field(..., ge=0, description="Fallecimientos acumulados.")
    recovered: int = Field(..., ge=0, description="Recuperados acumulados.")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return self.confirmed + self.deaths + self.recovered

    @classmethod
    def zero(cls) -> "Stats":
        """Placeholder con todo a cero (fallback cuando no hay datos)."""

        return cls(confirmed=0, deaths=0, recovered=0)

    def proportion(self, field: StatField) -> float:
        """Fracción de `total` que representa `field` (0.0 si total es 0)."""

        if self.total == 0:
            return 0.0
        return getattr(self, field) / self.total


class Region(BaseModel):
    """Región seleccionable: slug estable de la API + nombre visible."""

    model_config = ConfigDict(frozen=True)

    slug: str = Field(
        ...,
        min_length=1,
        description="Identificador estable de la API (p.ej. 'brazil') o 'global'.",
    )
    name: str = Field(
        ...,
        description="Nombre para mostrar (p.ej. 'Brazil').",
    )

    @property
    def is_global(self) -> bool:
        return self.slug == GLOBAL_SLUG


GLOBAL_REGION = Region(slug=GLOBAL_SLUG, name="Global")


class StatsSnapshot(BaseModel):
    """Resultado fechado de una carga para una región.

    Si la carga falla, `stats` es `Stats.zero()` y `error` describe el motivo.
    """

    model_config = ConfigDict(frozen=True)

    region: Region
    stats: Stats
    fetched_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Momento de la carga (UTC).",
    )
    error: str | None = Field(
        default=None,
        description="Motivo del fallo cuando `stats` es el placeholder.",
    )

    @property
    def ok(self) -> bool:
        return self.error is None


# --- Modelos "wire" (formas del JSON de covid19api) ---


class GlobalTotalsPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    total_confirmed: StrictInt = Field(..., alias="TotalConfirmed", ge=0)
    total_deaths: StrictInt = Field(..., alias="TotalDeaths", ge=0)
    total_recovered: StrictInt = Field(..., alias="TotalRecovered", ge=0)

    def to_stats(self) -> Stats:
        return Stats(
            confirmed=self.total_confirmed,
            deaths=self.total_deaths,
            recovered=self.total_recovered,
        )


class SummaryPayload(BaseModel):
    """Forma de `/summary`: los totales viven bajo `Global`."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    global_totals: GlobalTotalsPayload = Field(..., alias="Global")


class DailySnapshotPayload(BaseModel):
    """Un día de la serie `/total/country/{slug}`."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    confirmed: StrictInt = Field(..., alias="Confirmed", ge=0)
    deaths: StrictInt = Field(..., alias="Deaths", ge=0)
    recovered: StrictInt = Field(..., alias="Recovered", ge=0)

    def to_stats(self) -> Stats:
        return Stats(confirmed=self.confirmed, deaths=self.deaths, recovered=self.recovered)


class CountryPayload(BaseModel):
    """Entrada del catálogo `/countries`."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    country: StrictStr = Field(..., alias="Country")
    slug: StrictStr = Field(..., alias="Slug", min_length=1)

    def to_region(self) -> Region:
        return Region(slug=self.slug, name=self.country)
