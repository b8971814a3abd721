"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) y servicios lean config de forma consistente.

La región elegida con `doctor set-region` se guarda en un `.env` por usuario
que `AppSettings` lee después del `.env` del directorio actual.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "QUICKCHECK_"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def get_user_config_dir() -> Path:
    """Directorio de configuración de QuickCheck para el usuario actual."""

    if sys.platform.startswith("win"):
        root = Path(os.environ.get("APPDATA") or Path.home())
    elif sys.platform == "darwin":
        root = Path.home() / "Library" / "Application Support"
    else:
        root = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return root / "quickcheck"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def read_user_env_vars() -> dict[str, str]:
    """Variables `QUICKCHECK_*` guardadas en el `.env` del usuario."""

    env_path = get_user_env_file()
    if not env_path.exists():
        return {}

    values: dict[str, str] = {}
    for line in env_path.read_text(encoding="utf-8").splitlines():
        key, sep, value = line.partition("=")
        key = key.strip()
        if sep and key.upper().startswith(ENV_PREFIX):
            values[key.upper()] = value.strip().strip("\"'")
    return values


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Guarda campos de `AppSettings` (p.ej. `{"region": "brazil"}`) en el `.env` del usuario.

    Solo acepta nombres de campo conocidos; se conservan las demás variables
    ya guardadas.
    """

    unknown = sorted(name for name in values if name not in AppSettings.model_fields)
    if unknown:
        raise ValueError(f"unknown setting(s): {', '.join(unknown)}")

    merged = read_user_env_vars()
    for name, value in values.items():
        if "\n" in value or "\r" in value:
            raise ValueError(f"value for {name} must be a single line")
        merged[f"{ENV_PREFIX}{name.upper()}"] = value

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    body = "".join(f"{key}={merged[key]}\n" for key in sorted(merged))
    env_path.write_text("# QuickCheck user config\n" + body, encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Todas las variables usan el prefijo `QUICKCHECK_` (p.ej.
    `QUICKCHECK_REGION=brazil`).
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://api.covid19api.com/",
        min_length=8,
        description="Base URL de la API REST de estadísticas.",
    )
    global_stats_path: str = Field(
        default="summary",
        min_length=1,
        description="Endpoint de totales globales ('summary' o 'world/total').",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). None = default del transporte.",
    )
    user_agent: str = Field(
        default="quickcheck/0.1",
        min_length=1,
        description="User-Agent para las peticiones a la API.",
    )

    region: str | None = Field(
        default=None,
        description="Slug de la región seleccionada (vacío o 'global' = global).",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging por defecto (DEBUG, INFO, WARNING...).",
    )

    @field_validator("api_base_url")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        # urljoin descarta el último segmento si falta la barra final.
        return value if value.endswith("/") else value + "/"

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level
