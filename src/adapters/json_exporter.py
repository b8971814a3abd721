"""Exportación JSON de snapshots y regiones.

Por qué JSON:
- Interoperabilidad con otras herramientas (dashboards, scripts, cron).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from pydantic import BaseModel


def dump_models_json(models: Sequence[BaseModel]) -> str:
    """Serializa una lista de modelos a JSON UTF-8 con formato estable."""

    payload = [model.model_dump(mode="json") for model in models]
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_models_json(*, models: Sequence[BaseModel], output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dump_models_json(models), encoding="utf-8")
    return output_path
