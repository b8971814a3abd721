"""Errores del cliente de estadísticas.

Dos tipos distinguibles para el llamador:
- `NetworkError`: el intercambio HTTP no se completó o el status no es 2xx.
- `ParseError`: el cuerpo no tiene la forma esperada.
"""

from __future__ import annotations


class StatsClientError(Exception):
    """Base de los errores del cliente."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class NetworkError(StatsClientError):
    """Fallo de transporte (DNS, timeout, conexión) o respuesta no-2xx."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, url=url)
        self.status_code = status_code


class ParseError(StatsClientError):
    """El cuerpo de la respuesta no coincide con la forma esperada."""
