"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y redirects para todas las llamadas a la API.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults de la aplicación.

    Si `settings.http_timeout_seconds` es None se usa el timeout por defecto
    de httpx.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)

    kwargs: dict[str, object] = {}
    if settings.http_timeout_seconds is not None:
        kwargs["timeout"] = httpx.Timeout(settings.http_timeout_seconds)
    if transport is not None:
        kwargs["transport"] = transport

    return httpx.AsyncClient(
        base_url=settings.api_base_url,
        follow_redirects=True,
        headers=headers,
        **kwargs,  # type: ignore[arg-type]
    )
