# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client abstraction and factory."""

from typing import Protocol

from ..config import HttpSettings, load_http_settings
from ..errors import SetupError
from .models import HttpRequest, HttpResponse


class HttpClient(Protocol):
    """Minimal protocol for issuing HTTP requests.

    Implementations are shared across worker threads and must be safe to call concurrently.
    """

    def request(self, request: HttpRequest) -> HttpResponse: ...

    def close(self) -> None:  # pragma: no cover - optional for adapters
        ...


def create_default_http_client(settings: HttpSettings | None = None) -> HttpClient:
    """Factory for the default httpx-backed client.

    Raises SetupError when the client cannot be constructed.
    """
    from .httpx_client import HttpxClient

    try:
        return HttpxClient(settings or load_http_settings())
    except Exception as exc:  # noqa: BLE001
        raise SetupError(f"error building http client: {exc}") from exc
