# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Test doubles for the HttpClient protocol."""

from __future__ import annotations

import threading

from ..errors import TransportErrorKind
from .client import HttpClient
from .models import HttpRequest, HttpResponse


class StubHttpClient(HttpClient):
    """Deterministic, programmable HttpClient for tests. Safe to share across threads."""

    def __init__(self, responses: dict[str, HttpResponse] | None = None):
        self._responses = responses or {}
        self._lock = threading.Lock()
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, url: str, response: HttpResponse) -> None:
        self._responses[url] = response

    def request(self, request: HttpRequest) -> HttpResponse:
        with self._lock:
            self.requests.append(request)
        if request.url in self._responses:
            return self._responses[request.url]
        return HttpResponse(
            ok=False,
            url=request.url,
            error_message="No stubbed response configured",
            error_kind=TransportErrorKind.UNKNOWN,
        )

    def close(self) -> None:
        self.closed = True
