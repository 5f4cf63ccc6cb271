# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used across bulkprobe."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..errors import TransportErrorKind

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    body: bytes | str | None = None
    timeout: float | None = None


@dataclass
class HttpResponse:
    """Normalized HTTP response; transport failures are reported with ``ok=False``."""

    ok: bool
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    text: str = ""
    content: bytes = b""
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    error_kind: TransportErrorKind | None = None
    meta: dict[str, Any] = field(default_factory=dict)

    @property
    def content_length(self) -> int | None:
        """Return the Content-Length header as an int, if present and valid."""
        for key, value in self.headers.items():
            if str(key).lower() != "content-length":
                continue
            try:
                length = int(str(value).strip())
            except ValueError:
                return None
            return length if length >= 0 else None
        return None


__all__ = ["Headers", "HttpRequest", "HttpResponse"]
