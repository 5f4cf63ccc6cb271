# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .adapters import StubHttpClient
from .client import HttpClient, create_default_http_client
from .executor import build_http_request, execute_request
from .headers import header_value
from .httpx_client import HttpxClient
from .models import Headers, HttpRequest, HttpResponse
from .url import to_url

__all__ = [
    "Headers",
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "StubHttpClient",
    "build_http_request",
    "create_default_http_client",
    "execute_request",
    "header_value",
    "to_url",
]
