# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Send one planned request over the shared client."""

from __future__ import annotations

from ..errors import TransportError, TransportErrorKind, categorize_transport_failure
from ..models import RequestSpec
from .client import HttpClient
from .models import HttpRequest, HttpResponse


def build_http_request(spec: RequestSpec, timeout: float | None = None) -> HttpRequest:
    # The body is attached for every verb, HEAD and GET included.
    return HttpRequest(
        url=spec.url,
        method=spec.verb.value,
        body=spec.body.encode("utf-8") if spec.body else None,
        timeout=timeout,
    )


def execute_request(client: HttpClient, spec: RequestSpec, timeout: float | None = None) -> HttpResponse:
    """
    Send `spec` and return the successful response.

    Raises TransportError (INVALID_HOSTNAME or UNKNOWN) when nothing usable came back;
    callers are expected to recover from it.
    """
    response = client.request(build_http_request(spec, timeout))
    if response.ok and response.status_code is not None:
        return response

    kind = response.error_kind
    if kind is None:
        kind = categorize_transport_failure(message=response.error_message)
    if not isinstance(kind, TransportErrorKind):
        kind = TransportErrorKind(kind)
    message = response.error_message or ""
    if response.error_type:
        message = f"{response.error_type}: {message}" if message else response.error_type
    raise TransportError(kind, spec.url, message)


__all__ = ["build_http_request", "execute_request"]
