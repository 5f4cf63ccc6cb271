# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Per-request pipeline: execute, classify, filter, format."""

from __future__ import annotations

import logging
from collections.abc import Container

from ..config import ProbeConfig
from ..http.client import HttpClient
from ..http.executor import execute_request
from ..http.headers import header_value
from ..http.models import HttpResponse
from ..models import RequestSpec, ResponseRecord
from ..payload import detect_format, extract_keys
from ..render import format_record

logger = logging.getLogger(__name__)


def is_status_filtered(status_code: int, blocked: Container[int]) -> bool:
    return status_code in blocked


def response_size(response: HttpResponse) -> int:
    """Prefer the advertised Content-Length, else the number of body bytes read."""
    length = response.content_length
    if length is not None:
        return length
    return len(response.content)


def build_record(spec: RequestSpec, response: HttpResponse, config: ProbeConfig) -> ResponseRecord:
    data_format = detect_format(response.text)
    keys = extract_keys(data_format) if config.fields.keys else []
    return ResponseRecord(
        status_code=int(response.status_code or 0),
        size=response_size(response),
        verb=spec.verb,
        data_format=data_format,
        url=spec.url,
        keys=keys,
        content_type=header_value(response.headers, "content-type", "null"),
        body=response.text if config.fields.body else None,
    )


def probe(client: HttpClient, spec: RequestSpec, config: ProbeConfig) -> str | None:
    """
    Run one request through the pipeline and return its rendered line.

    Returns None when the status is block-listed. Raises TransportError on transport
    failure; the dispatcher turns both into the empty result.
    """
    response = execute_request(client, spec, timeout=config.timeout)
    status_code = int(response.status_code or 0)
    if is_status_filtered(status_code, config.blocked_statuses):
        logger.debug("Filtered %s (status %d)", spec.url, status_code)
        return None

    if response.meta.get("body_truncated"):
        logger.debug(
            "Body of %s truncated at %s bytes; keys reflect a partial payload",
            spec.url,
            response.meta.get("body_bytes_limit"),
        )

    record = build_record(spec, response, config)
    return format_record(record, config.fields, color=config.color)


__all__ = ["build_record", "is_status_filtered", "probe", "response_size"]
