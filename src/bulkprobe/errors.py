# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
from enum import Enum

# Substrings seen in resolver failures across platforms (glibc, macOS, Windows, httpcore).
_DNS_ERROR_MARKERS = (
    "name or service not known",
    "nodename nor servname",
    "temporary failure in name resolution",
    "no address associated with hostname",
    "getaddrinfo failed",
    "name resolution",
    "dns error",
)


class BulkProbeError(Exception):
    """Base class for bulkprobe errors."""


class SetupError(BulkProbeError):
    """The run cannot start, e.g. the shared HTTP client could not be built."""


class TransportErrorKind(str, Enum):
    INVALID_HOSTNAME = "INVALID_HOSTNAME"
    UNKNOWN = "UNKNOWN"


class TransportError(BulkProbeError):
    """A request could not be sent or its response could not be read."""

    def __init__(self, kind: TransportErrorKind, url: str, message: str = ""):
        self.kind = kind
        self.url = url
        self.message = message
        if kind is TransportErrorKind.INVALID_HOSTNAME:
            text = f"invalid hostname ({url})"
        else:
            text = f"unknown error ({url}): {message}" if message else f"unknown error ({url})"
        super().__init__(text)


class FormatterContractError(BulkProbeError):
    """A result line does not carry an integer size as its second token."""


def _exception_chain(exc: BaseException | None):
    seen: set[int] = set()
    while exc is not None and id(exc) not in seen:
        seen.add(id(exc))
        yield exc
        exc = exc.__cause__ or exc.__context__


def is_dns_failure(exc: BaseException | None = None, message: str | None = None) -> bool:
    """
    Return True when an exception (or its error text) signals a DNS resolution failure.

    httpx wraps resolver errors in ConnectError, so the cause chain is walked for a
    socket.gaierror before falling back to the error text.
    """
    for item in _exception_chain(exc):
        if isinstance(item, socket.gaierror):
            return True
    texts = [str(item) for item in _exception_chain(exc)]
    if message:
        texts.append(message)
    return any(marker in text.lower() for text in texts for marker in _DNS_ERROR_MARKERS)


def categorize_transport_failure(exc: BaseException | None = None, message: str | None = None) -> TransportErrorKind:
    """Map a transport failure to its TransportErrorKind."""
    if is_dns_failure(exc, message):
        return TransportErrorKind.INVALID_HOSTNAME
    return TransportErrorKind.UNKNOWN


__all__ = [
    "BulkProbeError",
    "FormatterContractError",
    "SetupError",
    "TransportError",
    "TransportErrorKind",
    "categorize_transport_failure",
    "is_dns_failure",
]
