# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
bulkprobe package entrypoint.

bulkprobe sends one HTTP request per target URL over a bounded thread pool,
classifies each response body as JSON, XML or neither, extracts representative
key names, and prints one annotated line per response. HTTP behavior is
abstracted behind an injectable client interface, and domain objects are
modeled with typed dataclasses.
"""

from .config import HttpSettings, ProbeConfig, load_http_settings
from .errors import BulkProbeError, FormatterContractError, SetupError, TransportError, TransportErrorKind
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .models import DataFormat, FieldSelection, FormatKind, RequestSpec, ResponseRecord, Verb
from .payload import detect_format, extract_keys
from .render import format_record, strip_ansi
from .runtime import BulkProbe, ProbeRun
from .scan import Dispatcher
from .version import __version__

__all__ = [
    "BulkProbe",
    "BulkProbeError",
    "DataFormat",
    "Dispatcher",
    "FieldSelection",
    "FormatKind",
    "FormatterContractError",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "ProbeConfig",
    "ProbeRun",
    "RequestSpec",
    "ResponseRecord",
    "SetupError",
    "StubHttpClient",
    "TransportError",
    "TransportErrorKind",
    "Verb",
    "create_default_http_client",
    "detect_format",
    "extract_keys",
    "format_record",
    "load_http_settings",
    "setup_logging",
    "strip_ansi",
    "__version__",
]
