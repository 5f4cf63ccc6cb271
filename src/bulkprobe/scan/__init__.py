# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe orchestration: planning, dispatch and reporting."""

from .dispatcher import EMPTY_RESULT, Dispatcher, StdoutSink
from .report import line_size, render_results, sort_results, write_results
from .targets import filter_extensions, parse_extension_blocklist, plan_requests, resolve_urls
from .worker import probe

__all__ = [
    "EMPTY_RESULT",
    "Dispatcher",
    "StdoutSink",
    "filter_extensions",
    "line_size",
    "parse_extension_blocklist",
    "plan_requests",
    "probe",
    "render_results",
    "resolve_urls",
    "sort_results",
    "write_results",
]
