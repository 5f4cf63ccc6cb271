# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level bulkprobe facade wiring planning, dispatch and reporting."""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass, field

from .config import HttpSettings, ProbeConfig, load_http_settings
from .http.client import HttpClient, create_default_http_client
from .models import RequestSpec
from .scan.dispatcher import Dispatcher, LineSink
from .scan.report import sort_results, write_results
from .scan.targets import plan_requests


@dataclass
class ProbeRun:
    """
    Outcome of one run: the planned requests, their raw messages and the non-empty lines.

    Lines are sorted by descending size only when an output file is configured; otherwise
    they keep completion order.
    """

    specs: list[RequestSpec] = field(default_factory=list)
    messages: list[str] = field(default_factory=list)
    lines: list[str] = field(default_factory=list)


class BulkProbe:
    """
    Convenience wrapper that owns the shared HTTP client for a run.

    The client is built once (raising SetupError if that fails) and reused by every
    worker; closing the facade closes the client.
    """

    def __init__(
        self,
        config: ProbeConfig | None = None,
        http_client: HttpClient | None = None,
        http_settings: HttpSettings | None = None,
        on_line: LineSink | None = None,
    ):
        self.config = config or ProbeConfig()
        self.http_settings = http_settings or load_http_settings()
        self.http_client = http_client or create_default_http_client(self.http_settings)
        self.dispatcher = Dispatcher(self.http_client, self.config, on_line=on_line)

    def run(self, url_or_file: str) -> ProbeRun:
        specs = plan_requests(url_or_file, self.config)
        messages = self.dispatcher.dispatch(specs)
        if self.config.output is not None:
            lines = sort_results(messages)
            write_results(lines, self.config.output)
        else:
            lines = [message for message in messages if message]
        return ProbeRun(specs=specs, messages=messages, lines=lines)

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> BulkProbe:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
