# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Fan requests out over a fixed-width thread pool and fan the results back in.

Every submitted task puts exactly one message on the shared channel: the
color-stripped result line, or the empty string when there is nothing to show
(transport failure, block-listed status, or an unexpected fault inside the
task). The driver thread drains exactly as many messages as it submitted
tasks before returning.
"""

from __future__ import annotations

import logging
import queue
import sys
import threading
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TextIO

from ..config import ProbeConfig
from ..errors import TransportError
from ..http.client import HttpClient
from ..models import RequestSpec
from ..render import strip_ansi
from .worker import probe

logger = logging.getLogger(__name__)

EMPTY_RESULT = ""

LineSink = Callable[[str], None]


class StdoutSink:
    """Print result lines as they arrive; one lock keeps lines from interleaving."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream
        self._lock = threading.Lock()

    def __call__(self, line: str) -> None:
        stream = self._stream or sys.stdout
        with self._lock:
            stream.write(line + "\n")
            stream.flush()


class Dispatcher:
    """Runs the per-request pipeline for many RequestSpecs on a shared client."""

    def __init__(self, client: HttpClient, config: ProbeConfig, on_line: LineSink | None = None):
        self.client = client
        self.config = config
        self.on_line = on_line or StdoutSink()

    def _run_task(self, spec: RequestSpec, channel: queue.Queue[str]) -> None:
        message = EMPTY_RESULT
        try:
            line = probe(self.client, spec, self.config)
            if line:
                message = strip_ansi(line)
                self.on_line(line)
        except TransportError as exc:
            logger.debug("Request failed: %s", exc)
        except Exception:  # noqa: BLE001
            logger.warning("Unexpected error while probing %s", spec.url, exc_info=True)
            message = EMPTY_RESULT
        finally:
            channel.put(message)

    def dispatch(self, specs: Sequence[RequestSpec]) -> list[str]:
        """Probe every spec and return one message per spec, in completion order."""
        specs = list(specs)
        if not specs:
            return []

        channel: queue.Queue[str] = queue.Queue()
        logger.debug("Dispatching %d requests over %d workers", len(specs), self.config.workers)
        with ThreadPoolExecutor(max_workers=self.config.workers, thread_name_prefix="bulkprobe") as pool:
            for spec in specs:
                pool.submit(self._run_task, spec, channel)
            messages = [channel.get() for _ in range(len(specs))]
        return messages


__all__ = ["EMPTY_RESULT", "Dispatcher", "LineSink", "StdoutSink"]
