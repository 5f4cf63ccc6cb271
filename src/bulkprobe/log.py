# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for bulkprobe."""

from __future__ import annotations

import logging
import os
import sys

DEFAULT_LOG_LEVEL = os.getenv("BULKPROBE_LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI/library use.

    Records go to stderr; stdout is reserved for result lines.
    """
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


__all__ = ["setup_logging"]
