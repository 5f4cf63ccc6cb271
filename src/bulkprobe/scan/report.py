# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Aggregate result messages into the size-sorted output file."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..errors import FormatterContractError

logger = logging.getLogger(__name__)


def line_size(line: str) -> int:
    """Return the byte-size column (second whitespace-separated token) of a result line."""
    tokens = line.split(maxsplit=2)
    if len(tokens) < 2:
        raise FormatterContractError(f"result line has no size column: {line!r}")
    token = tokens[1]
    if not (token.isascii() and token.isdigit()):
        raise FormatterContractError(f"result line size column is not an unsigned integer: {token!r}")
    return int(token)


def sort_results(messages: Iterable[str]) -> list[str]:
    """Drop empty results and order the rest by descending size, keeping arrival order on ties."""
    lines = [message for message in messages if message]
    return sorted(lines, key=lambda line: -line_size(line))


def render_results(messages: Iterable[str]) -> str:
    return "\n".join(sort_results(messages)) + "\n"


def write_results(messages: Iterable[str], destination: str | None) -> str | None:
    """
    Write the sorted report to `destination` and return the written text.

    Does nothing when no destination is configured. A malformed line raises
    FormatterContractError before anything is written.
    """
    if destination is None:
        return None

    text = render_results(messages)
    with open(destination, "w", encoding="utf-8") as f:
        f.write(text)
    logger.debug("Wrote %d bytes to %s", len(text), destination)
    return text


__all__ = ["line_size", "render_results", "sort_results", "write_results"]
