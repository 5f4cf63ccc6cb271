# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Turn the raw target argument into planned requests."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..config import ProbeConfig
from ..http.url import to_url
from ..models import RequestSpec

logger = logging.getLogger(__name__)


def read_candidates(url_or_file: str) -> list[str]:
    """
    Return the raw candidates named by `url_or_file`.

    A readable file yields its non-blank lines; anything else is a single URL literal.
    """
    try:
        with open(url_or_file, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, ValueError):
        return [url_or_file]

    candidates = [line.strip() for line in text.splitlines()]
    candidates = [line for line in candidates if line]
    logger.debug("Read %d targets from %s", len(candidates), url_or_file)
    return candidates


def resolve_urls(url_or_file: str) -> list[str]:
    """Resolve the input into absolute URLs, keeping order and duplicates."""
    return [to_url(candidate) for candidate in read_candidates(url_or_file)]


def parse_extension_blocklist(raw: str | Iterable[str] | None) -> tuple[str, ...]:
    """Normalize ``"png, .css"`` into ``(".png", ".css")``."""
    if raw is None:
        return ()
    items = raw.split(",") if isinstance(raw, str) else list(raw)
    suffixes: list[str] = []
    for item in items:
        item = str(item).strip()
        if not item:
            continue
        suffixes.append(item if item.startswith(".") else f".{item}")
    return tuple(suffixes)


def filter_extensions(urls: Iterable[str], blocked: Iterable[str]) -> list[str]:
    """Drop URLs ending with any blocked suffix (exact, case-sensitive)."""
    suffixes = tuple(blocked)
    if not suffixes:
        return list(urls)
    kept: list[str] = []
    for url in urls:
        if url.endswith(suffixes):
            logger.debug("Skipping %s (blocked extension)", url)
            continue
        kept.append(url)
    return kept


def plan_requests(url_or_file: str, config: ProbeConfig) -> list[RequestSpec]:
    """Resolve, filter and wrap the targets into RequestSpecs."""
    urls = filter_extensions(resolve_urls(url_or_file), config.blocked_extensions)
    return [RequestSpec(url=url, verb=config.verb, body=config.body) for url in urls]


__all__ = [
    "filter_extensions",
    "parse_extension_blocklist",
    "plan_requests",
    "read_candidates",
    "resolve_urls",
]
