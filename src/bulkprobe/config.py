# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for bulkprobe."""

import os
from dataclasses import dataclass, field

from .models.probe import FieldSelection, Verb
from .version import __version__

DEFAULT_USER_AGENT = f"bulkprobe/{__version__}"
DEFAULT_WORKERS = 4
DEFAULT_BLOCKED_EXTENSIONS = "png,jpg,jpeg,gif,svg,ico,css,woff,woff2,ttf,eot,webp,mp4,mp3"
DEFAULT_BLOCKED_STATUSES = "404"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class HttpSettings:
    """HTTP client defaults."""

    timeout: float = 2.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = False
    max_body_bytes: int = 16 * 1024 * 1024

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        timeout = _float_env("BULKPROBE_HTTP_TIMEOUT", cls.timeout)
        if timeout <= 0:
            timeout = cls.timeout
        max_body_bytes = _int_env("BULKPROBE_HTTP_MAX_BODY_BYTES", cls.max_body_bytes)
        if max_body_bytes <= 0:
            max_body_bytes = cls.max_body_bytes
        return cls(
            timeout=timeout,
            user_agent=os.getenv("BULKPROBE_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("BULKPROBE_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("BULKPROBE_HTTP_VERIFY_SSL", cls.verify_ssl),
            max_body_bytes=max_body_bytes,
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()


def default_workers() -> int:
    workers = _int_env("BULKPROBE_WORKERS", DEFAULT_WORKERS)
    return workers if workers > 0 else DEFAULT_WORKERS


def parse_status_blocklist(raw: str | None) -> frozenset[int]:
    """Parse a comma-separated status list such as ``"404,500"``."""
    statuses: set[int] = set()
    for item in (raw or "").split(","):
        item = item.strip()
        if not item:
            continue
        try:
            statuses.add(int(item))
        except ValueError as exc:
            raise ValueError(f"invalid status code in block-list: {item!r}") from exc
    return frozenset(statuses)


@dataclass(frozen=True)
class ProbeConfig:
    """
    Immutable run parameters shared read-only by every worker.

    Built once before dispatch. The output file relies on the size column being the
    second token of every line, so hiding status or size is rejected when an output
    destination is configured.
    """

    verb: Verb = Verb.GET
    body: str = ""
    workers: int = DEFAULT_WORKERS
    blocked_extensions: tuple[str, ...] = ()
    blocked_statuses: frozenset[int] = frozenset({404})
    output: str | None = None
    fields: FieldSelection = field(default_factory=FieldSelection)
    color: bool = True
    timeout: float | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.verb, Verb):
            object.__setattr__(self, "verb", Verb.parse(str(self.verb)))
        if self.workers < 1:
            raise ValueError(f"worker count must be positive, got {self.workers}")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if self.output is not None and not (self.fields.status and self.fields.size):
            raise ValueError("an output file requires both the status and size fields")


__all__ = [
    "DEFAULT_BLOCKED_EXTENSIONS",
    "DEFAULT_BLOCKED_STATUSES",
    "DEFAULT_USER_AGENT",
    "DEFAULT_WORKERS",
    "HttpSettings",
    "ProbeConfig",
    "default_workers",
    "load_http_settings",
    "parse_status_blocklist",
]
