# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers."""

from __future__ import annotations

DEFAULT_SCHEME = "http://"


def to_url(candidate: str) -> str:
    """
    Return an absolute URL, prefixing ``http://`` when no http(s) scheme is present.

    Example:
      example.com/api -> http://example.com/api
    """
    if candidate.startswith(("http://", "https://")):
        return candidate
    return f"{DEFAULT_SCHEME}{candidate}"


__all__ = ["DEFAULT_SCHEME", "to_url"]
