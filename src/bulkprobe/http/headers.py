# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header lookup utilities.

HTTP header field names are case-insensitive (RFC 9110), while responses are stored as plain
dicts, so lookups match names without regard to case.
"""

from __future__ import annotations

from collections.abc import Mapping


def header_value(headers: Mapping[object, object] | None, name: str, default: str = "") -> str:
    """
    Return a header value using case-insensitive key matching.

    Fast-paths common key casings before falling back to a full scan.
    """
    if not headers or not name:
        return default

    lower = str(name).lower()
    for key in (name, lower, lower.title()):
        if key in headers:
            value = headers.get(key)
            return default if value is None else str(value).strip()

    for key, value in headers.items():
        if key is None:
            continue
        if str(key).lower() == lower:
            return default if value is None else str(value).strip()

    return default


__all__ = ["header_value"]
