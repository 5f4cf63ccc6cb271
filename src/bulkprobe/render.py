# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Render a ResponseRecord as one annotated result line."""

from __future__ import annotations

import re

from colorama import Fore, Style

from .models import DataFormat, FieldSelection, FormatKind, ResponseRecord, UnknownFormatError, Verb

_ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")

_VERB_COLORS = {
    Verb.GET: Fore.GREEN,
    Verb.POST: Fore.BLUE,
    Verb.HEAD: Fore.YELLOW,
}


def _paint(text: str, *styles: str, color: bool = True) -> str:
    if not color or not styles:
        return text
    return "".join(styles) + text + Style.RESET_ALL


def strip_ansi(line: str) -> str:
    """Remove terminal color escape sequences."""
    return _ANSI_ESCAPE_RE.sub("", line)


def status_styles(status_code: int) -> tuple[str, ...]:
    if 200 <= status_code < 300:
        return (Fore.GREEN,)
    if 500 <= status_code < 600:
        return (Fore.RED,)
    if 400 <= status_code < 500:
        return (Fore.YELLOW,)
    return (Fore.BLACK,)


def format_label(data_format: DataFormat, *, color: bool = True) -> str:
    kind = data_format.kind
    if kind is FormatKind.JSON:
        return _paint("json", Fore.GREEN, Style.BRIGHT, color=color)
    if kind is FormatKind.XML:
        return _paint("xml", Fore.MAGENTA, Style.BRIGHT, color=color)
    if kind is FormatKind.NONE:
        return "none"
    raise UnknownFormatError(kind)


def format_record(record: ResponseRecord, fields: FieldSelection | None = None, *, color: bool = True) -> str:
    """
    Build the result line for one response.

    Column order is fixed: status, size, verb, format, keys, content-type, url, body.
    Keys are only rendered when a JSON or XML payload was detected.
    """
    fields = fields or FieldSelection()
    parts: list[str] = []

    if fields.status:
        parts.append(_paint(str(record.status_code), *status_styles(record.status_code), color=color))
    if fields.size:
        parts.append(str(record.size))
    if fields.verb:
        parts.append(_paint(record.verb.value.lower(), _VERB_COLORS[record.verb], color=color))
    if fields.format:
        parts.append(format_label(record.data_format, color=color))
    if fields.keys and record.data_format.detected:
        parts.append(_paint(f'"{" ".join(record.keys)}"', Fore.WHITE, Style.BRIGHT, color=color))
    if fields.content_type:
        parts.append(f'"{record.content_type}"')
    if fields.url:
        parts.append(record.url)
    if fields.body and record.body is not None:
        parts.append(f"\n{record.body}" if parts else record.body)

    return " ".join(parts)


__all__ = ["format_label", "format_record", "status_styles", "strip_ansi"]
