# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Payload shape detection and representative key extraction.

Detection tries a strict JSON parse first and a strict XML parse second, so a
payload valid under both grammars (e.g. a bare number) is classified as JSON.

Key extraction is a heuristic, not schema inference:
- JSON objects contribute their key names in document order.
- JSON arrays contribute the keys of their first element only.
- XML elements holding text contribute their own tag name; other elements
  contribute the de-duplicated keys of their children.

Both walks are pure and stop at MAX_KEY_DEPTH nested levels.
"""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from typing import Any

from .models import DataFormat, FormatKind, UnknownFormatError

BOM = "\ufeff"
MAX_KEY_DEPTH = 64


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")


def normalize_payload(text: str) -> str:
    """Trim surrounding whitespace and a leading byte-order mark."""
    return (text or "").strip().lstrip(BOM).strip()


def parse_json(text: str) -> tuple[bool, Any]:
    """Strict JSON parse returning ``(ok, value)``."""
    try:
        return True, json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return False, None


def parse_xml(text: str) -> ET.Element | None:
    try:
        return ET.fromstring(text)
    except (ET.ParseError, ValueError, RecursionError):
        return None


def detect_format(text: str) -> DataFormat:
    """Classify a response body as JSON, XML or neither."""
    data = normalize_payload(text)
    if not data:
        return DataFormat.none()

    ok, value = parse_json(data)
    if ok:
        return DataFormat.json(value)

    element = parse_xml(data)
    if element is not None:
        return DataFormat.xml(element)

    return DataFormat.none()


def json_keys(value: Any, _depth: int = 0) -> list[str]:
    if _depth >= MAX_KEY_DEPTH:
        return []
    if isinstance(value, dict):
        return [str(key) for key in value]
    if isinstance(value, list):
        if not value:
            return []
        return json_keys(value[0], _depth + 1)
    return []


def local_name(tag: Any) -> str:
    """Drop an ElementTree ``{namespace}`` prefix from a tag."""
    name = str(tag)
    if name.startswith("{") and "}" in name:
        return name.split("}", 1)[1]
    return name


def _has_text_child(element: ET.Element) -> bool:
    # ElementTree keeps direct text in `.text` and in the `.tail` of each child.
    # Whitespace-only runs are formatting, not text nodes.
    if element.text and element.text.strip():
        return True
    return any(child.tail and child.tail.strip() for child in element)


def xml_keys(element: ET.Element, _depth: int = 0) -> list[str]:
    if _depth >= MAX_KEY_DEPTH:
        return []
    if _has_text_child(element):
        return [local_name(element.tag)]

    keys: list[str] = []
    seen: set[str] = set()
    for child in element:
        if not isinstance(child.tag, str):
            continue
        for key in xml_keys(child, _depth + 1):
            if key not in seen:
                seen.add(key)
                keys.append(key)
    return keys


def extract_keys(data_format: DataFormat) -> list[str]:
    """Return the representative keys for a detected payload."""
    kind = data_format.kind
    if kind is FormatKind.JSON:
        return json_keys(data_format.tree)
    if kind is FormatKind.XML:
        return xml_keys(data_format.tree)
    if kind is FormatKind.NONE:
        return []
    raise UnknownFormatError(kind)


__all__ = [
    "MAX_KEY_DEPTH",
    "detect_format",
    "extract_keys",
    "json_keys",
    "local_name",
    "normalize_payload",
    "parse_json",
    "parse_xml",
    "xml_keys",
]
