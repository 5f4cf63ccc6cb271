# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Payload shape models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class FormatKind(str, Enum):
    JSON = "json"
    XML = "xml"
    NONE = "none"


@dataclass(frozen=True)
class DataFormat:
    """
    Closed tagged variant over the detected payload shape.

    `tree` holds the parsed JSON value for JSON, the root `xml.etree.ElementTree.Element`
    for XML, and None when the payload matched neither grammar.
    """

    kind: FormatKind
    tree: Any = None

    @classmethod
    def json(cls, value: Any) -> DataFormat:
        return cls(FormatKind.JSON, value)

    @classmethod
    def xml(cls, element: Any) -> DataFormat:
        return cls(FormatKind.XML, element)

    @classmethod
    def none(cls) -> DataFormat:
        return cls(FormatKind.NONE)

    @property
    def detected(self) -> bool:
        return self.kind is not FormatKind.NONE


class UnknownFormatError(ValueError):
    """Raised when a DataFormat consumer meets a kind it does not handle."""

    def __init__(self, kind: object):
        super().__init__(f"unhandled data format: {kind!r}")
        self.kind = kind
