# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe request/record models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .formats import DataFormat


class Verb(str, Enum):
    GET = "GET"
    POST = "POST"
    HEAD = "HEAD"

    @classmethod
    def parse(cls, value: str) -> Verb:
        try:
            return cls(str(value).strip().upper())
        except ValueError as exc:
            raise ValueError(f"unsupported HTTP verb: {value!r}") from exc


@dataclass(frozen=True)
class FieldSelection:
    """Which columns the line formatter renders."""

    status: bool = True
    size: bool = True
    verb: bool = True
    format: bool = True
    keys: bool = True
    content_type: bool = True
    url: bool = True
    body: bool = False


@dataclass(frozen=True)
class RequestSpec:
    """One planned HTTP call, consumed exactly once by a worker."""

    url: str
    verb: Verb = Verb.GET
    body: str = ""


@dataclass(frozen=True)
class ResponseRecord:
    """Materialized facts about one response, consumed by the line formatter."""

    status_code: int
    size: int
    verb: Verb
    data_format: DataFormat
    url: str
    keys: list[str] = field(default_factory=list)
    content_type: str = "null"
    body: str | None = None
