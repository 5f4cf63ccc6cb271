# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for bulkprobe."""

from .formats import DataFormat, FormatKind, UnknownFormatError
from .probe import FieldSelection, RequestSpec, ResponseRecord, Verb

__all__ = [
    "DataFormat",
    "FieldSelection",
    "FormatKind",
    "RequestSpec",
    "ResponseRecord",
    "UnknownFormatError",
    "Verb",
]
