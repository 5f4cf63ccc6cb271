# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest
from colorama import Fore, Style

from bulkprobe.models import DataFormat, FieldSelection, FormatKind, ResponseRecord, UnknownFormatError, Verb
from bulkprobe.render import format_label, format_record, status_styles, strip_ansi


def make_record(**overrides) -> ResponseRecord:
    values = {
        "status_code": 200,
        "size": 1234,
        "verb": Verb.GET,
        "data_format": DataFormat.json({"id": 1, "name": "x"}),
        "url": "http://example.com/api",
        "keys": ["id", "name"],
        "content_type": "application/json",
    }
    values.update(overrides)
    return ResponseRecord(**values)


def test_plain_line_layout():
    line = format_record(make_record(), color=False)
    assert line == '200 1234 get json "id name" "application/json" http://example.com/api'


def test_stripped_colored_line_matches_plain_line():
    record = make_record(verb=Verb.POST, status_code=503)
    colored = format_record(record)
    assert "\x1b[" in colored
    assert strip_ansi(colored) == format_record(record, color=False)


def test_reparsing_stripped_line_recovers_fields():
    record = make_record(status_code=302, size=77, verb=Verb.HEAD, url="https://h/x?y=1")
    tokens = strip_ansi(format_record(record)).split()
    assert tokens[0] == "302"
    assert tokens[1] == "77"
    assert tokens[2] == "head"
    assert tokens[-1] == "https://h/x?y=1"


def test_status_colors_by_class():
    assert status_styles(201) == (Fore.GREEN,)
    assert status_styles(500) == (Fore.RED,)
    assert status_styles(404) == (Fore.YELLOW,)
    assert status_styles(301) == (Fore.BLACK,)


def test_format_labels():
    assert format_label(DataFormat.json({}), color=False) == "json"
    assert format_label(DataFormat.xml(None)) == Fore.MAGENTA + Style.BRIGHT + "xml" + Style.RESET_ALL
    assert format_label(DataFormat.none()) == "none"
    with pytest.raises(UnknownFormatError):
        format_label(DataFormat(kind="csv"))  # type: ignore[arg-type]


def test_keys_column_omitted_without_detected_format():
    record = make_record(data_format=DataFormat.none(), keys=[], content_type="null")
    line = format_record(record, color=False)
    assert line == '200 1234 get none "null" http://example.com/api'
    assert record.data_format.kind == FormatKind.NONE


def test_fields_are_independently_toggled():
    fields = FieldSelection(verb=False, format=False, keys=False, content_type=False)
    assert format_record(make_record(), fields, color=False) == "200 1234 http://example.com/api"


def test_body_is_newline_prefixed_after_other_fields():
    record = make_record(body='{"id": 1}')
    fields = FieldSelection(verb=False, format=False, keys=False, content_type=False, url=False, body=True)
    assert format_record(record, fields, color=False) == '200 1234 \n{"id": 1}'


def test_body_alone_is_not_prefixed():
    record = make_record(body="raw")
    fields = FieldSelection(
        status=False, size=False, verb=False, format=False, keys=False, content_type=False, url=False, body=True
    )
    assert format_record(record, fields, color=False) == "raw"
