# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
import threading
import time

import pytest

from bulkprobe.config import ProbeConfig
from bulkprobe.http.adapters import StubHttpClient
from bulkprobe.http.models import HttpRequest, HttpResponse
from bulkprobe.models import RequestSpec
from bulkprobe.scan.dispatcher import EMPTY_RESULT, Dispatcher, StdoutSink
from bulkprobe.scan.worker import is_status_filtered, probe, response_size


def ok_json(body: str, status: int = 200) -> HttpResponse:
    return HttpResponse(
        ok=True,
        status_code=status,
        headers={"Content-Type": "application/json"},
        text=body,
        content=body.encode("utf-8"),
    )


class ExplodingClient:
    """Raises for URLs containing 'boom', delegates the rest."""

    def __init__(self, inner):
        self.inner = inner

    def request(self, request: HttpRequest) -> HttpResponse:
        if "boom" in request.url:
            raise RuntimeError("client bug")
        return self.inner.request(request)

    def close(self) -> None:
        return None


class SlowClient:
    def __init__(self, inner, delay: float = 0.02):
        self.inner = inner
        self.delay = delay
        self.active = 0
        self.peak = 0
        self._lock = threading.Lock()

    def request(self, request: HttpRequest) -> HttpResponse:
        with self._lock:
            self.active += 1
            self.peak = max(self.peak, self.active)
        try:
            time.sleep(self.delay)
            return self.inner.request(request)
        finally:
            with self._lock:
                self.active -= 1

    def close(self) -> None:
        return None


def _plain(**kwargs) -> ProbeConfig:
    return ProbeConfig(color=False, **kwargs)


def test_probe_formats_successful_response():
    stub = StubHttpClient({"http://h/api": ok_json('{"id": 1, "tags": []}')})
    line = probe(stub, RequestSpec(url="http://h/api"), _plain())
    assert line == '200 21 get json "id tags" "application/json" http://h/api'


def test_probe_prefers_content_length_header():
    resp = HttpResponse(ok=True, status_code=200, headers={"Content-Length": "5000"}, text="", content=b"")
    assert response_size(resp) == 5000
    assert response_size(ok_json("{}")) == 2


def test_probe_returns_none_for_blocked_status():
    stub = StubHttpClient({"http://h/missing": ok_json("{}", status=404)})
    assert probe(stub, RequestSpec(url="http://h/missing"), _plain()) is None
    assert probe(stub, RequestSpec(url="http://h/missing"), _plain(blocked_statuses=frozenset())) is not None
    assert is_status_filtered(404, {404})
    assert not is_status_filtered(200, {404})


@pytest.mark.parametrize("workers", [1, 2, 4, 16])
def test_exactly_one_message_per_request(workers):
    stub = StubHttpClient(
        {
            "http://h/ok": ok_json('{"a": 1}'),
            "http://h/404": ok_json("{}", status=404),
            "http://h/500": ok_json("<e><f>x</f></e>", status=500),
        }
    )
    client = ExplodingClient(stub)
    urls = ["http://h/ok", "http://h/404", "http://h/unreachable", "http://h/boom", "http://h/500"] * 5
    specs = [RequestSpec(url=url) for url in urls]

    printed: list[str] = []
    lock = threading.Lock()

    def sink(line: str) -> None:
        with lock:
            printed.append(line)

    messages = Dispatcher(client, _plain(workers=workers), on_line=sink).dispatch(specs)

    assert len(messages) == len(specs)
    assert sum(1 for m in messages if m == EMPTY_RESULT) == 15
    assert sorted(m for m in messages if m) == sorted(printed)
    assert all("http://h/404" not in line for line in printed)


def test_pool_width_bounds_concurrency():
    stub = StubHttpClient({f"http://h/{i}": ok_json("{}") for i in range(12)})
    client = SlowClient(stub)
    specs = [RequestSpec(url=f"http://h/{i}") for i in range(12)]
    messages = Dispatcher(client, _plain(workers=3), on_line=lambda _line: None).dispatch(specs)
    assert len(messages) == 12
    assert 1 <= client.peak <= 3


def test_failing_sink_still_yields_one_message():
    stub = StubHttpClient({"http://h/ok": ok_json("{}")})

    def broken_sink(line: str) -> None:
        raise BrokenPipeError("stdout closed")

    messages = Dispatcher(stub, _plain(), on_line=broken_sink).dispatch([RequestSpec(url="http://h/ok")])
    assert messages == [EMPTY_RESULT]


def test_messages_are_color_stripped_while_sink_gets_color():
    stub = StubHttpClient({"http://h/ok": ok_json('{"a": 1}')})
    printed: list[str] = []
    messages = Dispatcher(stub, ProbeConfig(color=True), on_line=printed.append).dispatch(
        [RequestSpec(url="http://h/ok")]
    )
    assert "\x1b[" in printed[0]
    assert "\x1b[" not in messages[0]
    assert messages[0].startswith("200 8 get json")


def test_empty_dispatch_returns_nothing():
    assert Dispatcher(StubHttpClient(), _plain()).dispatch([]) == []


def test_stdout_sink_writes_lines(capsys):
    sink = StdoutSink()
    sink("200 1 get none")
    assert capsys.readouterr().out == "200 1 get none\n"


def test_probe_logs_truncated_bodies(caplog):
    resp = ok_json('{"a": 1')
    resp.meta = {"body_truncated": True, "body_bytes_limit": 7}
    stub = StubHttpClient({"http://h/big": resp})

    with caplog.at_level(logging.DEBUG, logger="bulkprobe.scan.worker"):
        line = probe(stub, RequestSpec(url="http://h/big"), _plain())

    assert line == '200 7 get none "application/json" http://h/big'
    assert any("truncated at 7 bytes" in record.getMessage() for record in caplog.records)
