# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import socket
from dataclasses import FrozenInstanceError

import pytest

from bulkprobe import config
from bulkprobe.config import DEFAULT_USER_AGENT, HttpSettings, ProbeConfig, parse_status_blocklist
from bulkprobe.errors import (
    TransportError,
    TransportErrorKind,
    categorize_transport_failure,
    is_dns_failure,
)
from bulkprobe.models import FieldSelection, Verb


def test_http_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("BULKPROBE_HTTP_TIMEOUT", "5.5")
    monkeypatch.setenv("BULKPROBE_USER_AGENT", "CustomAgent/1.0")
    monkeypatch.setenv("BULKPROBE_HTTP_REDIRECTS", "false")
    monkeypatch.setenv("BULKPROBE_HTTP_VERIFY_SSL", "1")
    monkeypatch.setenv("BULKPROBE_HTTP_MAX_BODY_BYTES", "1024")

    settings = config.load_http_settings()

    assert settings.timeout == 5.5
    assert settings.user_agent == "CustomAgent/1.0"
    assert settings.allow_redirects is False
    assert settings.verify_ssl is True
    assert settings.max_body_bytes == 1024


def test_http_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("BULKPROBE_HTTP_TIMEOUT", "not-a-number")
    monkeypatch.setenv("BULKPROBE_HTTP_MAX_BODY_BYTES", "-5")
    monkeypatch.delenv("BULKPROBE_USER_AGENT", raising=False)

    settings = config.load_http_settings()

    assert settings.timeout == HttpSettings.timeout
    assert settings.max_body_bytes == HttpSettings.max_body_bytes
    assert settings.user_agent == DEFAULT_USER_AGENT


def test_http_settings_defaults_favor_probing(monkeypatch):
    for name in ("BULKPROBE_HTTP_TIMEOUT", "BULKPROBE_HTTP_VERIFY_SSL", "BULKPROBE_HTTP_REDIRECTS"):
        monkeypatch.delenv(name, raising=False)
    settings = config.load_http_settings()
    assert settings.verify_ssl is False
    assert settings.allow_redirects is True
    assert settings.timeout == 2.0


def test_default_workers_reads_env(monkeypatch):
    monkeypatch.setenv("BULKPROBE_WORKERS", "9")
    assert config.default_workers() == 9
    monkeypatch.setenv("BULKPROBE_WORKERS", "0")
    assert config.default_workers() == config.DEFAULT_WORKERS


def test_parse_status_blocklist():
    assert parse_status_blocklist("404, 500,,") == frozenset({404, 500})
    assert parse_status_blocklist("") == frozenset()
    with pytest.raises(ValueError):
        parse_status_blocklist("40x")


def test_probe_config_is_frozen_and_validated():
    cfg = ProbeConfig(verb="post", workers=2)
    assert cfg.verb is Verb.POST
    assert cfg.blocked_statuses == frozenset({404})
    with pytest.raises(FrozenInstanceError):
        cfg.workers = 3  # type: ignore[misc]
    with pytest.raises(ValueError):
        ProbeConfig(workers=0)
    with pytest.raises(ValueError):
        ProbeConfig(timeout=0)
    with pytest.raises(ValueError):
        ProbeConfig(verb="PATCH")


def test_probe_config_output_requires_size_column():
    with pytest.raises(ValueError):
        ProbeConfig(output="out.txt", fields=FieldSelection(size=False))
    with pytest.raises(ValueError):
        ProbeConfig(output="out.txt", fields=FieldSelection(status=False))
    assert ProbeConfig(fields=FieldSelection(size=False)).output is None


def test_dns_failure_detected_from_text_and_cause():
    assert is_dns_failure(message="[Errno -2] Name or service not known")
    assert is_dns_failure(message="[Errno 8] nodename nor servname provided, or not known")
    assert not is_dns_failure(message="[Errno 111] Connection refused")

    try:
        try:
            raise socket.gaierror(-3, "lookup failed")
        except socket.gaierror as inner:
            raise RuntimeError("wrapped") from inner
    except RuntimeError as exc:
        assert categorize_transport_failure(exc) == TransportErrorKind.INVALID_HOSTNAME

    assert categorize_transport_failure(TimeoutError("timed out")) == TransportErrorKind.UNKNOWN


def test_transport_error_messages():
    err = TransportError(TransportErrorKind.INVALID_HOSTNAME, "http://nope.invalid")
    assert "invalid hostname" in str(err)
    assert err.url == "http://nope.invalid"
    err = TransportError(TransportErrorKind.UNKNOWN, "http://x", "boom")
    assert "boom" in str(err)
