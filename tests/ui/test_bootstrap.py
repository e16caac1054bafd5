"""Tests for logging configuration at application start."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from kingfall.ui.bootstrap import configure_logging
from kingfall.ui.settings import AppSettings


def _capture_basic_config(monkeypatch: pytest.MonkeyPatch) -> dict[str, Any]:
    captured: dict[str, Any] = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: captured.update(kw))
    return captured


def test_level_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = _capture_basic_config(monkeypatch)
    configure_logging(AppSettings(log_level="debug"))
    assert captured["level"] == logging.DEBUG


def test_unknown_level_falls_back_to_info(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    captured = _capture_basic_config(monkeypatch)
    with caplog.at_level("WARNING", logger="kingfall.ui.bootstrap"):
        configure_logging(AppSettings(log_level="chatty"))
    assert captured["level"] == logging.INFO
    assert "Unknown log level" in caplog.text
