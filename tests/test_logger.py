"""Tests for logging setup with colorlog."""

import logging
from collections.abc import Iterator

import pytest
from colorlog import ColoredFormatter

from edgeio.logger import (
    get_log_formatter,
    is_running_under_systemd,
    setup_logging,
)


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    formatters = [handler.formatter for handler in handlers]
    yield
    root.setLevel(level)
    for handler in root.handlers:
        if handler not in handlers:
            root.removeHandler(handler)
    for handler, formatter in zip(handlers, formatters):
        handler.setFormatter(formatter)


def test_systemd_detection(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("JOURNAL_STREAM", raising=False)
    assert not is_running_under_systemd()
    monkeypatch.setenv("JOURNAL_STREAM", "8:12345")
    assert is_running_under_systemd()


def test_formatter_keeps_timestamp_outside_systemd(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("JOURNAL_STREAM", raising=False)
    formatter = get_log_formatter()
    assert isinstance(formatter, ColoredFormatter)
    assert "%(asctime)s" in formatter._fmt


def test_formatter_drops_timestamp_under_systemd(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("JOURNAL_STREAM", "8:12345")
    formatter = get_log_formatter()
    assert isinstance(formatter, ColoredFormatter)
    assert "%(asctime)s" not in formatter._fmt
    assert "%(levelname)s" in formatter._fmt


def test_plain_formatter() -> None:
    formatter = get_log_formatter(color=False)
    assert not isinstance(formatter, ColoredFormatter)
    assert "%(log_color)s" not in formatter._fmt


@pytest.mark.parametrize(
    ("debug_level", "level"),
    [(0, logging.INFO), (1, logging.DEBUG), (2, logging.DEBUG)],
)
def test_setup_logging(debug_level: int, level: int) -> None:
    setup_logging(debug_level=debug_level)
    root = logging.getLogger()
    assert root.level == level
    assert root.handlers
    assert all(
        isinstance(handler.formatter, ColoredFormatter) for handler in root.handlers
    )
