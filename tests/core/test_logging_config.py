import logging

import pytest

from packages.core.logging_config import configure_logging


def test_configure_logging_env_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.delenv("LOG_DESTINATION", raising=False)
    configure_logging()
    assert logging.getLogger().level == logging.DEBUG


def test_configure_logging_explicit_level_wins(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    configure_logging(level="error", default_destination="stderr")
    assert logging.getLogger().level == logging.ERROR


def test_configure_logging_file_requires_path(monkeypatch):
    monkeypatch.setenv("LOG_DESTINATION", "file")
    monkeypatch.delenv("LOG_FILE", raising=False)
    with pytest.raises(RuntimeError):
        configure_logging()


def test_configure_logging_file(monkeypatch, tmp_path):
    log_file = tmp_path / "reminders.log"
    monkeypatch.setenv("LOG_DESTINATION", "file")
    monkeypatch.setenv("LOG_FILE", str(log_file))
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    configure_logging()

    logging.getLogger("reminders.test").warning("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "hello" in log_file.read_text()
