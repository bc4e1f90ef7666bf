"""Tests for the loguru setup."""

import pytest
from loguru import logger

from config import Config
from logger_setup import setup_logger


@pytest.fixture(autouse=True)
def quiet_logger_after():
    yield
    setup_logger(level="WARNING", log_file=None)


def test_file_sink_gets_messages(tmp_path):
    log_file = tmp_path / "logs" / "schedule.log"

    setup_logger(level="info", log_file=str(log_file))
    logger.info("schedule generated")

    text = log_file.read_text(encoding="utf-8")
    assert "INFO" in text
    assert "schedule generated" in text


def test_defaults_come_from_config(tmp_path, monkeypatch):
    log_file = tmp_path / "from_config.log"
    monkeypatch.setattr(Config, "LOG_LEVEL", "ERROR")
    monkeypatch.setattr(Config, "LOG_FILE", str(log_file))

    setup_logger()
    logger.warning("dropped warning")
    logger.error("kept error")

    text = log_file.read_text(encoding="utf-8")
    assert "kept error" in text
    assert "dropped warning" not in text
