"""Tests for the logging setup.

Created: 2026-10-19
Version: 1.0.0
License: MIT
"""

import logging
import logging.handlers
import time

import pytest

from utils import logging_config
from utils.config import Config
from utils.logging_config import log_performance, setup_logging


@pytest.fixture
def root_logger(monkeypatch):
    """Give each test a fresh setup and drop the handlers it installed."""
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    monkeypatch.setattr(logging_config, "_configured", False)

    yield root

    for handler in list(root.handlers):
        if handler not in original_handlers:
            root.removeHandler(handler)
            handler.close()
    logging_config._installed_handlers.clear()
    root.setLevel(original_level)


def test_setup_writes_rotating_file(root_logger, tmp_path, monkeypatch):
    monkeypatch.setattr(Config, "LOG_MAX_BYTES", 2048)
    monkeypatch.setattr(Config, "LOG_BACKUP_COUNT", 2)
    log_file = tmp_path / "logs" / "reviewer.log"

    setup_logging(level="debug", log_file=str(log_file))
    logging.getLogger("tests.reviewer").info("report received")

    assert root_logger.level == logging.DEBUG
    file_handlers = [
        handler for handler in root_logger.handlers
        if isinstance(handler, logging.handlers.RotatingFileHandler)
    ]
    assert len(file_handlers) == 1
    assert file_handlers[0].maxBytes == 2048
    assert file_handlers[0].backupCount == 2

    file_handlers[0].flush()
    assert "report received" in log_file.read_text(encoding="utf-8")


def test_quiet_loggers_from_config(root_logger, monkeypatch):
    monkeypatch.setattr(Config, "QUIET_LOGGERS", ["tests.noisy"])
    logging.getLogger("tests.noisy").setLevel(logging.DEBUG)

    setup_logging(log_file="")

    assert logging.getLogger("tests.noisy").level == logging.WARNING


def test_setup_runs_once_unless_forced(root_logger):
    setup_logging(log_file="")
    count = len(root_logger.handlers)

    setup_logging(log_file="")
    assert len(root_logger.handlers) == count

    setup_logging(log_file="", force=True)
    assert len(root_logger.handlers) == count


def test_log_performance_appends_details(caplog):
    logger = logging.getLogger("tests.timing")

    with caplog.at_level(logging.INFO, logger="tests.timing"):
        elapsed = log_performance(logger, "Report analysis", time.time(), attachments=2, score=78)

    assert elapsed >= 0
    message = caplog.records[-1].getMessage()
    assert message.startswith("Report analysis took ")
    assert message.endswith("attachments=2 score=78")
