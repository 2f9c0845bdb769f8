# File: tests/test_logger.py
import logging
from logging.handlers import RotatingFileHandler

import pytest

from depth_crawler.logger import LOGGER_NAME, init_logging


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    init_logging()


def test_console_only_by_default():
    lg = init_logging(level="DEBUG")
    assert lg.name == LOGGER_NAME
    assert lg.level == logging.DEBUG
    assert len(lg.handlers) == 1
    assert not lg.propagate


def test_log_file_is_written(tmp_path):
    log_file = tmp_path / "crawl.log"
    lg = init_logging(log_file=log_file, log_format="%(levelname)s %(message)s")
    assert any(isinstance(h, RotatingFileHandler) for h in lg.handlers)
    lg.warning("Skipping %s", "http://example.com")
    for handler in lg.handlers:
        handler.flush()
    assert "WARNING Skipping http://example.com" in log_file.read_text(encoding="utf-8")


def test_reinit_replaces_handlers(tmp_path):
    init_logging(log_file=tmp_path / "a.log")
    lg = init_logging()
    assert len(lg.handlers) == 1
