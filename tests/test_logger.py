# File: tests/test_logger.py
import logging
import sys
from logging.handlers import RotatingFileHandler

from site_validator.logger import LOGGER_NAME, configure, init_logging


def test_console_handler_writes_to_stderr():
    lg = init_logging("DEBUG")
    (handler,) = lg.handlers
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stderr
    assert lg.level == logging.DEBUG
    assert lg.propagate is False


def test_log_file_adds_rotating_handler(tmp_path):
    log_file = tmp_path / "run.log"
    lg = init_logging("INFO", log_file=log_file)
    assert any(isinstance(h, RotatingFileHandler) for h in lg.handlers)

    lg.info("Start validation: %s", "http://example.org/")
    for handler in lg.handlers:
        handler.flush()
    assert "Start validation: http://example.org/" in log_file.read_text(encoding="utf-8")
    for handler in lg.handlers:
        handler.close()


def test_configure_can_append_handlers():
    init_logging()
    lg = configure(level=logging.ERROR, replace_handlers=False)
    assert lg is logging.getLogger(LOGGER_NAME)
    assert len(lg.handlers) == 2
    assert lg.level == logging.ERROR


def test_records_reach_collecting_fixture(log_records):
    logging.getLogger(LOGGER_NAME).warning("Skipping link %r: %s", "/x", "bad")
    assert [r.getMessage() for r in log_records] == ["Skipping link '/x': bad"]
