# File: tests/conftest.py
import logging
from typing import Dict, List, Optional

import pytest

from site_validator.crawler.models import CheckResult
from site_validator.errors import CheckError, TransportError
from site_validator.logger import LOGGER_NAME


class FakeChecker:
    """
    Scripted stand-in for PageChecker.

    *pages* maps URL -> body of a page that validates; *failures* maps
    URL -> (body, error). Any other URL fails with an empty body, like an
    unreachable host.
    """

    def __init__(
        self,
        pages: Optional[Dict[str, bytes]] = None,
        failures: Optional[Dict[str, tuple[bytes, CheckError]]] = None,
    ) -> None:
        self.pages = pages or {}
        self.failures = failures or {}
        self.calls: List[str] = []

    async def check(self, url: str) -> CheckResult:
        self.calls.append(url)
        if url in self.pages:
            return CheckResult(url=url, content=self.pages[url])
        content, error = self.failures.get(url, (b"", TransportError("connection refused")))
        return CheckResult(url=url, content=content, error=error)


@pytest.fixture(autouse=True)
def quiet_logger():
    """Drop handlers bound to streams that pytest or CliRunner close after a test."""
    yield
    lg = logging.getLogger(LOGGER_NAME)
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
    lg.addHandler(logging.NullHandler())
    lg.setLevel(logging.WARNING)


class ListHandler(logging.Handler):
    """Keeps every record it receives."""

    def __init__(self) -> None:
        super().__init__(logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture()
def log_records():
    """Collect records of the project logger (it does not propagate to root)."""
    lg = logging.getLogger(LOGGER_NAME)
    handler = ListHandler()
    lg.addHandler(handler)
    lg.setLevel(logging.DEBUG)
    yield handler.records
    lg.removeHandler(handler)


@pytest.fixture()
def fake_checker():
    """Return the FakeChecker class so tests can script their own site."""
    return FakeChecker
