# site_validator/errors.py
"""
Exceptions raised while checking a single page.

Every page-level failure is a :class:`CheckError`; its ``str()`` is the
detail line printed under ``[ERROR] {url}``.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from site_validator.parser.soap_parser import ValidationReport


class CheckError(Exception):
    """Base class for failures recorded against a page."""


class UnsupportedContentType(CheckError):
    """The page is not served as ``text/html``."""

    def __init__(self, content_type: str) -> None:
        super().__init__(f"{content_type} not supported")
        self.content_type = content_type


class UnexpectedStatus(CheckError):
    """The probe answered with something other than 200."""

    def __init__(self, status: int) -> None:
        super().__init__(f"Status {status}!")
        self.status = status


class ValidatorRejected(CheckError):
    """The validation service did not report the document as ``Valid``."""

    def __init__(self, status: str, report: Optional[ValidationReport] = None) -> None:
        super().__init__(f"{status}!")
        self.status = status
        self.report = report


class TransportError(CheckError):
    """Network or protocol failure talking to the page or the validator."""


class LinkParseError(ValueError):
    """A discovered link could not be turned into a URL."""


__all__ = [
    "CheckError",
    "UnsupportedContentType",
    "UnexpectedStatus",
    "ValidatorRejected",
    "TransportError",
    "LinkParseError",
]
