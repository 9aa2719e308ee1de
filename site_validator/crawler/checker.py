# site_validator/crawler/checker.py
"""
Checker module: fetches a page and submits it to the W3C validation service.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

import click
from aiohttp import ClientError, ClientSession, ClientTimeout, MultipartWriter, hdrs

from site_validator.config import ValidatorConfig
from site_validator.errors import (
    CheckError,
    TransportError,
    UnexpectedStatus,
    UnsupportedContentType,
    ValidatorRejected,
)
from site_validator.crawler.models import CheckResult
from site_validator.logger import LOGGER_NAME
from site_validator.parser.soap_parser import ValidationReport, parse_soap
from site_validator.utils import escape_quotes

VALIDATOR_STATUS_HEADER = "X-W3C-Validator-Status"
OUTPUT_FORMAT = "soap12"


def build_upload(url: str, content: bytes, content_type: str) -> MultipartWriter:
    """
    Build the multipart body expected by the validator.

    The page goes in ``uploaded_file`` named after its URL, and ``output``
    asks for a SOAP 1.2 answer.
    """
    writer = MultipartWriter("form-data")
    writer.append(
        content,
        {
            hdrs.CONTENT_TYPE: content_type,
            hdrs.CONTENT_DISPOSITION: (
                f'form-data; name="uploaded_file"; filename="{escape_quotes(url)}"'
            ),
        },
    )
    writer.append(OUTPUT_FORMAT, {hdrs.CONTENT_DISPOSITION: 'form-data; name="output"'})
    return writer


class PageChecker:
    """Fetches pages and has them validated, one request at a time."""

    def __init__(self, config: ValidatorConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session
        self._owns_session = session is None
        self.logger = logging.getLogger(LOGGER_NAME)

    async def __aenter__(self) -> PageChecker:
        if self.session is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def check(self, url: str) -> CheckResult:
        """
        Check *url* and return the outcome.

        Page-level failures never propagate: they are stored on the result
        together with whatever content was fetched before the failure.
        """
        if not self.session:
            raise RuntimeError("Session not initialized")
        result = CheckResult(url=url)
        try:
            await self._check(self.session, url, result)
        except CheckError as exc:
            result.error = exc
        except (ClientError, asyncio.TimeoutError) as exc:
            result.error = TransportError(str(exc) or exc.__class__.__name__)
        return result

    async def _check(self, session: ClientSession, url: str, result: CheckResult) -> None:
        # content type probe
        async with session.head(url, allow_redirects=True) as resp:
            content_type = resp.headers.get(hdrs.CONTENT_TYPE, "")
            if "text/html" not in content_type:
                raise UnsupportedContentType(content_type)
            if self.config.check_status and resp.status != 200:
                raise UnexpectedStatus(resp.status)

        async with session.get(url) as resp:
            result.content = await resp.read()
            content_type = resp.headers.get(hdrs.CONTENT_TYPE, "text/html")
        self.logger.debug("Fetched %s (%d bytes, %s)", url, len(result.content), content_type)

        upload = build_upload(url, result.content, content_type)
        async with session.post(str(self.config.validator), data=upload) as resp:
            status = resp.headers.get(VALIDATOR_STATUS_HEADER, "")
            body = await resp.read()

        result.report = self._parse_report(body)
        if status != "Valid":
            if self.config.print_message:
                click.echo(body.decode("utf-8", errors="replace"), err=True)
            raise ValidatorRejected(status, result.report)

    def _parse_report(self, body: bytes) -> Optional[ValidationReport]:
        if not body.strip():
            return None
        report = parse_soap(body)
        self.logger.debug(
            "Validator report: %d errors, %d warnings", report.error_count, report.warning_count
        )
        return report
