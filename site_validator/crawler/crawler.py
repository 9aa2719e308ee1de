# === FILE: site_validator/crawler/crawler.py ===
from __future__ import annotations

import logging
from typing import Iterator, List, Protocol

import click

from site_validator.crawler.link_extractor import extract_links
from site_validator.crawler.models import CheckResult, VisitedSet
from site_validator.logger import LOGGER_NAME

__all__ = ("Checker", "RecursiveValidator")


class Checker(Protocol):
    async def check(self, url: str) -> CheckResult: ...


class RecursiveValidator:
    """
    Validates a page and, unless disabled, every same-host page reachable from it.

    Traversal is depth-first in document order. Instead of recursing on the
    call stack it keeps a stack of link iterators, one per page being
    expanded, so the order of ``[OK]``/``[ERROR]`` lines is the same as for a
    recursive walk while arbitrarily deep sites stay within Python's
    recursion limit.
    """

    def __init__(self, checker: Checker, *, recursive: bool = True) -> None:
        self.checker = checker
        self.recursive = recursive
        self.visited = VisitedSet()
        self.results: List[CheckResult] = []
        self.logger = logging.getLogger(LOGGER_NAME)

    async def run(self, start_url: str) -> VisitedSet:
        self.logger.info("Start validation: %s", start_url)
        await self.recursive_check(start_url, start_url)
        self.logger.info(
            "Checked %d pages: %d valid, %d failed",
            len(self.visited),
            len(self.visited.passed),
            len(self.visited.failed),
        )
        return self.visited

    async def recursive_check(self, page_url: str, start_url: str) -> None:
        """
        Check *page_url* and every unvisited link found below it.

        Links are always resolved against *start_url*, not the page they
        were found on.
        """
        result = await self._check_and_report(page_url)
        if not self.recursive:
            return

        pending: List[Iterator[str]] = [iter(extract_links(result.content, start_url))]
        while pending:
            link = next(pending[-1], None)
            if link is None:
                pending.pop()
                continue
            if link in self.visited:
                continue
            result = await self._check_and_report(link)
            pending.append(iter(extract_links(result.content, start_url)))

    async def _check_and_report(self, url: str) -> CheckResult:
        result = await self.checker.check(url)
        if result.ok:
            click.echo(f"[OK] {url}")
        else:
            click.echo(f"[ERROR] {url}", err=True)
            click.echo(str(result.error), err=True)
        self.visited.record(url, result.ok)
        self.results.append(result)
        return result
