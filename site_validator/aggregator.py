# File: site_validator/aggregator.py
"""site_validator.aggregator: сводка результатов проверки для логов и отчётов."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Iterable, List, Optional, TypedDict

from site_validator.crawler.models import CheckResult


class PageInfo(TypedDict):
    """Итог проверки одной страницы."""

    url: str
    ok: bool
    error: Optional[str]
    error_count: int
    warning_count: int


@dataclass(slots=True)
class CrawlSummary:
    """Результаты проверки сайта в порядке обхода."""

    pages: List[PageInfo] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.pages)

    @property
    def passed(self) -> int:
        return sum(1 for p in self.pages if p["ok"])

    @property
    def failed(self) -> int:
        return self.total - self.passed

    def as_dict(self) -> dict:
        data = asdict(self)
        data.update(total=self.total, passed=self.passed, failed=self.failed)
        return data

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление сводки."""
        return json.dumps(self.as_dict(), ensure_ascii=False, indent=2 if pretty else None)


def _page_info(result: CheckResult) -> PageInfo:
    report = result.report
    return {
        "url": result.url,
        "ok": result.ok,
        "error": None if result.ok else str(result.error),
        "error_count": report.error_count if report else 0,
        "warning_count": report.warning_count if report else 0,
    }


def aggregate_results(results: Iterable[CheckResult]) -> CrawlSummary:
    """Собирает результаты проверок в CrawlSummary."""
    return CrawlSummary(pages=[_page_info(r) for r in results])
