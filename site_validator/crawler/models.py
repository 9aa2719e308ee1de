# site_validator/crawler/models.py
"""
Data models for the SiteValidator crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from site_validator.errors import CheckError
from site_validator.parser.soap_parser import ValidationReport


@dataclass(slots=True)
class CheckResult:
    """Outcome of checking one page: fetched content plus the failure, if any."""

    url: str
    content: bytes = b""
    error: Optional[CheckError] = None
    report: Optional[ValidationReport] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class VisitedSet:
    """
    Per-run mapping of URL string to its validation outcome.

    Keys are only ever added; a URL that is present is never checked again,
    whatever its recorded value.
    """

    _outcomes: Dict[str, bool] = field(default_factory=dict)

    def record(self, url: str, ok: bool) -> None:
        self._outcomes[url] = ok

    def get(self, url: str) -> Optional[bool]:
        return self._outcomes.get(url)

    def __contains__(self, url: object) -> bool:
        return url in self._outcomes

    def __len__(self) -> int:
        return len(self._outcomes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._outcomes)

    def items(self) -> List[Tuple[str, bool]]:
        return list(self._outcomes.items())

    @property
    def passed(self) -> List[str]:
        return [url for url, ok in self._outcomes.items() if ok]

    @property
    def failed(self) -> List[str]:
        return [url for url, ok in self._outcomes.items() if not ok]
