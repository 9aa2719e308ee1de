"""site_validator.crawler: traversal, link extraction and page checking."""

from .checker import PageChecker
from .crawler import RecursiveValidator
from .link_extractor import extract_links
from .models import CheckResult, VisitedSet

__all__ = ["PageChecker", "RecursiveValidator", "extract_links", "CheckResult", "VisitedSet"]
