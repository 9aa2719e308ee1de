# site_validator/crawler/link_extractor.py
"""
Link extraction for SiteValidator.

Links are found with a plain pattern match over the raw page bytes rather
than an HTML parser: the page may not be valid markup (that is what is being
checked), and a broken anchor tag simply yields no link.
"""
from __future__ import annotations

import logging
import re
from typing import List

from site_validator.errors import LinkParseError
from site_validator.logger import LOGGER_NAME
from site_validator.utils import origin_of, parse_url, strip_fragment

HYPERLINK = re.compile(rb'<a[^>]+href="([^"]+)"')

logger = logging.getLogger(LOGGER_NAME)


def extract_links(source: bytes, origin: str) -> List[str]:
    """
    Extract root-relative links from *source* as absolute URLs.

    Only hrefs starting with a single ``/`` are kept; they are resolved
    against the scheme and host of *origin* and returned without fragment,
    in document order. Duplicates are kept.
    """
    scheme, netloc = origin_of(origin)
    links: List[str] = []
    for match in HYPERLINK.finditer(source):
        href = match.group(1).decode("utf-8", errors="surrogateescape")
        if not href.startswith("/"):
            continue
        # double slash prefix -> different host
        if href.startswith("//"):
            continue
        try:
            parts = parse_url(f"{scheme}://{netloc}{href}")
        except LinkParseError as exc:
            logger.warning("Skipping link %r: %s", href, exc)
            continue
        links.append(strip_fragment(parts))
    return links
