# File: site_validator/utils.py
"""site_validator.utils: URL helpers shared by the link extractor, the config and the checker."""

from __future__ import annotations

import re
from typing import Sequence
from urllib.parse import SplitResult, quote, urlsplit

from site_validator.errors import LinkParseError

__all__: Sequence[str] = (
    "parse_url",
    "strip_fragment",
    "origin_of",
    "escape_quotes",
)

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
# RFC 3986 pchar plus "/" and "%" so existing escapes survive
_PATH_SAFE = "/%:@!$&'()*+,;=-._~"
# printable ASCII: only spaces and raw non-ASCII bytes get escaped
_QUERY_SAFE = "".join(chr(c) for c in range(0x21, 0x7f))


def parse_url(raw: str) -> SplitResult:
    """
    Parse *raw* into its components, rejecting what a strict URL parser would.

    Control characters anywhere and malformed percent-escapes in the path or
    fragment raise :class:`LinkParseError`. The path is re-quoted so that
    ``/a b`` and ``/a%20b`` produce the same string. Bytes smuggled in via
    ``surrogateescape`` are percent-encoded as the original octets, so
    ``/caf\\udce9`` becomes ``/caf%E9``.
    """
    if _CONTROL_RE.search(raw):
        raise LinkParseError(f"invalid control character in URL {raw!r}")
    try:
        parts = urlsplit(raw)
        # port is validated lazily by urllib
        parts.port
    except ValueError as exc:
        raise LinkParseError(f"cannot parse {raw!r}: {exc}") from exc
    for component in (parts.path, parts.fragment):
        if _BAD_ESCAPE_RE.search(component):
            raise LinkParseError(f"invalid URL escape {component!r}")
    return parts._replace(
        path=quote(parts.path, safe=_PATH_SAFE, errors="surrogateescape"),
        query=quote(parts.query, safe=_QUERY_SAFE, errors="surrogateescape"),
    )


def strip_fragment(parts: SplitResult) -> str:
    """Return the URL string without its ``#fragment``."""
    return parts._replace(fragment="").geturl()


def origin_of(url: str) -> tuple[str, str]:
    """Return ``(scheme, host[:port])`` of *url*; userinfo is dropped."""
    parts = urlsplit(url)
    return parts.scheme, parts.netloc.rpartition("@")[2]


def escape_quotes(value: str) -> str:
    """Escape backslashes and double quotes for a quoted header parameter."""
    return value.replace("\\", "\\\\").replace('"', '\\"')
