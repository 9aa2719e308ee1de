# === FILE: site_validator/parser/soap_parser.py ===
"""Parsing of the validator's SOAP 1.2 answer.

The checker asks the validation service for ``output=soap12``.  The verdict
itself travels in the ``X-W3C-Validator-Status`` header; the body carries the
details, roughly::

    <env:Envelope ...>
      <env:Body>
        <m:markupvalidationresponse ...>
          <m:validity>false</m:validity>
          <m:errors>
            <m:errorcount>1</m:errorcount>
            <m:errorlist>
              <m:error>
                <m:line>13</m:line>
                <m:col>5</m:col>
                <m:message>end tag for "p" omitted</m:message>
              </m:error>
            </m:errorlist>
          </m:errors>
          <m:warnings>...</m:warnings>
        </m:markupvalidationresponse>
      </env:Body>
    </env:Envelope>

:func:`parse_soap` turns that into a :class:`ValidationReport`.  It is
deliberately lenient: a body that is not SOAP at all yields an empty report
instead of an exception, because the report is only ever supplementary to
the header verdict.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional, Union

from bs4 import BeautifulSoup
from bs4.element import Tag

__all__: Sequence[str] = ("ValidationMessage", "ValidationReport", "parse_soap")


@dataclass(slots=True)
class ValidationMessage:
    """One error or warning reported by the validator."""

    kind: str
    message: str
    line: Optional[int] = None
    col: Optional[int] = None


@dataclass(slots=True)
class ValidationReport:
    """Details extracted from a SOAP validation response."""

    validity: Optional[bool] = None
    error_count: int = 0
    warning_count: int = 0
    messages: list[ValidationMessage] = field(default_factory=list)

    # Convenience helpers ---------------------------------------------------
    @property
    def errors(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.kind == "error"]

    @property
    def warnings(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.kind == "warning"]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _text(parent: Tag, name: str) -> Optional[str]:
    node = parent.find(name)
    if not isinstance(node, Tag):
        return None
    return node.get_text(strip=True)


def _int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _messages(soup: BeautifulSoup, kind: str) -> list[ValidationMessage]:
    found: list[ValidationMessage] = []
    for node in soup.find_all(f"m:{kind}"):
        if not isinstance(node, Tag):
            continue
        found.append(
            ValidationMessage(
                kind=kind,
                message=_text(node, "m:message") or "",
                line=_int(_text(node, "m:line")),
                col=_int(_text(node, "m:col")),
            )
        )
    return found


# ---------------------------------------------------------------------------
# Public function
# ---------------------------------------------------------------------------


def parse_soap(body: Union[str, bytes]) -> ValidationReport:
    """Parse a SOAP 1.2 markup-validation response (text or raw bytes)."""
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")

    # html.parser keeps namespaced names such as "m:errorcount" as-is
    soup = BeautifulSoup(body, "html.parser")

    validity_text = _text(soup, "m:validity")
    validity = None if validity_text is None else validity_text.lower() == "true"

    errors = _messages(soup, "error")
    warnings = _messages(soup, "warning")

    error_count = _int(_text(soup, "m:errorcount"))
    warning_count = _int(_text(soup, "m:warningcount"))

    return ValidationReport(
        validity=validity,
        error_count=len(errors) if error_count is None else error_count,
        warning_count=len(warnings) if warning_count is None else warning_count,
        messages=errors + warnings,
    )
