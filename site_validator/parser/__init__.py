"""site_validator.parser: parsing of validator responses."""

from .soap_parser import ValidationMessage, ValidationReport, parse_soap

__all__ = ["ValidationMessage", "ValidationReport", "parse_soap"]
