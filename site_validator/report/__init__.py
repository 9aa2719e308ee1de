# File: site_validator/report/__init__.py
"""site_validator.report: Утилиты для генерации отчётов (JSON и HTML) используемые CLI и тестами."""

from .html_report import render_html
from .json_report import render_json

__all__ = ["render_json", "render_html"]
