# File: site_validator/engine.py
"""site_validator.engine: Orchestration layer для запуска проверки и агрегации результатов."""

from __future__ import annotations

from site_validator.aggregator import CrawlSummary, aggregate_results
from site_validator.config import ValidatorConfig
from site_validator.crawler.checker import PageChecker
from site_validator.crawler.crawler import RecursiveValidator
from site_validator.logger import logger

__all__ = ["start_validation"]


async def start_validation(config: ValidatorConfig) -> CrawlSummary:
    """
    Запускает обход с проверкой каждой страницы и возвращает сводку.

    Parameters
    ----------
    config : ValidatorConfig
        Конфигурация запуска.

    Returns
    -------
    CrawlSummary
        Итоги по всем проверенным страницам в порядке обхода.
    """
    async with PageChecker(config) as checker:
        validator = RecursiveValidator(checker, recursive=config.recursive)
        await validator.run(config.url)
    summary = aggregate_results(validator.results)
    logger.debug("Aggregated %d results", summary.total)
    return summary
