# site_validator/report/json_report.py

"""
Генерация JSON-отчёта для проекта SiteValidator.

Сериализация объекта CrawlSummary в файл.
"""
import json
from pathlib import Path

from site_validator.aggregator import CrawlSummary


def render_json(summary: CrawlSummary, output_path: Path | str) -> Path:
    """
    Сохраняет сводку summary в формате JSON по указанному пути.

    :param summary: объект CrawlSummary с результатами проверки
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла

    Пример:
    ```python
    from site_validator.report.json_report import render_json
    report_path = render_json(summary, 'reports/report.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(summary.as_dict(), f, ensure_ascii=False, indent=2)

    return output
