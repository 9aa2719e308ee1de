# === FILE: site_validator/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска SiteValidator через командную строку.

Проверяет страницу (и, по умолчанию, все страницы того же хоста, на которые
она ссылается) через W3C validation service.

Опции проверки:
  --url, -u URL       Стартовый URL (обязательно)
  --validator URL     Адрес валидатора (default: http://localhost:8080/check)
  --ignore-status     Принимать коды ответа, отличные от 200
  --print-message     Печатать ответ валидатора для невалидных страниц
  --no-follow         Не переходить по ссылкам
  --timeout SEC       Таймаут одного запроса
  --user-agent UA     Заголовок User-Agent
  --config, -c PATH   YAML/JSON файл с теми же настройками

Отчёты:
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с Jinja2-шаблонами

Логирование:
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (только stderr, если не указан)
  --log-format FORMAT Формат логирования

Пример:
  site-validator --url https://example.org/ --validator http://localhost:8080/check --json report.json
"""
import asyncio
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click
from pydantic import ValidationError

from site_validator import __version__
from site_validator.config import DEFAULT_VALIDATOR, ValidatorConfig, read_config_file
from site_validator.engine import start_validation
from site_validator.logger import DEFAULT_FORMAT, init_logging
from site_validator.report.html_report import render_html
from site_validator.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str, ctx: Optional[click.Context] = None) -> NoReturn:
    click.secho(message, fg='red', err=True)
    if ctx is not None:
        click.echo(ctx.get_usage(), err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteValidator, version %(version)s')
@click.option('--url', '-u', 'url', default=None, help='URL to start validation of')
@click.option(
    '--validator', 'validator_url',
    default=None,
    help=f'W3C validation service  [default: {DEFAULT_VALIDATOR}]'
)
@click.option('--ignore-status', is_flag=True, help='Accept status codes other than 200')
@click.option('--print-message', is_flag=True, help='Print validation message')
@click.option('--no-follow', is_flag=True, help='Do not follow links')
@click.option('--timeout', type=float, default=None, help='Таймаут одного запроса (секунд)')
@click.option('--user-agent', 'user_agent', default=None, help='Заголовок User-Agent')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--show-config', is_flag=True,
    help='Показать итоговую конфигурацию в JSON и выйти'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблонами (по умолчанию шаблоны пакета)'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (только stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, url, validator_url, ignore_status, print_message, no_follow, timeout, user_agent,
        config_path, show_config, json_output, html_output, template_dir,
        log_level, log_file, log_format):
    """Recursively validate a website with the W3C validator."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        data = read_config_file(config_path)
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')

    overrides = {'url': url, 'validator': validator_url, 'timeout': timeout, 'user_agent': user_agent}
    data.update({k: v for k, v in overrides.items() if v is not None})
    if ignore_status:
        data['check_status'] = False
    if print_message:
        data['print_message'] = True
    if no_follow:
        data['recursive'] = False

    if not str(data.get('url') or '').strip():
        print_error('url is required', ctx)
    validator_text = str(data.get('validator', DEFAULT_VALIDATOR)).strip()
    if not validator_text:
        print_error('validator service is required', ctx)

    try:
        cfg = ValidatorConfig(**data)
    except ValidationError as e:
        print_error(str(e))

    if show_config:
        click.echo(cfg.model_dump_json(indent=2))
        return

    click.echo(f'Using {validator_text} ...')
    try:
        summary = asyncio.run(start_validation(cfg))
    except Exception as e:
        print_error(f'Ошибка при проверке: {e}')

    if json_output:
        try:
            click.echo(f'JSON report: {render_json(summary, json_output)}')
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            click.echo(f'HTML report: {render_html(summary, template_dir, html_output)}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


if __name__ == "__main__":
    cli()
