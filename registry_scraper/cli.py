#!/usr/bin/env python3
"""
Точка входа для запуска скрапера реестров через командную строку.

Без подкоманды выполняется scrape с настройками по умолчанию.

Команды:
  scrape    Загрузить страницу и вывести найденные реестры в JSON
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования

Команда scrape опции:
  --url URL           Переопределить адрес страницы
  --selector CSS      Переопределить CSS-селектор

Дополнительно:
  --version, -v       Показать версию

Пример:
  registry-scraper --log-level INFO scrape
"""
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from registry_scraper import __version__
from registry_scraper.config import ScraperConfig, load_config
from registry_scraper.engine import run
from registry_scraper.fetcher import FetchError
from registry_scraper.logger import init_logging

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(__version__, '--version', '-v', message='RegistryScraper, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML или JSON.'
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
    help='Путь к файлу логов (stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд RegistryScraper CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg

    if ctx.invoked_subcommand is None:
        ctx.invoke(scrape)


@cli.command('scrape', context_settings=CONTEXT_SETTINGS)
@click.option('--url', 'url', default=None, help='Адрес страницы (override url)')
@click.option('--selector', 'selector', default=None, help='CSS-селектор (override selector)')
@click.pass_context
def scrape(ctx, url, selector):
    """Загрузить страницу и вывести записи в JSON."""
    cfg = ctx.obj['config']
    if selector is not None:
        try:
            cfg = ScraperConfig(**{**cfg.model_dump(), 'selector': selector})
        except ValidationError as e:
            print_error(f'Некорректный селектор: {e}')
    try:
        run(url, config=cfg)
    except ValidationError as e:
        print_error(f'Некорректный URL: {e}')
    except FetchError as e:
        print_error(f'Ошибка при загрузке страницы: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
