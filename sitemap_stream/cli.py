# === FILE: sitemap_stream/cli.py ===
#!/usr/bin/env python3
"""
Точка входа sitemap-stream для работы с локальными файлами sitemap.

Команды:
  dump      Прочитать sitemap (XML index, XML urlset или текст) и вывести записи в JSON
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (по умолчанию значения ReaderConfig)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования

Команда dump опции:
  --format FMT        auto | index | urlset | text
  --strict            Мягкие ошибки записей прерывают разбор
  --limit INT         Макс. число записей
  --json PATH         Сохранить JSON-отчёт в файл
  --pretty            Преформатировать JSON-вывод (отступ 2)

Пример:
  sitemap-stream dump sitemap.xml --pretty --limit 100
"""
import json
import sys
from pathlib import Path

import click

from sitemap_stream import __version__
from sitemap_stream.config import ReaderConfig, load_config
from sitemap_stream.engine import SitemapFormat, iter_entries, open_iterator
from sitemap_stream.errors import SitemapError
from sitemap_stream.logger import DEFAULT_FORMAT, init_logging
from sitemap_stream.report.json_report import entries_to_dicts, render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])
FORMAT_CHOICES = [fmt.value for fmt in SitemapFormat]


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='sitemap-stream, version %(version)s')
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
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд sitemap-stream."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    cfg = ReaderConfig()
    if config_path is not None:
        try:
            cfg = load_config(config_path)
        except Exception as e:
            print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('dump', context_settings=CONTEXT_SETTINGS)
@click.argument('path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    '--format', '-f', 'format_',
    default=None,
    type=click.Choice(FORMAT_CHOICES),
    help='Формат sitemap (по умолчанию из конфига, auto: определить по содержимому)'
)
@click.option(
    '--strict', is_flag=True, default=False,
    help='Прерывать разбор на мягких ошибках записей'
)
@click.option(
    '--limit', '-l', 'limit',
    type=click.IntRange(min=1),
    default=None,
    help='Макс. число записей (override limit из конфига)'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-вывод (отступ 2)'
)
@click.pass_context
def dump(ctx, path, format_, strict, limit, json_output, pretty):
    """Прочитать sitemap PATH и вывести записи в JSON."""
    cfg: ReaderConfig = ctx.obj['config']
    fmt = SitemapFormat(format_) if format_ else cfg.format
    strict = strict or cfg.strict
    limit = limit if limit is not None else cfg.limit

    try:
        with path.open('rb') as stream:
            iterator = open_iterator(
                stream, fmt, encoding=cfg.encoding, max_line_length=cfg.max_line_length
            )
            entries = list(iter_entries(iterator, strict=strict, limit=limit))
    except SitemapError as e:
        print_error(f'Ошибка разбора sitemap {path}: {e}')
    except OSError as e:
        print_error(f'Ошибка чтения {path}: {e}')

    if json_output:
        try:
            saved = render_json(entries, json_output, pretty=pretty)
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')
        click.echo(f'JSON report: {saved} ({len(entries)} entries)')
        return

    indent = 2 if pretty else None
    click.echo(json.dumps(entries_to_dicts(entries), ensure_ascii=False, indent=indent))


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
