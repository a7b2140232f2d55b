# === FILE: awareness_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа AwarenessScout для командной строки.

Команды:
  analyze URL   Загрузить сайт, извлечь сигналы, определить метро, вывести/сохранить JSON
  digest URL    Вывести текстовый дайджест сайта
  config        Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (по умолчанию встроенные значения)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования

Команда analyze опции:
  --json PATH         Сохранить JSON-отчёт в файл
  --pretty            Преформатировать JSON-вывод (отступ 2)
  --include-markup    Добавить в JSON сырую разметку страниц
  --timeout SEC       Таймаут всего анализа (секунд)

Дополнительно:
  --version, -v       Показать версию AwarenessScout

Пример:
  awareness-scout analyze example-law.com --json report.json
"""
import asyncio
import sys

import click

from awareness_scout import __version__
from awareness_scout.config import load_config
from awareness_scout.engine import Engine
from awareness_scout.logger import DEFAULT_FORMAT, init_logging
from awareness_scout.report.json_report import render_json
from awareness_scout.utils import normalize_input_url

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg="red", err=True)
    sys.exit(1)


def _run_analysis(cfg, url: str, timeout):
    try:
        target = normalize_input_url(url)
    except ValueError as e:
        print_error(str(e))

    engine = Engine(cfg)
    try:
        if timeout:
            return asyncio.run(asyncio.wait_for(engine.analyze_async(target), timeout=timeout))
        return asyncio.run(engine.analyze_async(target))
    except asyncio.TimeoutError:
        print_error(f"Analysis did not finish within {timeout} seconds")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, "--version", "-v", message="AwarenessScout, version %(version)s")
@click.option(
    "--config", "-c", "config_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="Путь к файлу конфигурации YAML/JSON.",
)
@click.option(
    "--log-level", "log_level",
    default="WARNING", show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Уровень логирования",
)
@click.option(
    "--log-file", "log_file",
    default=None,
    type=click.Path(writable=True, dir_okay=False),
    help="Путь к файлу логов (stderr, если не указан)",
)
@click.option(
    "--log-format", "log_format",
    default=DEFAULT_FORMAT,
    show_default=True,
    help="Строка формата для логов",
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд AwarenessScout CLI."""
    init_logging(level=log_level, log_file=log_file, log_format=log_format)
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f"Ошибка загрузки конфигурации: {e}")
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg


@cli.command("analyze", context_settings=CONTEXT_SETTINGS)
@click.argument("url")
@click.option(
    "--json", "-j", "json_output",
    default=None,
    type=click.Path(writable=True, dir_okay=False),
    help="Сохранить JSON-отчёт в файл",
)
@click.option("--pretty", is_flag=True, help="Преформатировать JSON-вывод (отступ 2)")
@click.option("--include-markup", is_flag=True, help="Добавить в JSON сырую разметку страниц")
@click.option(
    "--timeout", "-t", "timeout",
    type=float,
    default=None,
    help="Таймаут всего анализа (секунд)",
)
@click.pass_context
def analyze(ctx, url, json_output, pretty, include_markup, timeout):
    """Проанализировать сайт и вывести JSON-пакет сигналов."""
    result = _run_analysis(ctx.obj["config"], url, timeout)

    if not json_output:
        click.echo(result.json(pretty=pretty, include_markup=include_markup))
        return

    try:
        saved = render_json(result, json_output, include_markup=include_markup)
    except OSError as e:
        print_error(f"Ошибка при сохранении JSON: {e}")
    click.echo(f"JSON report: {saved}")


@cli.command("digest", context_settings=CONTEXT_SETTINGS)
@click.argument("url")
@click.option("--timeout", "-t", "timeout", type=float, default=None)
@click.pass_context
def digest(ctx, url, timeout):
    """Вывести текстовый дайджест и найденное метро."""
    result = _run_analysis(ctx.obj["config"], url, timeout)
    click.echo(result.digest)
    click.echo(
        f"\nDetected metro: {result.metro.label} "
        f"(confidence: {result.metro.confidence.value}, source: {result.metro.source})"
    )


@cli.command("config", context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj["config"]
    click.echo(cfg.model_dump_json(indent=2))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
