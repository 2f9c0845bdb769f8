#!/usr/bin/env python3
"""
Command-line entry point of DepthCrawler.

Commands:
  crawl     Crawl from SEED and print per-depth stats

Common options:
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stdout only when omitted)
  --log-format FORMAT Logging format (e.g. "%(asctime)s %(levelname)s %(message)s")

crawl arguments and options:
  SEED MAX_FANOUT MAX_DEPTH UNIQUE
  --config PATH       YAML/JSON file with any CrawlConfig field
  --output-dir DIR    Where the <depth>/ folders are created
  --json PATH         Save a JSON report
  --html PATH         Save an HTML report
  --template DIR      Folder with Jinja2 templates
  --crawl-timeout SEC Deadline for the whole crawl (seconds)

Other:
  --version, -v       Show the DepthCrawler version

Example:
  depth-crawler crawl https://example.com 3 2 true --json report.json
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from depth_crawler import __version__
from depth_crawler.config import load_config
from depth_crawler.engine import start_crawl
from depth_crawler.logger import DEFAULT_FORMAT, init_logging
from depth_crawler.report.html_report import render_html
from depth_crawler.report.json_report import render_json
from depth_crawler.stats import format_report

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _validation_message(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}" for err in exc.errors()
    )


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='DepthCrawler, version %(version)s')
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file (stdout only when omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Format string for log records'
)
def cli(log_level, log_file, log_format):
    """DepthCrawler command group."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('seed')
@click.argument('max_fanout', type=int)
@click.argument('max_depth', type=int)
@click.argument('unique', type=click.Choice(['true', 'false']))
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='YAML/JSON file with extra settings (arguments take precedence)'
)
@click.option(
    '--output-dir', '-o', 'output_dir',
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help='Root directory for the <depth>/ folders [default: current directory]'
)
@click.option('--timeout', type=float, default=None, help='Timeout of a single request (seconds)')
@click.option('--user-agent', 'user_agent', default=None, help='User-Agent header')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save a JSON report to a file'
)
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save an HTML report to a file'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Folder with Jinja2 templates [default: bundled template]'
)
@click.option(
    '--crawl-timeout', 'crawl_timeout',
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help='Deadline for the whole crawl (seconds)'
)
def crawl(seed, max_fanout, max_depth, unique, config_path, output_dir, timeout, user_agent,
          json_output, html_output, template_dir, crawl_timeout):
    """Crawl from SEED, keeping at most MAX_FANOUT new URLs per page, down to MAX_DEPTH.

    UNIQUE=true forbids visiting a URL again at a deeper level.
    """
    try:
        cfg = load_config(
            config_path,
            seed=seed,
            max_fanout=max_fanout,
            max_depth=max_depth,
            unique_across_depths=(unique == 'true'),
            output_dir=output_dir,
            timeout=timeout,
            user_agent=user_agent,
        )
    except ValidationError as e:
        print_error(f'Invalid configuration: {_validation_message(e)}')
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Cannot load configuration: {e}')

    click.echo(
        f'Starting to crawl from {cfg.seed}, maxUrls = {cfg.max_fanout}, '
        f'maxDepth = {cfg.max_depth}, uniqueFlag = {str(cfg.unique_across_depths).lower()}'
    )
    try:
        if crawl_timeout is not None:
            report = asyncio.run(
                asyncio.wait_for(start_crawl(cfg), timeout=crawl_timeout)
            )
        else:
            report = asyncio.run(start_crawl(cfg))
    except asyncio.TimeoutError:
        print_error(f'Crawl did not finish within {crawl_timeout} seconds')
    except Exception as e:
        print_error(f'Crawl failed: {e}')

    click.echo('Crawling complete!')
    click.echo(format_report(report))

    if json_output:
        try:
            saved_json = render_json(report, json_output)
            click.echo(f'JSON report: {saved_json}')
        except Exception as e:
            print_error(f'Cannot save JSON report: {e}')

    if html_output:
        try:
            saved_html = render_html(report, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Cannot save HTML report: {e}')


if __name__ == "__main__":
    cli()
