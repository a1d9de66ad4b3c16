#!/usr/bin/env python3
"""
Command-line entry point for SiteCrawl.

Usage:
  sitecrawl [OPTIONS] SEED_URL

Crawls every page reachable from SEED_URL on the same host and prints how
many internal links point at each page.

Options:
  --max-depth INT     Maximum number of hops from the seed (default: 3)
  --breadth-first     Visit pages level by level instead of depth-first
  --timeout SEC       Timeout per request
  --user-agent TEXT   User-Agent header
  --retries INT       Retries on network errors
  --json PATH         Also save a JSON report
  --html PATH         Also save an HTML report
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stdout only if omitted)
  --log-format FORMAT Logging format string
  --version, -v       Show SiteCrawl version

Example:
  sitecrawl https://wagslane.dev --max-depth 2 --json report.json
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from sitecrawl import __version__
from sitecrawl.config import CrawlerConfig
from sitecrawl.engine import start_crawl
from sitecrawl.exceptions import CrawlError
from sitecrawl.logger import DEFAULT_FORMAT, init_logging
from sitecrawl.report.html_report import render_html
from sitecrawl.report.json_report import render_json
from sitecrawl.report.text_report import print_report

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteCrawl, version %(version)s')
@click.argument('seed_url')
@click.option(
    '--max-depth', '-d', 'max_depth',
    type=int,
    default=3,
    show_default=True,
    help='Maximum number of hops from the seed page'
)
@click.option(
    '--breadth-first', is_flag=True,
    help='Visit pages level by level instead of depth-first'
)
@click.option(
    '--timeout', 'timeout',
    type=float,
    default=10.0,
    show_default=True,
    help='Timeout per request (seconds)'
)
@click.option(
    '--user-agent', 'user_agent',
    default=f'SiteCrawl/{__version__}',
    show_default=True,
    help='User-Agent header'
)
@click.option(
    '--retries', 'retry_times',
    type=int,
    default=2,
    show_default=True,
    help='Retries on network errors'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save a JSON report to this file'
)
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save an HTML report to this file'
)
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
    help='Log file path (stdout only if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Logging format string'
)
def cli(seed_url, max_depth, breadth_first, timeout, user_agent, retry_times,
        json_output, html_output, log_level, log_file, log_format):
    """Crawl SEED_URL and report internal link counts per page."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = CrawlerConfig(
            max_depth=max_depth,
            timeout=timeout,
            user_agent=user_agent,
            retry_times=retry_times,
            traversal='breadth-first' if breadth_first else 'depth-first',
        )
    except ValidationError as e:
        print_error(f'Invalid settings: {e}')

    click.echo(f'starting crawl of: {seed_url}...')
    try:
        pages = asyncio.run(start_crawl(seed_url, cfg))
    except CrawlError as e:
        print_error(f'Error: {e}')

    try:
        print_report(pages)
    except CrawlError as e:
        print_error(f'Error: {e}')

    if json_output:
        try:
            saved_json = render_json(pages, json_output)
            click.echo(f'JSON report: {saved_json}')
        except OSError as e:
            print_error(f'Error saving JSON report: {e}')

    if html_output:
        try:
            saved_html = render_html(pages, html_output, seed_url=seed_url)
            click.echo(f'HTML report: {saved_html}')
        except OSError as e:
            print_error(f'Error saving HTML report: {e}')


if __name__ == "__main__":
    cli()
