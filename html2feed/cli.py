"""
cli.py
======
Command line entry point for html2feed.

Usage:
    html2feed serve [--host HOST] [--port PORT] [--reload]
    html2feed preview --url <url> --select <selector> --title <selector> [--link ...] [--date ... --date-format ...]
"""

import argparse
import sys

import uvicorn
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

from html2feed.config import Settings
from html2feed.exceptions import Html2FeedError
from html2feed.models import FeedRecord
from html2feed.service import FeedService
from html2feed.utils.logging import setup_logging

APP_FACTORY = 'html2feed.server:create_app'

custom_theme = Theme(
    {
        'info': 'dim cyan',
        'warning': 'magenta',
        'danger': 'bold red',
        'success': 'bold green',
        'step': 'bold blue',
    }
)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(prog='html2feed', description='Turn any HTML page into an Atom/RSS feed')
    parser.add_argument('--log-level', type=str, help='Logging level (overrides HTML2FEED_LOG_LEVEL)')
    subparsers = parser.add_subparsers(dest='command', required=True)

    serve = subparsers.add_parser('serve', help='Run the HTTP service')
    serve.add_argument('--host', type=str, help='Bind host (overrides HTML2FEED_HOST)')
    serve.add_argument('--port', type=int, help='Bind port (overrides HTML2FEED_PORT)')
    serve.add_argument('--reload', action='store_true', help='Restart the server when source files change')

    preview = subparsers.add_parser('preview', help='Extract a feed once and print it')
    preview.add_argument('--url', required=True, help='Page to convert')
    preview.add_argument('--select', required=True, help='Comma-separated selectors for item elements')
    preview.add_argument('--title', required=True, help='Selector for the item title')
    preview.add_argument('--link', help='Selector for the item link, optionally <selector>/<attribute>')
    preview.add_argument('--date', help='Selector for the item date')
    preview.add_argument('--date-format', help='strptime format of the date text')
    preview.add_argument('--exclude', help='Comma-separated selectors; matching items are dropped')
    preview.add_argument('--format', choices=['atom', 'rss'], default='atom', help='Feed format (default: atom)')
    preview.add_argument('--xml', action='store_true', help='Print the feed XML instead of a table')

    return parser


def preview_params(args: argparse.Namespace) -> dict[str, str]:
    """Map preview arguments onto the service's query parameters."""
    params = {
        'url': args.url,
        'select': args.select,
        'title': args.title,
        'link': args.link,
        'date': args.date,
        'dateFormat': args.date_format,
        'exclude': args.exclude,
        'format': args.format,
    }
    return {name: value for name, value in params.items() if value is not None}


def print_record(console: Console, record: FeedRecord) -> None:
    """Print a feed record as a table."""
    console.print(Panel(f'[bold]{record.title}[/bold]\n{record.link}', border_style='blue'))

    table = Table(show_header=True, header_style='bold magenta')
    table.add_column('#', justify='right')
    table.add_column('Title')
    table.add_column('Link')
    table.add_column('Updated')

    for position, item in enumerate(record.items, start=1):
        table.add_row(
            str(position),
            item.title,
            item.link or '-',
            item.updated.isoformat() if item.updated else '-',
        )

    console.print(table)
    updated = record.updated.isoformat() if record.updated else 'unknown'
    console.print(f'[success]{len(record.items)} items, most recent update: {updated}[/success]')


def run_preview(args: argparse.Namespace, settings: Settings, console: Console) -> int:
    """Run a single extraction and print the outcome."""
    service = FeedService(settings)
    try:
        console.print(f'[step]Fetching {args.url}...[/step]')
        rendered = service.build(preview_params(args))
    except Html2FeedError as e:
        console.print(f'[danger]{type(e).__name__}: {e}[/danger]')
        return 1
    finally:
        service.close()

    if args.xml:
        console.print(rendered.body, markup=False, highlight=False)
    else:
        print_record(console, rendered.record)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    console = Console(theme=custom_theme)

    try:
        settings = Settings.from_env()
    except ValueError as e:
        console.print(f'[danger]Invalid configuration: {e}[/danger]')
        return 2

    setup_logging(args.log_level or settings.log_level, settings.log_file, settings.logfire_token)

    if args.command == 'preview':
        return run_preview(args, settings, console)

    host = args.host or settings.host
    port = args.port or settings.port
    console.print(f'[info]Serving html2feed on http://{host}:{port}/[/info]')
    # An import string lets uvicorn rebuild the app in its reloader process
    uvicorn.run(APP_FACTORY, factory=True, host=host, port=port, reload=args.reload)
    return 0


if __name__ == '__main__':
    sys.exit(main())
