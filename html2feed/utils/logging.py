"""Logging configuration for html2feed."""

import logging
from pathlib import Path

import logfire
from rich.logging import RichHandler


def setup_logging(level: str = 'INFO', log_file: str | None = None, logfire_token: str | None = None) -> None:
    """Configure the root logger and, when a token is given, logfire.

    Console output goes through a RichHandler. A file handler with the full
    format is added when ``log_file`` is set.

    Args:
        level: Logging level name (e.g., 'DEBUG', 'INFO'), or 'ALL'. Defaults to 'INFO'.
        log_file: Path of a log file to append to. Defaults to None.
        logfire_token: Logfire write token. Defaults to None (logfire not configured).

    """
    if level.upper() == 'ALL':
        numeric_level = logging.NOTSET
    else:
        numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    console_handler = RichHandler(rich_tracebacks=True, show_path=False)
    console_handler.setLevel(numeric_level)
    root_logger.addHandler(console_handler)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        root_logger.addHandler(file_handler)

    if logfire_token:
        logfire.configure(token=logfire_token, service_name='html2feed')
