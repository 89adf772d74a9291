"""Utility components for html2feed."""

from html2feed.utils.headers import UserAgentRotator, generate_headers
from html2feed.utils.logging import setup_logging
from html2feed.utils.retry import get_retryer, log_retry

__all__ = [
    'UserAgentRotator',
    'generate_headers',
    'get_retryer',
    'log_retry',
    'setup_logging',
]
