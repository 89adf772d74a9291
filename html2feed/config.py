"""Runtime configuration loaded from the environment."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from html2feed.core.assembler import LINK_MODES, LinkMode


@dataclass
class Settings:
    """Service settings.

    Attributes:
        host: Bind host for the HTTP server
        port: Bind port for the HTTP server
        canonical_link: 'origin' (scheme://host) or 'full' (request URL)
        timeout: Fetch timeout in seconds
        fetch_retries: Fetch attempts on transient network errors
        user_agent: Fixed user agent, or None to rotate
        log_level: Root logging level name
        log_file: Optional path of a log file
        logfire_token: Token enabling logfire export

    """

    host: str = '127.0.0.1'
    port: int = 8080
    canonical_link: LinkMode = 'origin'
    timeout: float = 30.0
    fetch_retries: int = 2
    user_agent: str | None = None
    log_level: str = 'INFO'
    log_file: str | None = None
    logfire_token: str | None = None

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.canonical_link not in LINK_MODES:
            raise ValueError(f'Invalid canonical link mode: {self.canonical_link}. Choose from: {list(LINK_MODES)}')
        if not 0 < self.port < 65536:
            raise ValueError(f'Invalid port: {self.port}')
        if self.timeout <= 0:
            raise ValueError('Timeout must be positive')
        if self.fetch_retries < 1:
            raise ValueError('fetch_retries must be at least 1')

    @classmethod
    def from_env(cls, dotenv: bool = True) -> 'Settings':
        """Build settings from ``HTML2FEED_*`` environment variables.

        Args:
            dotenv: Load a ``.env`` file first. Defaults to True.

        Returns:
            The validated Settings.

        """
        if dotenv:
            load_dotenv()

        return cls(
            host=os.getenv('HTML2FEED_HOST', cls.host),
            port=int(os.getenv('HTML2FEED_PORT', str(cls.port))),
            canonical_link=os.getenv('HTML2FEED_CANONICAL_LINK', cls.canonical_link).lower(),  # type: ignore[arg-type]
            timeout=float(os.getenv('HTML2FEED_TIMEOUT', str(cls.timeout))),
            fetch_retries=int(os.getenv('HTML2FEED_FETCH_RETRIES', str(cls.fetch_retries))),
            user_agent=os.getenv('HTML2FEED_USER_AGENT') or None,
            log_level=os.getenv('HTML2FEED_LOG_LEVEL', cls.log_level),
            log_file=os.getenv('HTML2FEED_LOG_FILE') or None,
            logfire_token=os.getenv('LOGFIRE_TOKEN') or None,
        )
