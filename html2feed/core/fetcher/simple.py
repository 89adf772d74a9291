"""HTTP fetcher using requests with browser-like headers."""

import logging
import time
from http.cookiejar import DefaultCookiePolicy

import logfire
import requests

from html2feed.core.fetcher.base import HTMLFetcher
from html2feed.exceptions import FetchError
from html2feed.models import FetchResult
from html2feed.utils.headers import generate_headers
from html2feed.utils.retry import get_retryer, log_retry

TRANSIENT_ERRORS: tuple[type[Exception], ...] = (requests.ConnectionError, requests.Timeout)


class SimpleFetcher(HTMLFetcher):
    """Fetches a page with a single GET, retrying transient network errors.

    Attributes:
        timeout: Request timeout in seconds
        max_attempts: Attempts made on connection errors and timeouts
        user_agent: Fixed user agent, or None to rotate
        session: Requests session reused across fetches for connection pooling;
            its cookie jar stores nothing and is emptied after every fetch
        logger: Logger instance

    """

    def __init__(self, timeout: float = 30, max_attempts: int = 2, user_agent: str | None = None):
        """Initialize the simple fetcher.

        Args:
            timeout: Request timeout in seconds. Defaults to 30.
            max_attempts: Attempts made on transient errors. Defaults to 2.
            user_agent: Fixed user agent. Defaults to None (rotated).

        """
        self.timeout = timeout
        self.max_attempts = max_attempts
        self.user_agent = user_agent
        self.session = requests.Session()
        # An empty allow-list rejects every Set-Cookie
        self.session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))
        self.logger = logging.getLogger(__name__)

    def _get(self, url: str) -> requests.Response:
        retryer = get_retryer(max_attempts=self.max_attempts, exceptions=TRANSIENT_ERRORS, log_callback=log_retry)
        return retryer(
            self.session.get,
            url,
            headers=generate_headers(self.user_agent),
            timeout=self.timeout,
            allow_redirects=True,
        )

    def fetch(self, url: str) -> FetchResult:
        """Fetch the raw bytes of a page.

        Args:
            url: The URL to fetch

        Returns:
            FetchResult carrying the body and declared encoding.

        Raises:
            FetchError: On network failure or a non-2xx response

        """
        start_time = time.time()

        with logfire.span('fetch_html', url=url):
            try:
                response = self._get(url)
            except requests.RequestException as e:
                logfire.error('Fetch error', url=url, error=str(e))
                raise FetchError(url, str(e)) from e
            finally:
                # Cookies set by one upstream must never reach the next request
                self.session.cookies.clear()

            fetch_time = time.time() - start_time
            if not 200 <= response.status_code < 300:
                logfire.warn('Upstream returned error status', url=url, status_code=response.status_code)
                raise FetchError(url, f'upstream returned HTTP {response.status_code}', response.status_code)

            self.logger.info(f'Fetched {len(response.content):,} bytes from {url} ({fetch_time:.2f}s)')
            return FetchResult(
                url=url,
                content=response.content,
                status_code=response.status_code,
                # requests falls back to ISO-8859-1 for text/* without a charset; let the parser sniff instead
                encoding=response.encoding if 'charset' in response.headers.get('Content-Type', '') else None,
                final_url=response.url,
                fetch_time=fetch_time,
            )

    def close(self) -> None:
        """Close the session."""
        self.session.close()
