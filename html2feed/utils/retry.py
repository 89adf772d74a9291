"""Retry configuration for network calls, built on tenacity."""

from collections.abc import Callable
from typing import Any

import logfire
from tenacity import (
    BaseRetrying,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)


def get_retryer(
    max_attempts: int = 2,
    wait_min: float = 0.5,
    wait_max: float = 5.0,
    exceptions: tuple[type[Exception], ...] = (Exception,),
    log_callback: Callable[[Any], None] | None = None,
) -> BaseRetrying:
    """Create a tenacity Retrying object.

    Args:
        max_attempts: Maximum number of attempts, including the first.
        wait_min: Minimum wait between attempts in seconds.
        wait_max: Maximum wait between attempts in seconds.
        exceptions: Exception types that trigger another attempt.
        log_callback: Called before sleeping with the retry state.

    Returns:
        A Retrying object that reraises the last exception.

    """
    return Retrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(min=wait_min, max=wait_max),
        retry=retry_if_exception_type(exceptions),
        before_sleep=log_callback,
        reraise=True,
    )


def log_retry(retry_state: Any) -> None:
    """Log a retry with logfire."""
    exception = retry_state.outcome.exception()
    logfire.warn(
        'Retrying operation',
        attempt=retry_state.attempt_number,
        error=str(exception) if exception else 'Unknown error',
    )
