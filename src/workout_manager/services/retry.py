"""Retry utilities for remote fetches with exponential backoff."""
import logging
from typing import Callable, TypeVar

import requests
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
    before_sleep_log,
)


logger = logging.getLogger(__name__)

T = TypeVar("T")

# Default retry configuration
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_MIN_WAIT_SECONDS = 1
DEFAULT_MAX_WAIT_SECONDS = 10

RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}


def is_retryable_error(exception: BaseException) -> bool:
    """
    Determine if an exception is retryable.

    Retryable errors include:
    - Rate limit errors (429)
    - Server errors (5xx)
    - Timeout errors
    - Connection errors

    Non-retryable errors include:
    - Authentication errors (401, 403)
    - Bad request errors (400)
    - Not found errors (404)
    - Malformed URLs
    """
    if isinstance(exception, requests.HTTPError):
        response = exception.response
        if response is not None:
            return response.status_code in RETRYABLE_STATUS_CODES

    if isinstance(exception, (requests.Timeout, requests.ConnectionError)):
        return True

    if isinstance(exception, (requests.exceptions.MissingSchema, requests.exceptions.InvalidURL)):
        return False

    error_str = str(exception).lower()
    exception_type = type(exception).__name__.lower()

    # Check for rate limit (429) - always retry
    if "429" in error_str or ("rate" in error_str and "limit" in error_str):
        return True

    # Check for server errors (5xx) - retry
    if any(code in error_str for code in ["500", "502", "503", "504"]):
        return True

    # Check for timeout errors - retry
    if "timeout" in error_str or "timed out" in error_str or "timeout" in exception_type:
        return True

    # Check for connection errors - retry
    if "connection" in error_str or "connect" in exception_type:
        return True

    # Check for DNS resolution failures - retry (transient network issue)
    if "temporary failure in name resolution" in error_str:
        return True

    # Default: don't retry unknown errors
    return False


def create_retry_decorator(
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    min_wait_seconds: float = DEFAULT_MIN_WAIT_SECONDS,
    max_wait_seconds: float = DEFAULT_MAX_WAIT_SECONDS,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Create a retry decorator with exponential backoff.

    Only errors accepted by is_retryable_error are retried; anything else
    is raised on the first attempt.

    Args:
        max_attempts: Maximum number of attempts
        min_wait_seconds: Minimum wait time between retries
        max_wait_seconds: Maximum wait time between retries

    Returns:
        A retry decorator configured with the specified parameters
    """
    return retry(
        retry=retry_if_exception(is_retryable_error),
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(
            multiplier=1,
            min=min_wait_seconds,
            max=max_wait_seconds,
        ),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
