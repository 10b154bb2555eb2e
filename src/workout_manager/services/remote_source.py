"""
Remote workout document fetching.

Downloads the plain-text workout notation from a URL, optionally behind
HTTP basic auth. The auth token is the base64 of "user:password" and is
sent verbatim as `Authorization: Basic <token>`.
"""

import logging
from typing import Optional

import requests

from workout_manager.config import settings
from workout_manager.services.retry import (
    DEFAULT_MAX_WAIT_SECONDS,
    DEFAULT_MIN_WAIT_SECONDS,
    create_retry_decorator,
)

logger = logging.getLogger(__name__)


class RemoteFetchError(Exception):
    """Raised when the remote workout document cannot be fetched."""
    pass


def _get_text(url: str, headers: dict, timeout: float) -> str:
    response = requests.get(url, headers=headers, timeout=timeout)
    response.raise_for_status()
    # requests assumes ISO-8859-1 for text/* without a charset; documents are UTF-8
    if "charset" not in response.headers.get("Content-Type", "").lower():
        response.encoding = "utf-8"
    return response.text


def fetch_remote_text(
    url: str,
    auth_token: Optional[str] = None,
    timeout: Optional[float] = None,
    max_attempts: Optional[int] = None,
    min_wait_seconds: float = DEFAULT_MIN_WAIT_SECONDS,
    max_wait_seconds: float = DEFAULT_MAX_WAIT_SECONDS,
) -> str:
    """
    Fetch a remote text document.

    Transient failures (timeouts, connection errors, 429, 5xx) are retried
    with exponential backoff.

    Args:
        url: Document URL
        auth_token: Optional base64 basic-auth token
        timeout: Per-request timeout in seconds (defaults to settings)
        max_attempts: Attempts before giving up (defaults to settings)

    Returns:
        The response body as text

    Raises:
        RemoteFetchError: If the document could not be fetched
    """
    headers = {}
    if auth_token:
        headers["Authorization"] = f"Basic {auth_token}"

    fetch = create_retry_decorator(
        max_attempts=max_attempts or settings.REMOTE_FETCH_MAX_ATTEMPTS,
        min_wait_seconds=min_wait_seconds,
        max_wait_seconds=max_wait_seconds,
    )(_get_text)

    try:
        text = fetch(url, headers, timeout or settings.REMOTE_FETCH_TIMEOUT)
    except requests.RequestException as e:
        logger.error(f"Remote fetch failed for {url}: {e}")
        raise RemoteFetchError(f"Could not fetch workout data from {url}: {e}") from e

    logger.info(f"Fetched {len(text)} characters from {url}")
    return text
