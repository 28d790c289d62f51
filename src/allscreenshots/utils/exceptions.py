r"""Transport failure handling utilities.

This module provides functions for handling the exceptions raised when
no HTTP response could be obtained (timeouts, connection errors, and
other transport failures).
"""

from __future__ import annotations

__all__ = ["handle_transport_error"]

import logging
from typing import TYPE_CHECKING

from allscreenshots.exceptions import NetworkError

if TYPE_CHECKING:
    import httpx

    from allscreenshots.retry import RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)


def handle_transport_error(
    exc: httpx.RequestError,
    *,
    url: str,
    method: str,
    attempt: int,
    retry_policy: RetryPolicy,
) -> None:
    """Handle a transport failure during a request attempt.

    This function logs the failure and raises a ``NetworkError`` when
    the request must not be retried, either because the failure is not
    transient or because all the retries are exhausted. If the request
    can be retried, the function returns silently to let the retry loop
    continue.

    Args:
        exc: The exception raised by httpx.
        url: The URL that was requested, used in error messages.
        method: The HTTP method name, used in error messages.
        attempt: The current attempt number (0-indexed).
        retry_policy: The retry policy in use.

    Raises:
        NetworkError: If the request must not be retried. The original
            exception is chained as the cause.
    """
    error_type = type(exc).__name__
    max_retries = retry_policy.max_retries
    logger.debug(
        f"{method} request to {url} encountered {error_type} on attempt "
        f"{attempt + 1}/{max_retries + 1}: {exc}"
    )
    if attempt >= max_retries or not retry_policy.is_retryable_transport_error(exc):
        raise NetworkError(exc, method=method, url=url) from exc
