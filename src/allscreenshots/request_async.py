r"""Contains the execution engine for asynchronous requests with
automatic retry logic."""

from __future__ import annotations

__all__ = ["execute_with_retry_async"]

import asyncio
import logging
import sys
from typing import TYPE_CHECKING, Any

import httpx

from allscreenshots.exceptions import RequestCancelledError
from allscreenshots.retry import DEFAULT_RETRY_POLICY
from allscreenshots.utils import classify_response, decode_response, handle_transport_error

if TYPE_CHECKING:
    from allscreenshots.retry import RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)


def _propagate_cancellation() -> bool:
    r"""Return whether a cancellation should propagate unchanged.

    On Python 3.11, ``asyncio.timeout`` only turns a plain
    ``CancelledError`` into ``TimeoutError``. A cancellation requested on
    the current task is therefore re-raised as is on that version.
    """
    if sys.version_info < (3, 11) or sys.version_info >= (3, 12):
        return False
    task = asyncio.current_task()
    return task is not None and task.cancelling() > 0


async def execute_with_retry_async(
    client: httpx.AsyncClient,
    request: httpx.Request,
    *,
    retry_policy: RetryPolicy = DEFAULT_RETRY_POLICY,
    response_type: Any = None,
    expect_binary: bool = False,
) -> Any:
    """Send a request asynchronously with automatic retry logic and
    decode the result.

    This is the asynchronous counterpart of
    ``allscreenshots.request.execute_with_retry``, with the same retry
    decisions and the same delays. If the calling task is cancelled while
    the request is in flight or while waiting before a retry, no further
    attempt is made and ``RequestCancelledError`` is raised. Under
    ``asyncio.timeout``, a reached deadline still raises ``TimeoutError``.
    On Python 3.11, a cancellation of the calling task propagates as a
    plain ``asyncio.CancelledError``.

    Args:
        client: The httpx async client used to send the request.
        request: The request to send.
        retry_policy: The retry policy.
        response_type: The expected type of the decoded JSON body.
        expect_binary: If ``True``, return the raw body bytes.

    Returns:
        The decoded response (see ``decode_response``).

    Raises:
        RequestCancelledError: If the calling task is cancelled.
        NetworkError: If no response could be obtained.
        ResponseDecodingError: If the successful response cannot be decoded.
        AllScreenshotsError: The classified error of the last
            unsuccessful response.
    """
    method = request.method
    url = str(request.url)
    max_retries = retry_policy.max_retries
    attempt = 0

    while True:
        try:
            response = await client.send(request)
        except asyncio.CancelledError as exc:
            logger.debug(f"{method} request to {url} was cancelled on attempt {attempt + 1}")
            if _propagate_cancellation():
                raise
            raise RequestCancelledError(method=method, url=url) from exc
        except httpx.RequestError as exc:
            handle_transport_error(
                exc, url=url, method=method, attempt=attempt, retry_policy=retry_policy
            )
        else:
            if response.is_success:
                if attempt > 0:
                    logger.debug(f"{method} request to {url} succeeded on attempt {attempt + 1}")
                return decode_response(
                    response, response_type=response_type, expect_binary=expect_binary
                )

            error = classify_response(response, method=method, url=url)
            if attempt >= max_retries or not retry_policy.is_retryable_status(
                response.status_code
            ):
                logger.debug(
                    f"{method} request to {url} failed with status {response.status_code} "
                    f"(attempt {attempt + 1}/{max_retries + 1})"
                )
                raise error
            logger.debug(
                f"{method} request to {url} failed with retryable status "
                f"{response.status_code} (attempt {attempt + 1}/{max_retries + 1})"
            )

        sleep_time = retry_policy.delay_for_attempt(attempt)
        logger.debug(f"Waiting {sleep_time:.2f}s before retrying {method} request to {url}")
        try:
            await asyncio.sleep(sleep_time)
        except asyncio.CancelledError as exc:
            logger.debug(f"{method} request to {url} was cancelled while waiting to retry")
            if _propagate_cancellation():
                raise
            raise RequestCancelledError(method=method, url=url) from exc
        attempt += 1
