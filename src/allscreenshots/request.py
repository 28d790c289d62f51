r"""Contains the execution engine for synchronous requests with automatic
retry logic."""

from __future__ import annotations

__all__ = ["execute_with_retry"]

import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from allscreenshots.retry import DEFAULT_RETRY_POLICY
from allscreenshots.utils import classify_response, decode_response, handle_transport_error

if TYPE_CHECKING:
    from allscreenshots.retry import RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)


def execute_with_retry(
    client: httpx.Client,
    request: httpx.Request,
    *,
    retry_policy: RetryPolicy = DEFAULT_RETRY_POLICY,
    response_type: Any = None,
    expect_binary: bool = False,
) -> Any:
    """Send a request with automatic retry logic and decode the result.

    The request is sent up to ``retry_policy.max_retries + 1`` times.
    Transient transport failures and responses with a retryable status
    are retried after waiting ``retry_policy.delay_for_attempt(attempt)``
    seconds, where ``attempt`` is the 0-indexed number of the attempt
    that just failed. Every other failure is raised immediately.

    The same request, body included, is sent on every attempt, so only
    requests the service can safely receive more than once should be
    executed with a retrying policy.

    Args:
        client: The httpx client used to send the request. Its timeout
            bounds each attempt, not the whole sequence.
        request: The request to send, e.g. from
            ``allscreenshots.core.http_logic.build_request``.
        retry_policy: The retry policy.
        response_type: The expected type of the decoded JSON body.
        expect_binary: If ``True``, return the raw body bytes.

    Returns:
        The decoded response (see ``decode_response``).

    Raises:
        NetworkError: If no response could be obtained.
        ResponseDecodingError: If the successful response cannot be decoded.
        AllScreenshotsError: The classified error of the last
            unsuccessful response (e.g. ``NotFoundError``, ``ServerError``).

    Example:
        ```pycon
        >>> import httpx
        >>> from allscreenshots.core.config import ClientConfiguration
        >>> from allscreenshots.core.http_logic import build_request
        >>> from allscreenshots.request import execute_with_retry
        >>> config = ClientConfiguration(api_key="my-key")
        >>> with httpx.Client() as client:  # doctest: +SKIP
        ...     usage = execute_with_retry(
        ...         client,
        ...         build_request(config, "GET", "/v1/usage"),
        ...         retry_policy=config.retry_policy,
        ...     )
        ...

        ```
    """
    method = request.method
    url = str(request.url)
    max_retries = retry_policy.max_retries
    attempt = 0

    # Attempt 0 is the initial try, 1..max_retries are retries
    while True:
        try:
            response = client.send(request)
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
        time.sleep(sleep_time)
        attempt += 1
