r"""HTTP response handling utilities.

This module converts responses into results: successful responses are
decoded into the expected value, and unsuccessful ones are classified
into one of the typed errors of ``allscreenshots.exceptions``.
"""

from __future__ import annotations

__all__ = ["classify_response", "decode_response", "parse_error_payload"]

import json
import logging
from typing import TYPE_CHECKING, Any

from allscreenshots.exceptions import (
    AllScreenshotsError,
    NotFoundError,
    RateLimitExceededError,
    ResponseDecodingError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)
from allscreenshots.models.base import EmptyResponse, from_json_value
from allscreenshots.utils.retry_after import parse_retry_after

if TYPE_CHECKING:
    import httpx

logger: logging.Logger = logging.getLogger(__name__)


def parse_error_payload(response: httpx.Response) -> dict[str, Any]:
    """Parse the error body returned by the service, best-effort.

    The service answers errors with ``{"error", "message", "code",
    "details"}``. Any parse failure gives an empty payload instead of
    raising.

    Args:
        response: The unsuccessful HTTP response.

    Returns:
        The decoded error object, or an empty dict.
    """
    try:
        payload = json.loads(response.content)
    except ValueError:
        logger.debug(f"Could not parse error body of response with status {response.status_code}")
        return {}
    if not isinstance(payload, dict):
        return {}
    return payload


def _error_message(payload: dict[str, Any]) -> str | None:
    for key in ("message", "error"):
        value = payload.get(key)
        if isinstance(value, str):
            return value
    return None


def _error_details(payload: dict[str, Any]) -> dict[str, str] | None:
    details = payload.get("details")
    if not isinstance(details, dict):
        return None
    return {str(key): str(value) for key, value in details.items()}


def classify_response(
    response: httpx.Response,
    *,
    method: str | None = None,
    url: str | None = None,
) -> AllScreenshotsError:
    """Classify an unsuccessful response into a typed error.

    | Status | Error |
    |---|---|
    | 400 | ``ValidationError`` with message and field details |
    | 401 | ``UnauthorizedError`` |
    | 404 | ``NotFoundError`` |
    | 429 | ``RateLimitExceededError`` with the ``Retry-After`` delay |
    | other | ``ServerError`` |

    Args:
        response: The unsuccessful HTTP response.
        method: The HTTP method of the request, for context.
        url: The URL of the request, for context.

    Returns:
        The classified error. It is returned, not raised, so the caller
        can decide whether to retry.

    Example:
        ```pycon
        >>> import httpx
        >>> from allscreenshots.utils import classify_response
        >>> response = httpx.Response(429, headers={"Retry-After": "5"})
        >>> error = classify_response(response)
        >>> error.kind, error.retry_after
        (<ErrorKind.RATE_LIMIT_EXCEEDED: 'rate_limit_exceeded'>, 5.0)

        ```
    """
    status_code = response.status_code
    payload = parse_error_payload(response)
    message = _error_message(payload)

    if status_code == 400:
        return ValidationError(
            message or "Bad request", _error_details(payload), method=method, url=url
        )
    if status_code == 401:
        return UnauthorizedError(message, method=method, url=url)
    if status_code == 404:
        return NotFoundError(message, method=method, url=url)
    if status_code == 429:
        return RateLimitExceededError(
            parse_retry_after(response.headers.get("Retry-After")),
            message=message,
            method=method,
            url=url,
        )
    return ServerError(status_code, message, method=method, url=url)


def decode_response(
    response: httpx.Response,
    *,
    response_type: Any = None,
    expect_binary: bool = False,
) -> Any:
    """Decode a successful response.

    Args:
        response: The successful HTTP response.
        response_type: The expected type of the decoded JSON value: a
            ``JsonModel`` subclass, ``list[...]``, ``dict[...]``,
            ``EmptyResponse``, or ``None`` to return the raw JSON value.
        expect_binary: If ``True``, return the raw body bytes.

    Returns:
        The raw bytes, an ``EmptyResponse`` for an empty body, or the
        decoded value.

    Raises:
        ResponseDecodingError: If the body cannot be decoded into
            ``response_type``.
    """
    if expect_binary:
        return response.content
    if not response.content or response_type is EmptyResponse:
        return EmptyResponse()
    try:
        return from_json_value(response_type, json.loads(response.content))
    except (ValueError, TypeError, KeyError) as exc:
        logger.debug(
            f"Failed to decode response with status {response.status_code} "
            f"as {getattr(response_type, '__name__', response_type)}: {exc}"
        )
        raise ResponseDecodingError(exc, status_code=response.status_code) from exc
