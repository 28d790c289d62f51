r"""Request construction shared by the sync and async clients.

This module turns a method, a path relative to the configured base URL,
optional query parameters, and an optional body into a ready-to-send
``httpx.Request``. The same request object is sent again on every retry.
"""

from __future__ import annotations

__all__ = ["API_KEY_HEADER", "build_request", "build_url", "encode_body"]

import json
import logging
from typing import TYPE_CHECKING, Any

import httpx

from allscreenshots.exceptions import InvalidEndpointError, RequestEncodingError
from allscreenshots.models.base import to_json_value

if TYPE_CHECKING:
    from collections.abc import Sequence

    from allscreenshots.core.config import ClientConfiguration

logger: logging.Logger = logging.getLogger(__name__)

# Header carrying the API key
API_KEY_HEADER = "X-API-Key"

JSON_CONTENT_TYPE = "application/json"


def build_url(
    base_url: httpx.URL,
    path: str,
    params: Sequence[tuple[str, Any]] | None = None,
) -> httpx.URL:
    """Compute the absolute URL of a request.

    The path is appended to the base URL, so a path prefix of the base
    URL is preserved. Query parameters keep the caller's order and
    parameters whose value is ``None`` are dropped.

    Args:
        base_url: The base URL of the service.
        path: The path of the endpoint, relative to ``base_url``.
        params: Optional ordered ``(name, value)`` query parameters.

    Returns:
        The absolute URL.

    Raises:
        InvalidEndpointError: If the resulting URL is not valid.

    Example:
        ```pycon
        >>> import httpx
        >>> from allscreenshots.core.http_logic import build_url
        >>> build_url(
        ...     httpx.URL("https://api.allscreenshots.com"),
        ...     "/v1/schedules/abc/history",
        ...     params=[("limit", 10), ("cursor", None)],
        ... )
        URL('https://api.allscreenshots.com/v1/schedules/abc/history?limit=10')

        ```
    """
    query = [(name, value) for name, value in (params or []) if value is not None]
    raw_url = str(base_url).rstrip("/") + "/" + path.lstrip("/")
    try:
        url = httpx.URL(raw_url, params=query or None)
    except (httpx.InvalidURL, TypeError) as exc:
        raise InvalidEndpointError(path, cause=exc) from exc
    if not url.is_absolute_url or not url.host:
        raise InvalidEndpointError(path)
    return url


def encode_body(body: Any) -> bytes:
    """Serialize a request body to JSON.

    Args:
        body: A ``JsonModel`` record or any JSON-serializable value.

    Returns:
        The UTF-8 encoded JSON document.

    Raises:
        RequestEncodingError: If the body cannot be serialized, for
            example when it holds NaN or infinite numbers, or refers
            to itself.
    """
    try:
        return json.dumps(to_json_value(body), allow_nan=False).encode("utf-8")
    except (TypeError, ValueError, RecursionError) as exc:
        raise RequestEncodingError(exc) from exc


def build_request(
    config: ClientConfiguration,
    method: str,
    path: str,
    *,
    params: Sequence[tuple[str, Any]] | None = None,
    body: Any = None,
    expect_binary: bool = False,
) -> httpx.Request:
    """Build an authenticated request to the screenshot service.

    Args:
        config: The client configuration.
        method: The HTTP method (e.g. "GET", "POST").
        path: The path of the endpoint, relative to the base URL.
        params: Optional ordered ``(name, value)`` query parameters.
            Parameters whose value is ``None`` are not sent.
        body: Optional body. ``JsonModel`` records and JSON-serializable
            values are sent as JSON.
        expect_binary: Whether the caller expects a binary payload
            (e.g. an image) rather than JSON.

    Returns:
        The request, carrying the per-attempt timeout.

    Raises:
        InvalidEndpointError: If the resulting URL is not valid.
        RequestEncodingError: If the body cannot be serialized.

    Example:
        ```pycon
        >>> from allscreenshots.core.config import ClientConfiguration
        >>> from allscreenshots.core.http_logic import build_request
        >>> config = ClientConfiguration(api_key="my-key")
        >>> request = build_request(config, "GET", "/v1/usage")
        >>> request.method, str(request.url)
        ('GET', 'https://api.allscreenshots.com/v1/usage')
        >>> request.headers["X-API-Key"]
        'my-key'

        ```
    """
    url = build_url(config.base_url, path, params)
    headers = {
        API_KEY_HEADER: config.api_key,
        "Accept": "*/*" if expect_binary else JSON_CONTENT_TYPE,
        "User-Agent": config.user_agent,
    }
    content = None
    if body is not None:
        headers["Content-Type"] = JSON_CONTENT_TYPE
        content = encode_body(body)

    logger.debug(f"Built {method} request to {url}")
    return httpx.Request(
        method,
        url,
        headers=headers,
        content=content,
        extensions={"timeout": httpx.Timeout(config.timeout).as_dict()},
    )
