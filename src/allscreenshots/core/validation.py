r"""Parameter validation utilities for the client configuration and
retry policy.

This module provides validation functions to ensure parameters meet
the required constraints before being used to send requests.
"""

from __future__ import annotations

__all__ = ["validate_api_key", "validate_base_url", "validate_retry_params", "validate_timeout"]

import httpx

from allscreenshots.exceptions import InvalidEndpointError, MissingCredentialError


def validate_api_key(api_key: str | None) -> str:
    """Validate the API key.

    Args:
        api_key: The API key to validate. An empty string is treated
            like a missing key.

    Returns:
        The validated API key.

    Raises:
        MissingCredentialError: If the API key is missing or empty.
    """
    if not api_key:
        raise MissingCredentialError
    return api_key


def validate_base_url(base_url: str | httpx.URL) -> httpx.URL:
    """Validate and normalize the base URL of the service.

    Args:
        base_url: The base URL, either as a string or as an
            ``httpx.URL`` handle.

    Returns:
        The base URL as an ``httpx.URL``.

    Raises:
        InvalidEndpointError: If the value is not a syntactically valid
            absolute http(s) URL with a host, or if it carries a query
            string or a fragment.

    Example:
        ```pycon
        >>> from allscreenshots.core.validation import validate_base_url
        >>> validate_base_url("https://api.allscreenshots.com")
        URL('https://api.allscreenshots.com')
        >>> validate_base_url("not a url")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        allscreenshots.exceptions.InvalidEndpointError: Invalid URL: not a url

        ```
    """
    try:
        url = base_url if isinstance(base_url, httpx.URL) else httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise InvalidEndpointError(str(base_url), cause=exc) from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidEndpointError(str(base_url))
    # Endpoint paths are appended to the base URL
    if url.query or url.fragment:
        raise InvalidEndpointError(str(base_url))
    return url


def validate_timeout(timeout: float) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for the server on each attempt.
            Must be > 0.

    Raises:
        ValueError: If timeout is <= 0.
    """
    if timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_retry_params(
    max_retries: int,
    base_delay: float = 1.0,
    max_delay: float = 30.0,
    multiplier: float = 2.0,
) -> None:
    """Validate retry parameters.

    Args:
        max_retries: Maximum number of retry attempts for failed requests.
            Must be >= 0. A value of 0 means no retries (only the initial attempt).
        base_delay: Delay before the first retry. Must be >= 0.
        max_delay: Maximum delay between two attempts. Must be >= 0.
        multiplier: Exponential growth factor of the delay. Must be >= 1.

    Raises:
        ValueError: If any parameter is out of range.

    Example:
        ```pycon
        >>> from allscreenshots.core.validation import validate_retry_params
        >>> validate_retry_params(max_retries=3)
        >>> validate_retry_params(max_retries=3, base_delay=0.5, max_delay=10.0)
        >>> validate_retry_params(max_retries=-1)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: max_retries must be >= 0, got -1

        ```
    """
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise ValueError(msg)
    if base_delay < 0:
        msg = f"base_delay must be >= 0, got {base_delay}"
        raise ValueError(msg)
    if max_delay < 0:
        msg = f"max_delay must be >= 0, got {max_delay}"
        raise ValueError(msg)
    if multiplier < 1:
        msg = f"multiplier must be >= 1, got {multiplier}"
        raise ValueError(msg)
