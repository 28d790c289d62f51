r"""allscreenshots - Python client for the AllScreenshots API.

This package provides synchronous and asynchronous clients for capturing
website screenshots with the AllScreenshots service. Built on top of the
httpx library, it retries transient failures automatically and turns
unsuccessful responses into typed exceptions.

Key Features:
    - Screenshots, asynchronous jobs, bulk jobs, compose jobs, schedules and usage
    - Automatic retry logic for transient HTTP errors (408, 429, 500, 502, 503, 504)
    - Exponential backoff with a configurable cap
    - Typed exceptions with a closed set of error kinds
    - API key resolution from the ``ALLSCREENSHOTS_API_KEY`` environment variable
    - Full async support with cancellation

Example:
    ```pycon
    >>> from allscreenshots import AllScreenshotsClient, ClientConfiguration
    >>> from allscreenshots.models import ScreenshotRequest
    >>> config = ClientConfiguration.builder().api_key("my-key").timeout(30).build()
    >>> with AllScreenshotsClient(config) as client:  # doctest: +SKIP
    ...     image = client.take_screenshot(ScreenshotRequest(url="https://example.com"))
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_RETRY_POLICY",
    "NO_RETRY_POLICY",
    "AllScreenshotsClient",
    "AllScreenshotsError",
    "AsyncAllScreenshotsClient",
    "ClientConfiguration",
    "ClientConfigurationBuilder",
    "ErrorKind",
    "InvalidEndpointError",
    "MissingCredentialError",
    "NetworkError",
    "NotFoundError",
    "RateLimitExceededError",
    "RequestCancelledError",
    "RequestEncodingError",
    "ResponseDecodingError",
    "RetryPolicy",
    "ServerError",
    "UnauthorizedError",
    "ValidationError",
    "__version__",
    "execute_with_retry",
    "execute_with_retry_async",
]

from importlib.metadata import PackageNotFoundError, version

from allscreenshots.client import AllScreenshotsClient
from allscreenshots.client_async import AsyncAllScreenshotsClient
from allscreenshots.core.config import ClientConfiguration, ClientConfigurationBuilder
from allscreenshots.exceptions import (
    AllScreenshotsError,
    ErrorKind,
    InvalidEndpointError,
    MissingCredentialError,
    NetworkError,
    NotFoundError,
    RateLimitExceededError,
    RequestCancelledError,
    RequestEncodingError,
    ResponseDecodingError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)
from allscreenshots.request import execute_with_retry
from allscreenshots.request_async import execute_with_retry_async
from allscreenshots.retry import DEFAULT_RETRY_POLICY, NO_RETRY_POLICY, RetryPolicy

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
