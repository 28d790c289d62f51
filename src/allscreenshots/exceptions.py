r"""Define the exceptions raised by the screenshot service client.

Every failure surfaced to callers is an ``AllScreenshotsError``. The set
of failure kinds is closed and enumerated by ``ErrorKind``; each
exception subclass is bound to exactly one kind, so callers can branch
either on the exception class or on ``error.kind``:

```python
try:
    client.get_job(job_id)
except AllScreenshotsError as error:
    match error.kind:
        case ErrorKind.NOT_FOUND:
            ...
        case ErrorKind.RATE_LIMIT_EXCEEDED:
            ...
```
"""

from __future__ import annotations

__all__ = [
    "API_KEY_ENV_VAR",
    "AllScreenshotsError",
    "ErrorKind",
    "InvalidEndpointError",
    "MissingCredentialError",
    "NetworkError",
    "NotFoundError",
    "RateLimitExceededError",
    "RequestCancelledError",
    "RequestEncodingError",
    "ResponseDecodingError",
    "ServerError",
    "UnauthorizedError",
    "ValidationError",
]

import asyncio
from enum import Enum
from typing import ClassVar

# Name of the environment variable holding the API key
API_KEY_ENV_VAR = "ALLSCREENSHOTS_API_KEY"

# Server errors that are usually transient
_RETRYABLE_SERVER_STATUS_CODES = frozenset({500, 502, 503, 504})


class ErrorKind(Enum):
    """Closed set of failure kinds reported by the client."""

    MISSING_CREDENTIAL = "missing_credential"
    INVALID_ENDPOINT = "invalid_endpoint"
    ENCODING_FAILURE = "encoding_failure"
    DECODING_FAILURE = "decoding_failure"
    NETWORK_ERROR = "network_error"
    CANCELLED = "cancelled"
    VALIDATION_ERROR = "validation_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    SERVER_ERROR = "server_error"


class AllScreenshotsError(Exception):
    """Base exception for all the errors raised by the client.

    Args:
        description: The human-readable description of the failure.
        message: The message returned by the service, if any.
        status_code: The HTTP status code of the response, if any.
        method: The HTTP method of the failed request, if known.
        url: The URL of the failed request, if known.
        cause: The underlying exception, if any.

    Example:
        ```pycon
        >>> from allscreenshots.exceptions import ErrorKind, NotFoundError
        >>> error = NotFoundError("Job not found")
        >>> error.kind
        <ErrorKind.NOT_FOUND: 'not_found'>
        >>> error.status_code
        404
        >>> str(error)
        'Not found: Job not found'

        ```
    """

    kind: ClassVar[ErrorKind]

    def __init__(
        self,
        description: str,
        *,
        message: str | None = None,
        status_code: int | None = None,
        method: str | None = None,
        url: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(description)
        self.description = description
        self.message = message
        self.status_code = status_code
        self.method = method
        self.url = url
        self.cause = cause

    def __str__(self) -> str:
        return self.description

    @property
    def is_retryable(self) -> bool:
        """Indicate whether sending the same request again may
        succeed."""
        return False


class MissingCredentialError(AllScreenshotsError):
    """Raised when no API key is provided nor found in the
    environment."""

    kind = ErrorKind.MISSING_CREDENTIAL

    def __init__(self) -> None:
        super().__init__(
            f"API key is required. Set {API_KEY_ENV_VAR} environment variable or "
            "provide it in the client configuration."
        )


class InvalidEndpointError(AllScreenshotsError):
    """Raised when a base URL or a request URL is not a valid URL.

    Args:
        endpoint: The offending URL or path.
        cause: The underlying exception, if any.
    """

    kind = ErrorKind.INVALID_ENDPOINT

    def __init__(self, endpoint: str, *, cause: BaseException | None = None) -> None:
        super().__init__(f"Invalid URL: {endpoint}", cause=cause)
        self.endpoint = endpoint


class RequestEncodingError(AllScreenshotsError):
    """Raised when a request body cannot be serialized."""

    kind = ErrorKind.ENCODING_FAILURE

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Failed to encode request: {cause}", cause=cause)


class ResponseDecodingError(AllScreenshotsError):
    """Raised when a successful response body cannot be decoded."""

    kind = ErrorKind.DECODING_FAILURE

    def __init__(
        self,
        cause: BaseException,
        *,
        status_code: int | None = None,
        method: str | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(
            f"Failed to decode response: {cause}",
            status_code=status_code,
            method=method,
            url=url,
            cause=cause,
        )


class NetworkError(AllScreenshotsError):
    """Raised when no HTTP response could be obtained."""

    kind = ErrorKind.NETWORK_ERROR

    def __init__(
        self, cause: BaseException, *, method: str | None = None, url: str | None = None
    ) -> None:
        super().__init__(f"Network error: {cause}", method=method, url=url, cause=cause)

    @property
    def is_retryable(self) -> bool:
        return True


class RequestCancelledError(AllScreenshotsError, asyncio.CancelledError):
    """Raised when the calling task is cancelled while a request is
    in progress.

    It is also an ``asyncio.CancelledError`` so cancelled tasks keep
    behaving as cancelled tasks.
    """

    kind = ErrorKind.CANCELLED

    def __init__(self, *, method: str | None = None, url: str | None = None) -> None:
        description = "Request was cancelled."
        if method is not None and url is not None:
            description = f"{method} request to {url} was cancelled."
        super().__init__(description, method=method, url=url)


class ValidationError(AllScreenshotsError):
    """Raised when the service rejects the request parameters (HTTP
    400).

    Args:
        message: The message returned by the service.
        details: Optional field-level details.
    """

    kind = ErrorKind.VALIDATION_ERROR

    def __init__(
        self,
        message: str = "Bad request",
        details: dict[str, str] | None = None,
        *,
        method: str | None = None,
        url: str | None = None,
    ) -> None:
        description = f"Validation error: {message}"
        if details:
            description += " (" + ", ".join(f"{k}: {v}" for k, v in details.items()) + ")"
        super().__init__(description, message=message, status_code=400, method=method, url=url)
        self.details = details


class UnauthorizedError(AllScreenshotsError):
    """Raised when the API key is rejected (HTTP 401)."""

    kind = ErrorKind.UNAUTHORIZED

    def __init__(
        self, message: str | None = None, *, method: str | None = None, url: str | None = None
    ) -> None:
        description = (
            f"Unauthorized: {message}" if message else "Unauthorized. Check your API key."
        )
        super().__init__(description, message=message, status_code=401, method=method, url=url)


class NotFoundError(AllScreenshotsError):
    """Raised when the requested resource does not exist (HTTP 404)."""

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self, message: str | None = None, *, method: str | None = None, url: str | None = None
    ) -> None:
        description = f"Not found: {message}" if message else "Resource not found."
        super().__init__(description, message=message, status_code=404, method=method, url=url)


class RateLimitExceededError(AllScreenshotsError):
    """Raised when the rate limit is exceeded (HTTP 429).

    Args:
        retry_after: Optional number of seconds the service asks to wait,
            taken from the ``Retry-After`` header.
    """

    kind = ErrorKind.RATE_LIMIT_EXCEEDED

    def __init__(
        self,
        retry_after: float | None = None,
        *,
        message: str | None = None,
        method: str | None = None,
        url: str | None = None,
    ) -> None:
        description = "Rate limit exceeded."
        if retry_after is not None:
            description = f"Rate limit exceeded. Retry after {int(retry_after)} seconds."
        super().__init__(description, message=message, status_code=429, method=method, url=url)
        self.retry_after = retry_after

    @property
    def is_retryable(self) -> bool:
        return True


class ServerError(AllScreenshotsError):
    """Raised for any other non-successful HTTP status."""

    kind = ErrorKind.SERVER_ERROR

    def __init__(
        self,
        status_code: int,
        message: str | None = None,
        *,
        method: str | None = None,
        url: str | None = None,
    ) -> None:
        description = (
            f"Server error ({status_code}): {message}"
            if message
            else f"Server error with status code {status_code}"
        )
        super().__init__(
            description, message=message, status_code=status_code, method=method, url=url
        )

    @property
    def is_retryable(self) -> bool:
        return self.status_code in _RETRYABLE_SERVER_STATUS_CODES
