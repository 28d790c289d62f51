r"""Retry policy deciding what to retry and how long to wait.

A ``RetryPolicy`` is an immutable value: it holds no per-request state,
so a single instance can be shared by any number of in-flight requests.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_RETRY_POLICY",
    "NO_RETRY_POLICY",
    "RETRYABLE_TRANSPORT_ERRORS",
    "RETRY_STATUS_CODES",
    "RetryPolicy",
]

from dataclasses import dataclass, field

import httpx

from allscreenshots.backoff import ExponentialBackoff
from allscreenshots.core.validation import validate_retry_params

# HTTP status codes that should trigger automatic retry
# 408: Request Timeout
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = frozenset({408, 429, 500, 502, 503, 504})

# Transport failures worth retrying: the request timed out, the host could
# not be reached, or the connection dropped while the request was in flight.
RETRYABLE_TRANSPORT_ERRORS: tuple[type[httpx.TransportError], ...] = (
    httpx.TimeoutException,
    httpx.ConnectError,
    httpx.ReadError,
    httpx.WriteError,
    httpx.RemoteProtocolError,
)


@dataclass(frozen=True)
class RetryPolicy:
    """Policy for retrying failed requests.

    Args:
        max_retries: Maximum number of retry attempts. The total number of
            attempts is ``max_retries + 1``. Must be >= 0.
        base_delay: Delay in seconds before the first retry. Must be >= 0.
        max_delay: Upper bound in seconds for any single delay. Must be >= 0.
        multiplier: Exponential growth factor between delays. Must be >= 1.
        retryable_status_codes: HTTP status codes that trigger a retry.
        retry_transport_errors: Whether transient transport failures
            (timeouts, lost connections) trigger a retry.

    Example:
        ```pycon
        >>> from allscreenshots.retry import DEFAULT_RETRY_POLICY, NO_RETRY_POLICY
        >>> [DEFAULT_RETRY_POLICY.delay_for_attempt(n) for n in range(6)]
        [1.0, 2.0, 4.0, 8.0, 16.0, 30.0]
        >>> DEFAULT_RETRY_POLICY.is_retryable_status(503)
        True
        >>> NO_RETRY_POLICY.is_retryable_status(503)
        False

        ```
    """

    max_retries: int = 3
    base_delay: float = 1.0
    max_delay: float = 30.0
    multiplier: float = 2.0
    retryable_status_codes: frozenset[int] = field(default_factory=lambda: RETRY_STATUS_CODES)
    retry_transport_errors: bool = True

    def __post_init__(self) -> None:
        validate_retry_params(
            max_retries=self.max_retries,
            base_delay=self.base_delay,
            max_delay=self.max_delay,
            multiplier=self.multiplier,
        )
        object.__setattr__(self, "retryable_status_codes", frozenset(self.retryable_status_codes))

    @property
    def backoff(self) -> ExponentialBackoff:
        """The backoff strategy equivalent to this policy's delays."""
        return ExponentialBackoff(
            base_delay=self.base_delay, max_delay=self.max_delay, multiplier=self.multiplier
        )

    def delay_for_attempt(self, attempt: int) -> float:
        """Return the delay to wait after the given attempt failed.

        Args:
            attempt: The attempt number that failed (0-indexed).

        Returns:
            ``min(base_delay * multiplier ** attempt, max_delay)`` seconds.
        """
        return self.backoff.calculate(attempt)

    def is_retryable_status(self, status_code: int) -> bool:
        """Indicate whether a response with this status should be
        retried."""
        return status_code in self.retryable_status_codes

    def is_retryable_transport_error(self, exc: BaseException) -> bool:
        """Indicate whether a transport failure should be retried.

        Only timeouts, connection failures, and connections lost
        mid-flight are retryable. Malformed requests, unsupported
        protocols, proxy failures, and cancellation are not.

        Args:
            exc: The exception raised while sending the request.

        Returns:
            ``True`` if the request should be sent again, otherwise ``False``.
        """
        return self.retry_transport_errors and isinstance(exc, RETRYABLE_TRANSPORT_ERRORS)


# Default retry policy: 3 retries with delays of 1s, 2s, 4s (capped at 30s)
DEFAULT_RETRY_POLICY = RetryPolicy()

# Policy that never retries
NO_RETRY_POLICY = RetryPolicy(
    max_retries=0,
    base_delay=0.0,
    max_delay=0.0,
    multiplier=1.0,
    retryable_status_codes=frozenset(),
    retry_transport_errors=False,
)
