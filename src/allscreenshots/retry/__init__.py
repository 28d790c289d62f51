r"""Retry policies for requests sent to the screenshot service."""

from __future__ import annotations

__all__ = [
    "DEFAULT_RETRY_POLICY",
    "NO_RETRY_POLICY",
    "RETRYABLE_TRANSPORT_ERRORS",
    "RETRY_STATUS_CODES",
    "RetryPolicy",
]

from allscreenshots.retry.policy import (
    DEFAULT_RETRY_POLICY,
    NO_RETRY_POLICY,
    RETRYABLE_TRANSPORT_ERRORS,
    RETRY_STATUS_CODES,
    RetryPolicy,
)
