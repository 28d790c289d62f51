r"""Utility functions for request execution.

This package provides helper functions for classifying and decoding
responses, parsing the Retry-After header, and handling transport
failures.
"""

from __future__ import annotations

__all__ = [
    "classify_response",
    "decode_response",
    "handle_transport_error",
    "parse_error_payload",
    "parse_retry_after",
]

from allscreenshots.utils.exceptions import handle_transport_error
from allscreenshots.utils.response import classify_response, decode_response, parse_error_payload
from allscreenshots.utils.retry_after import parse_retry_after
