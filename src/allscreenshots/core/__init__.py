r"""Core shared logic for the sync and async clients.

This package contains the configuration, the parameter validation, and
the request construction shared by both client implementations.
"""

from __future__ import annotations

__all__ = ["validate_api_key", "validate_base_url", "validate_retry_params", "validate_timeout"]

from allscreenshots.core.validation import (
    validate_api_key,
    validate_base_url,
    validate_retry_params,
    validate_timeout,
)
