r"""Shared helpers to create HTTP requests and responses in tests."""

from __future__ import annotations

__all__ = ["TEST_URL", "create_request", "create_response", "create_json_response"]

import json
from typing import Any

import httpx

TEST_URL = "https://api.example.com/v1/usage"


def create_request(method: str = "GET", url: str = TEST_URL) -> httpx.Request:
    """Create a request as built by the client."""
    return httpx.Request(method, url, headers={"X-API-Key": "test-key"})


def create_response(
    status_code: int = 200,
    *,
    content: bytes = b"",
    headers: dict[str, str] | None = None,
    method: str = "GET",
    url: str = TEST_URL,
) -> httpx.Response:
    """Create a real httpx.Response attached to a request.

    Args:
        status_code: The HTTP status code.
        content: The raw body.
        headers: Optional response headers.
        method: The method of the originating request.
        url: The URL of the originating request.

    Returns:
        The response.
    """
    return httpx.Response(
        status_code,
        content=content,
        headers=headers,
        request=httpx.Request(method, url),
    )


def create_json_response(
    status_code: int = 200, payload: Any = None, **kwargs: Any
) -> httpx.Response:
    """Create a response with a JSON body."""
    return create_response(
        status_code,
        content=json.dumps(payload).encode("utf-8"),
        headers={"Content-Type": "application/json"},
        **kwargs,
    )
