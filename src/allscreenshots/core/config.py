r"""Configuration dataclass, builder, and defaults for the screenshot
service clients.

This module provides the configuration constants and the immutable
configuration object shared by ``AllScreenshotsClient`` and
``AsyncAllScreenshotsClient``.
"""

from __future__ import annotations

__all__ = [
    "API_KEY_ENV_VAR",
    "ClientConfiguration",
    "ClientConfigurationBuilder",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "SDK_VERSION",
]

import os
from dataclasses import dataclass, field, replace
from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING, Any

import httpx

from allscreenshots.core.validation import validate_api_key, validate_base_url, validate_timeout
from allscreenshots.exceptions import API_KEY_ENV_VAR
from allscreenshots.retry import DEFAULT_RETRY_POLICY, NO_RETRY_POLICY, RetryPolicy

if TYPE_CHECKING:
    from typing import Self

try:
    SDK_VERSION = version("allscreenshots")
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    SDK_VERSION = "0.0.0"

# Default base URL of the screenshot service
DEFAULT_BASE_URL = "https://api.allscreenshots.com"

# Default timeout in seconds for a single attempt.
# Rendering a full page can take a while, so this is generous.
DEFAULT_TIMEOUT = 60.0

# User agent sent when none is configured
DEFAULT_USER_AGENT = f"allscreenshots-python/{SDK_VERSION}"


@dataclass(frozen=True)
class ClientConfiguration:
    """Configuration for the screenshot service clients.

    The API key is resolved in this order: the ``api_key`` argument, then
    the ``ALLSCREENSHOTS_API_KEY`` environment variable. An empty string
    is treated as missing. All the validation happens at construction, so
    an instance is always usable.

    Note:
        The timeout bounds each individual attempt, not the whole retry
        sequence. Callers needing an overall deadline should enforce it
        around the call.

    Args:
        api_key: API key for authentication.
        base_url: Base URL of the service.
        timeout: Timeout in seconds for each attempt. Must be > 0.
        retry_policy: Policy for retrying failed requests.
        user_agent: Value of the ``User-Agent`` header.

    Raises:
        MissingCredentialError: If no API key can be resolved.
        InvalidEndpointError: If ``base_url`` is not a valid URL.
        ValueError: If ``timeout`` is not positive.

    Example:
        ```pycon
        >>> from allscreenshots.core.config import ClientConfiguration
        >>> config = ClientConfiguration(api_key="my-key")
        >>> config.timeout
        60.0
        >>> config.retry_policy.max_retries
        3
        >>> config.merge(timeout=120.0).timeout
        120.0

        ```
    """

    api_key: str | None = None
    base_url: str | httpx.URL = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    retry_policy: RetryPolicy = field(default_factory=lambda: DEFAULT_RETRY_POLICY)
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        """Resolve the API key and validate the configuration.

        Raises:
            MissingCredentialError: If no API key can be resolved.
            InvalidEndpointError: If ``base_url`` is not a valid URL.
            ValueError: If ``timeout`` is not positive.
        """
        api_key = self.api_key or os.environ.get(API_KEY_ENV_VAR)
        object.__setattr__(self, "api_key", validate_api_key(api_key))
        object.__setattr__(self, "base_url", validate_base_url(self.base_url))
        validate_timeout(self.timeout)
        object.__setattr__(self, "timeout", float(self.timeout))

    @classmethod
    def builder(cls) -> ClientConfigurationBuilder:
        """Return a builder to assemble a configuration step by step."""
        return ClientConfigurationBuilder()

    def merge(self, **overrides: Any) -> ClientConfiguration:
        """Create a new configuration with the specified parameters
        overridden.

        Only non-None override values are applied. The new configuration
        is validated like any other.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ClientConfiguration instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)


class ClientConfigurationBuilder:
    r"""Builder for ``ClientConfiguration``.

    Each setter returns the builder, so calls can be chained. ``build``
    creates the ``ClientConfiguration``, which performs all the
    validation.

    Example:
        ```pycon
        >>> from allscreenshots.core.config import ClientConfigurationBuilder
        >>> config = (
        ...     ClientConfigurationBuilder()
        ...     .api_key("builder-key")
        ...     .timeout(90)
        ...     .no_retry()
        ...     .user_agent("BuilderAgent/1.0")
        ...     .build()
        ... )
        >>> config.retry_policy.max_retries
        0

        ```
    """

    def __init__(self) -> None:
        self._api_key: str | None = None
        self._base_url: httpx.URL | None = None
        self._timeout: float | None = None
        self._retry_policy: RetryPolicy | None = None
        self._user_agent: str | None = None

    def api_key(self, api_key: str) -> Self:
        """Set the API key."""
        self._api_key = api_key
        return self

    def base_url(self, base_url: str | httpx.URL) -> Self:
        """Set the base URL.

        Args:
            base_url: An ``httpx.URL`` handle or a string. Strings are
                validated immediately.

        Raises:
            InvalidEndpointError: If ``base_url`` is not a valid URL.
        """
        self._base_url = validate_base_url(base_url)
        return self

    def timeout(self, timeout: float) -> Self:
        """Set the timeout in seconds for each attempt."""
        self._timeout = timeout
        return self

    def retry_policy(self, policy: RetryPolicy) -> Self:
        """Set the retry policy."""
        self._retry_policy = policy
        return self

    def no_retry(self) -> Self:
        """Disable retries."""
        self._retry_policy = NO_RETRY_POLICY
        return self

    def user_agent(self, user_agent: str) -> Self:
        """Set a custom user agent."""
        self._user_agent = user_agent
        return self

    def build(self) -> ClientConfiguration:
        """Build the configuration.

        Returns:
            The validated configuration.

        Raises:
            MissingCredentialError: If no API key can be resolved.
            InvalidEndpointError: If the base URL is not a valid URL.
            ValueError: If the timeout is not positive.
        """
        overrides: dict[str, Any] = {
            "base_url": self._base_url,
            "timeout": self._timeout,
            "retry_policy": self._retry_policy,
            "user_agent": self._user_agent,
        }
        return ClientConfiguration(
            api_key=self._api_key, **{k: v for k, v in overrides.items() if v is not None}
        )
