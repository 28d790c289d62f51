from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest

from allscreenshots.core.config import ClientConfiguration
from allscreenshots.exceptions import API_KEY_ENV_VAR
from allscreenshots.retry import RetryPolicy

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture(autouse=True)
def no_api_key_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure the API key environment variable of the machine
    running the tests never leaks into them."""
    monkeypatch.delenv(API_KEY_ENV_VAR, raising=False)


@pytest.fixture
def mock_client() -> httpx.Client:
    """Create a mock httpx.Client for testing."""
    return Mock(spec=httpx.Client)


@pytest.fixture
def mock_async_client() -> httpx.AsyncClient:
    """Create a mock httpx.AsyncClient for testing."""
    return Mock(spec=httpx.AsyncClient, send=AsyncMock(), aclose=AsyncMock())


@pytest.fixture
def config() -> ClientConfiguration:
    """Create a configuration with the default retry policy."""
    return ClientConfiguration(api_key="test-key", base_url="https://api.example.com")


@pytest.fixture
def fast_retry_policy() -> RetryPolicy:
    """Create a retry policy with small delays."""
    return RetryPolicy(max_retries=2, base_delay=0.1, max_delay=1.0)
