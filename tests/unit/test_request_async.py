r"""Unit tests for the asynchronous execution engine."""

from __future__ import annotations

import asyncio
import sys
from unittest.mock import Mock, call

import httpx
import pytest

from allscreenshots.exceptions import (
    ErrorKind,
    NetworkError,
    NotFoundError,
    RequestCancelledError,
    ServerError,
)
from allscreenshots.models import JobResponse, JobStatus
from allscreenshots.request_async import execute_with_retry_async
from allscreenshots.retry import RetryPolicy
from tests.helpers import TEST_URL, create_json_response, create_request, create_response

JOB_PAYLOAD = {"id": "job-1", "status": "COMPLETED"}


##############################################
#     Tests for execute_with_retry_async     #
##############################################


@pytest.mark.asyncio
async def test_execute_with_retry_async_success(
    mock_asleep: Mock, mock_async_client: httpx.AsyncClient
) -> None:
    """Test a successful request on the first attempt."""
    request = create_request()
    mock_async_client.send.return_value = create_json_response(200, JOB_PAYLOAD)

    job = await execute_with_retry_async(mock_async_client, request, response_type=JobResponse)

    assert job == JobResponse(id="job-1", status=JobStatus.COMPLETED)
    mock_async_client.send.assert_awaited_once_with(request)
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_execute_with_retry_async_retries_server_error(
    mock_asleep: Mock, mock_async_client: httpx.AsyncClient
) -> None:
    """Test that 503, 503, 200 sends three times with 1s and 2s
    delays."""
    mock_async_client.send.side_effect = [
        create_response(503),
        create_response(503),
        create_response(200, content=b"image-bytes"),
    ]

    result = await execute_with_retry_async(
        mock_async_client, create_request(), expect_binary=True
    )

    assert result == b"image-bytes"
    assert mock_async_client.send.await_count == 3
    assert mock_asleep.call_args_list == [call(1.0), call(2.0)]


@pytest.mark.asyncio
async def test_execute_with_retry_async_exhausted(
    mock_asleep: Mock, mock_async_client: httpx.AsyncClient
) -> None:
    """Test that the last classified error is raised when retries are
    exhausted."""
    mock_async_client.send.return_value = create_response(504)

    with pytest.raises(ServerError, match=r"Server error with status code 504") as exc_info:
        await execute_with_retry_async(
            mock_async_client, create_request(), retry_policy=RetryPolicy(max_retries=2)
        )

    assert exc_info.value.url == TEST_URL
    assert mock_async_client.send.await_count == 3
    assert mock_asleep.call_args_list == [call(1.0), call(2.0)]


@pytest.mark.asyncio
async def test_execute_with_retry_async_not_found(
    mock_asleep: Mock, mock_async_client: httpx.AsyncClient
) -> None:
    """Test that 404 is raised without retrying."""
    mock_async_client.send.return_value = create_json_response(404, {"message": "Job not found"})

    with pytest.raises(NotFoundError, match=r"Not found: Job not found"):
        await execute_with_retry_async(mock_async_client, create_request())

    mock_async_client.send.assert_awaited_once()
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_execute_with_retry_async_transport_error(
    mock_asleep: Mock, mock_async_client: httpx.AsyncClient
) -> None:
    """Test that transport failures are retried, then raised as
    NetworkError."""
    mock_async_client.send.side_effect = httpx.ReadTimeout("Read timed out")

    with pytest.raises(NetworkError, match=r"Network error: Read timed out"):
        await execute_with_retry_async(
            mock_async_client, create_request(), retry_policy=RetryPolicy(max_retries=1)
        )

    assert mock_async_client.send.await_count == 2
    mock_asleep.assert_called_once_with(1.0)


@pytest.mark.asyncio
async def test_execute_with_retry_async_cancelled_in_flight(
    mock_asleep: Mock, mock_async_client: httpx.AsyncClient
) -> None:
    """Test that cancellation during a send stops without retrying."""
    mock_async_client.send.side_effect = asyncio.CancelledError()

    with pytest.raises(RequestCancelledError, match=r"GET request to .* was cancelled") as exc_info:
        await execute_with_retry_async(mock_async_client, create_request())

    assert exc_info.value.kind == ErrorKind.CANCELLED
    mock_async_client.send.assert_awaited_once()
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_execute_with_retry_async_cancelled_while_waiting(
    mock_asleep: Mock, mock_async_client: httpx.AsyncClient
) -> None:
    """Test that cancellation during the backoff wait prevents the next
    attempt."""
    mock_async_client.send.return_value = create_response(503)
    mock_asleep.side_effect = asyncio.CancelledError()

    with pytest.raises(RequestCancelledError):
        await execute_with_retry_async(mock_async_client, create_request())

    mock_async_client.send.assert_awaited_once()
    mock_asleep.assert_called_once_with(1.0)


@pytest.mark.asyncio
async def test_execute_with_retry_async_task_cancel(
    mock_async_client: httpx.AsyncClient,
) -> None:
    """Test that cancelling the calling task cancels the request."""
    started = asyncio.Event()

    async def send(request: httpx.Request) -> httpx.Response:
        started.set()
        await asyncio.Event().wait()
        return create_response(200)

    mock_async_client.send.side_effect = send
    task = asyncio.create_task(execute_with_retry_async(mock_async_client, create_request()))
    await started.wait()
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task

    assert task.cancelled()
    mock_async_client.send.assert_awaited_once()


@pytest.mark.asyncio
@pytest.mark.skipif(sys.version_info < (3, 11), reason="requires asyncio.timeout")
async def test_execute_with_retry_async_timeout_while_waiting(
    mock_async_client: httpx.AsyncClient,
) -> None:
    """Test that an asyncio.timeout deadline reached while waiting to
    retry raises TimeoutError."""
    mock_async_client.send.return_value = create_response(503)

    with pytest.raises(TimeoutError):
        async with asyncio.timeout(0.05):
            await execute_with_retry_async(
                mock_async_client,
                create_request(),
                retry_policy=RetryPolicy(max_retries=3, base_delay=1.0),
            )

    mock_async_client.send.assert_awaited_once()


@pytest.mark.asyncio
@pytest.mark.skipif(sys.version_info < (3, 11), reason="requires asyncio.timeout")
async def test_execute_with_retry_async_timeout_in_flight(
    mock_async_client: httpx.AsyncClient,
) -> None:
    """Test that an asyncio.timeout deadline reached during a request
    raises TimeoutError."""

    async def send(request: httpx.Request) -> httpx.Response:
        await asyncio.Event().wait()
        return create_response(200)

    mock_async_client.send.side_effect = send

    with pytest.raises(TimeoutError):
        async with asyncio.timeout(0.05):
            await execute_with_retry_async(mock_async_client, create_request())

    mock_async_client.send.assert_awaited_once()
