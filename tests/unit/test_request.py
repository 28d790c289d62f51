r"""Unit tests for the synchronous execution engine."""

from __future__ import annotations

from unittest.mock import Mock, call

import httpx
import pytest

from allscreenshots.exceptions import (
    NetworkError,
    NotFoundError,
    RateLimitExceededError,
    ResponseDecodingError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)
from allscreenshots.models import JobResponse, JobStatus
from allscreenshots.request import execute_with_retry
from allscreenshots.retry import NO_RETRY_POLICY, RetryPolicy
from tests.helpers import TEST_URL, create_json_response, create_request, create_response

JOB_PAYLOAD = {"id": "job-1", "status": "COMPLETED"}


########################################
#     Tests for execute_with_retry     #
########################################


def test_execute_with_retry_success(mock_sleep: Mock, mock_client: httpx.Client) -> None:
    """Test a successful request on the first attempt."""
    request = create_request()
    mock_client.send.return_value = create_json_response(200, JOB_PAYLOAD)

    job = execute_with_retry(mock_client, request, response_type=JobResponse)

    assert job == JobResponse(id="job-1", status=JobStatus.COMPLETED)
    mock_client.send.assert_called_once_with(request)
    mock_sleep.assert_not_called()


def test_execute_with_retry_binary(mock_sleep: Mock, mock_client: httpx.Client) -> None:
    """Test that a binary request returns the raw bytes."""
    mock_client.send.return_value = create_response(200, content=b"image-bytes")
    assert execute_with_retry(mock_client, create_request(), expect_binary=True) == b"image-bytes"
    mock_sleep.assert_not_called()


def test_execute_with_retry_retries_server_error(
    mock_sleep: Mock, mock_client: httpx.Client
) -> None:
    """Test that 503, 503, 200 sends three times with 1s and 2s
    delays."""
    mock_client.send.side_effect = [
        create_response(503),
        create_response(503),
        create_json_response(200, JOB_PAYLOAD),
    ]

    job = execute_with_retry(mock_client, create_request(), response_type=JobResponse)

    assert job.id == "job-1"
    assert mock_client.send.call_count == 3
    assert mock_sleep.call_args_list == [call(1.0), call(2.0)]


def test_execute_with_retry_resends_same_request(
    mock_sleep: Mock, mock_client: httpx.Client
) -> None:
    """Test that every attempt sends the same request."""
    request = create_request("POST")
    mock_client.send.side_effect = [create_response(502), create_response(200)]

    execute_with_retry(mock_client, request)

    assert mock_client.send.call_args_list == [call(request), call(request)]
    mock_sleep.assert_called_once_with(1.0)


def test_execute_with_retry_exhausted(mock_sleep: Mock, mock_client: httpx.Client) -> None:
    """Test that the last classified error is raised when retries are
    exhausted."""
    mock_client.send.return_value = create_json_response(503, {"message": "Overloaded"})

    with pytest.raises(ServerError, match=r"Server error \(503\): Overloaded") as exc_info:
        execute_with_retry(mock_client, create_request())

    assert exc_info.value.status_code == 503
    assert exc_info.value.method == "GET"
    assert exc_info.value.url == TEST_URL
    assert mock_client.send.call_count == 4
    assert mock_sleep.call_args_list == [call(1.0), call(2.0), call(4.0)]


def test_execute_with_retry_custom_policy(mock_sleep: Mock, mock_client: httpx.Client) -> None:
    """Test the delays of a custom retry policy."""
    mock_client.send.return_value = create_response(500)
    policy = RetryPolicy(max_retries=4, base_delay=0.5, max_delay=2.0)

    with pytest.raises(ServerError):
        execute_with_retry(mock_client, create_request(), retry_policy=policy)

    assert mock_client.send.call_count == 5
    assert mock_sleep.call_args_list == [call(0.5), call(1.0), call(2.0), call(2.0)]


@pytest.mark.parametrize(
    ("status_code", "error_type"),
    [
        (400, ValidationError),
        (401, UnauthorizedError),
        (403, ServerError),
        (404, NotFoundError),
        (501, ServerError),
    ],
)
def test_execute_with_retry_non_retryable_status(
    mock_sleep: Mock,
    mock_client: httpx.Client,
    status_code: int,
    error_type: type[Exception],
) -> None:
    """Test that non-retryable statuses are raised immediately."""
    mock_client.send.return_value = create_response(status_code)

    with pytest.raises(error_type):
        execute_with_retry(mock_client, create_request())

    mock_client.send.assert_called_once()
    mock_sleep.assert_not_called()


def test_execute_with_retry_rate_limit(mock_sleep: Mock, mock_client: httpx.Client) -> None:
    """Test that 429 is retried with the policy delay and then
    raised."""
    mock_client.send.return_value = create_response(429, headers={"Retry-After": "5"})

    with pytest.raises(RateLimitExceededError) as exc_info:
        execute_with_retry(
            mock_client, create_request(), retry_policy=RetryPolicy(max_retries=1)
        )

    assert exc_info.value.retry_after == 5.0
    assert mock_client.send.call_count == 2
    mock_sleep.assert_called_once_with(1.0)


def test_execute_with_retry_no_retry_policy(mock_sleep: Mock, mock_client: httpx.Client) -> None:
    """Test that NO_RETRY_POLICY sends the request once."""
    mock_client.send.return_value = create_response(503)

    with pytest.raises(ServerError):
        execute_with_retry(mock_client, create_request(), retry_policy=NO_RETRY_POLICY)

    mock_client.send.assert_called_once()
    mock_sleep.assert_not_called()


def test_execute_with_retry_transport_error_then_success(
    mock_sleep: Mock, mock_client: httpx.Client
) -> None:
    """Test that a transient transport failure is retried."""
    mock_client.send.side_effect = [
        httpx.ConnectError("Connection refused"),
        httpx.ReadTimeout("Read timed out"),
        create_json_response(200, JOB_PAYLOAD),
    ]

    job = execute_with_retry(mock_client, create_request(), response_type=JobResponse)

    assert job.status == JobStatus.COMPLETED
    assert mock_sleep.call_args_list == [call(1.0), call(2.0)]


def test_execute_with_retry_transport_error_exhausted(
    mock_sleep: Mock, mock_client: httpx.Client
) -> None:
    """Test that NetworkError is raised when transport retries are
    exhausted."""
    exc = httpx.ConnectError("Connection refused")
    mock_client.send.side_effect = exc

    with pytest.raises(NetworkError, match=r"Network error: Connection refused") as exc_info:
        execute_with_retry(mock_client, create_request(), retry_policy=RetryPolicy(max_retries=2))

    assert exc_info.value.cause is exc
    assert mock_client.send.call_count == 3
    assert mock_sleep.call_args_list == [call(1.0), call(2.0)]


def test_execute_with_retry_non_retryable_transport_error(
    mock_sleep: Mock, mock_client: httpx.Client
) -> None:
    """Test that a non-transient transport failure is not retried."""
    mock_client.send.side_effect = httpx.UnsupportedProtocol("Request URL has no scheme")

    with pytest.raises(NetworkError):
        execute_with_retry(mock_client, create_request())

    mock_client.send.assert_called_once()
    mock_sleep.assert_not_called()


def test_execute_with_retry_transport_retries_disabled(
    mock_sleep: Mock, mock_client: httpx.Client
) -> None:
    """Test that transport failures are not retried when disabled."""
    mock_client.send.side_effect = httpx.ConnectError("Connection refused")

    with pytest.raises(NetworkError):
        execute_with_retry(
            mock_client, create_request(), retry_policy=RetryPolicy(retry_transport_errors=False)
        )

    mock_client.send.assert_called_once()
    mock_sleep.assert_not_called()


def test_execute_with_retry_decoding_error_not_retried(
    mock_sleep: Mock, mock_client: httpx.Client
) -> None:
    """Test that a decoding failure of a successful response is
    raised."""
    mock_client.send.return_value = create_response(200, content=b"{not json")

    with pytest.raises(ResponseDecodingError):
        execute_with_retry(mock_client, create_request(), response_type=JobResponse)

    mock_client.send.assert_called_once()
    mock_sleep.assert_not_called()
