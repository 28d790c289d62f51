r"""Synchronous client for the screenshot service.

This module provides a context manager-based client holding the
configuration and an ``httpx.Client``. Every service operation is a thin
wrapper around ``AllScreenshotsClient.execute``, which builds the request
and sends it with automatic retry logic.
"""

from __future__ import annotations

__all__ = ["AllScreenshotsClient", "layout_preview_params"]

from typing import TYPE_CHECKING, Any

import httpx

from allscreenshots.core.config import ClientConfiguration
from allscreenshots.core.http_logic import build_request
from allscreenshots.models import (
    AsyncJobCreatedResponse,
    BulkJobSummary,
    BulkRequest,
    BulkResponse,
    BulkStatusResponse,
    ComposeJobStatusResponse,
    ComposeJobSummaryResponse,
    ComposeRequest,
    CreateScheduleRequest,
    EmptyResponse,
    JobResponse,
    LayoutPreviewResponse,
    LayoutType,
    QuotaStatusResponse,
    ScheduleHistoryResponse,
    ScheduleListResponse,
    ScheduleResponse,
    ScreenshotRequest,
    UpdateScheduleRequest,
    UsageResponse,
)
from allscreenshots.request import execute_with_retry

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import TracebackType
    from typing import Self


def layout_preview_params(
    layout: LayoutType | str,
    image_count: int,
    canvas_width: int | None = None,
    canvas_height: int | None = None,
    aspect_ratios: Sequence[float] | None = None,
) -> list[tuple[str, Any]]:
    """Return the query parameters of a layout preview request."""
    return [
        ("layout", layout.value if isinstance(layout, LayoutType) else layout),
        ("image_count", image_count),
        ("canvas_width", canvas_width),
        ("canvas_height", canvas_height),
        (
            "aspect_ratios",
            None if aspect_ratios is None else ",".join(str(ratio) for ratio in aspect_ratios),
        ),
    ]


class AllScreenshotsClient:
    r"""Synchronous client for the screenshot service.

    The client is an immutable handle: it holds the configuration and
    an ``httpx.Client`` (which is safe to share between threads), and
    every call is independent.

    If no ``httpx.Client`` is passed, the client creates one and closes
    it on ``close()`` or when leaving the ``with`` block. A client passed
    by the caller is never closed by ``AllScreenshotsClient``. A created
    client follows redirects.

    Args:
        configuration: Optional client configuration. If ``None``, one is
            created from ``api_key`` and the environment.
        api_key: Optional API key. It cannot be combined with
            ``configuration``.
        client: Optional ``httpx.Client`` used to send the requests.

    Raises:
        MissingCredentialError: If no configuration is passed and no API
            key can be resolved.
        ValueError: If both ``configuration`` and ``api_key`` are
            passed.

    Example:
        ```pycon
        >>> from allscreenshots import AllScreenshotsClient
        >>> from allscreenshots.models import ScreenshotRequest
        >>> with AllScreenshotsClient(api_key="my-key") as client:  # doctest: +SKIP
        ...     image = client.take_screenshot(
        ...         ScreenshotRequest(url="https://example.com", device="Desktop HD")
        ...     )
        ...

        ```
    """

    def __init__(
        self,
        configuration: ClientConfiguration | None = None,
        *,
        api_key: str | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        if configuration is not None and api_key is not None:
            msg = "api_key cannot be combined with configuration; set it on the configuration"
            raise ValueError(msg)
        self._configuration: ClientConfiguration = configuration or ClientConfiguration(
            api_key=api_key
        )
        self._close_client = client is None
        self._client: httpx.Client = client or httpx.Client(
            timeout=self._configuration.timeout, follow_redirects=True
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base_url={str(self._configuration.base_url)!r})"

    @property
    def configuration(self) -> ClientConfiguration:
        """The configuration of the client."""
        return self._configuration

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying httpx client if this client created
        it."""
        if self._close_client:
            self._client.close()

    def execute(
        self,
        method: str,
        path: str,
        *,
        params: Sequence[tuple[str, Any]] | None = None,
        body: Any = None,
        response_type: Any = None,
        expect_binary: bool = False,
    ) -> Any:
        r"""Send a request to the service with automatic retry logic.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE, ...).
            path: The path of the endpoint, relative to the base URL.
            params: Optional ordered ``(name, value)`` query parameters.
                Parameters whose value is ``None`` are not sent.
            body: Optional JSON body (a record or a JSON-serializable value).
            response_type: The expected type of the decoded JSON body.
            expect_binary: If ``True``, return the raw body bytes.

        Returns:
            The decoded response.

        Raises:
            AllScreenshotsError: If the request fails.
        """
        request = build_request(
            self._configuration,
            method,
            path,
            params=params,
            body=body,
            expect_binary=expect_binary,
        )
        return execute_with_retry(
            self._client,
            request,
            retry_policy=self._configuration.retry_policy,
            response_type=response_type,
            expect_binary=expect_binary,
        )

    # Screenshots

    def take_screenshot(self, request: ScreenshotRequest) -> bytes:
        """Capture a screenshot and return the image data."""
        return self.execute("POST", "/v1/screenshots", body=request, expect_binary=True)

    def take_screenshot_async(self, request: ScreenshotRequest) -> AsyncJobCreatedResponse:
        """Start an asynchronous screenshot job.

        Use ``get_job`` to poll for completion and ``get_job_result`` to
        download the image.
        """
        return self.execute(
            "POST", "/v1/screenshots/async", body=request, response_type=AsyncJobCreatedResponse
        )

    def list_jobs(self) -> list[JobResponse]:
        return self.execute("GET", "/v1/screenshots/jobs", response_type=list[JobResponse])

    def get_job(self, job_id: str) -> JobResponse:
        return self.execute("GET", f"/v1/screenshots/jobs/{job_id}", response_type=JobResponse)

    def get_job_result(self, job_id: str) -> bytes:
        """Return the image of a completed job."""
        return self.execute("GET", f"/v1/screenshots/jobs/{job_id}/result", expect_binary=True)

    def cancel_job(self, job_id: str) -> JobResponse:
        return self.execute(
            "POST", f"/v1/screenshots/jobs/{job_id}/cancel", response_type=JobResponse
        )

    # Bulk screenshots

    def create_bulk_job(self, request: BulkRequest) -> BulkResponse:
        return self.execute(
            "POST", "/v1/screenshots/bulk", body=request, response_type=BulkResponse
        )

    def list_bulk_jobs(self) -> list[BulkJobSummary]:
        return self.execute("GET", "/v1/screenshots/bulk", response_type=list[BulkJobSummary])

    def get_bulk_job(self, bulk_id: str) -> BulkStatusResponse:
        return self.execute(
            "GET", f"/v1/screenshots/bulk/{bulk_id}", response_type=BulkStatusResponse
        )

    def cancel_bulk_job(self, bulk_id: str) -> BulkJobSummary:
        return self.execute(
            "POST", f"/v1/screenshots/bulk/{bulk_id}/cancel", response_type=BulkJobSummary
        )

    # Compose

    def compose(self, request: ComposeRequest) -> ComposeJobStatusResponse:
        """Compose multiple screenshots into one image."""
        return self.execute(
            "POST",
            "/v1/screenshots/compose",
            body=request,
            response_type=ComposeJobStatusResponse,
        )

    def preview_layout(
        self,
        layout: LayoutType | str,
        image_count: int,
        canvas_width: int | None = None,
        canvas_height: int | None = None,
        aspect_ratios: Sequence[float] | None = None,
    ) -> LayoutPreviewResponse:
        """Preview where the images of a compose job would be placed."""
        return self.execute(
            "GET",
            "/v1/screenshots/compose/preview",
            params=layout_preview_params(
                layout, image_count, canvas_width, canvas_height, aspect_ratios
            ),
            response_type=LayoutPreviewResponse,
        )

    def list_compose_jobs(self) -> list[ComposeJobSummaryResponse]:
        return self.execute(
            "GET", "/v1/screenshots/compose/jobs", response_type=list[ComposeJobSummaryResponse]
        )

    def get_compose_job(self, job_id: str) -> ComposeJobStatusResponse:
        return self.execute(
            "GET",
            f"/v1/screenshots/compose/jobs/{job_id}",
            response_type=ComposeJobStatusResponse,
        )

    # Schedules

    def create_schedule(self, request: CreateScheduleRequest) -> ScheduleResponse:
        return self.execute("POST", "/v1/schedules", body=request, response_type=ScheduleResponse)

    def list_schedules(self) -> ScheduleListResponse:
        return self.execute("GET", "/v1/schedules", response_type=ScheduleListResponse)

    def get_schedule(self, schedule_id: str) -> ScheduleResponse:
        return self.execute("GET", f"/v1/schedules/{schedule_id}", response_type=ScheduleResponse)

    def update_schedule(
        self, schedule_id: str, request: UpdateScheduleRequest
    ) -> ScheduleResponse:
        return self.execute(
            "PUT", f"/v1/schedules/{schedule_id}", body=request, response_type=ScheduleResponse
        )

    def delete_schedule(self, schedule_id: str) -> None:
        self.execute("DELETE", f"/v1/schedules/{schedule_id}", response_type=EmptyResponse)

    def pause_schedule(self, schedule_id: str) -> ScheduleResponse:
        return self.execute(
            "POST", f"/v1/schedules/{schedule_id}/pause", response_type=ScheduleResponse
        )

    def resume_schedule(self, schedule_id: str) -> ScheduleResponse:
        return self.execute(
            "POST", f"/v1/schedules/{schedule_id}/resume", response_type=ScheduleResponse
        )

    def trigger_schedule(self, schedule_id: str) -> ScheduleResponse:
        """Run a schedule immediately, outside of its cron expression."""
        return self.execute(
            "POST", f"/v1/schedules/{schedule_id}/trigger", response_type=ScheduleResponse
        )

    def get_schedule_history(
        self, schedule_id: str, limit: int | None = None
    ) -> ScheduleHistoryResponse:
        return self.execute(
            "GET",
            f"/v1/schedules/{schedule_id}/history",
            params=[("limit", limit)],
            response_type=ScheduleHistoryResponse,
        )

    # Usage

    def get_usage(self) -> UsageResponse:
        return self.execute("GET", "/v1/usage", response_type=UsageResponse)

    def get_quota_status(self) -> QuotaStatusResponse:
        return self.execute("GET", "/v1/usage/quota", response_type=QuotaStatusResponse)
