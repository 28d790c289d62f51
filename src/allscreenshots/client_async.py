r"""Asynchronous client for the screenshot service.

This module provides an async context manager-based client holding the
configuration and an ``httpx.AsyncClient``. It exposes the same
operations as ``AllScreenshotsClient``, as coroutines.
"""

from __future__ import annotations

__all__ = ["AsyncAllScreenshotsClient"]

from typing import TYPE_CHECKING, Any

import httpx

from allscreenshots.client import layout_preview_params
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
from allscreenshots.request_async import execute_with_retry_async

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import TracebackType
    from typing import Self


class AsyncAllScreenshotsClient:
    r"""Asynchronous client for the screenshot service.

    Several operations can run concurrently on the same client. If the
    task awaiting an operation is cancelled, the operation stops and
    raises ``RequestCancelledError``.

    Args:
        configuration: Optional client configuration. If ``None``, one is
            created from ``api_key`` and the environment.
        api_key: Optional API key. It cannot be combined with
            ``configuration``.
        client: Optional ``httpx.AsyncClient`` used to send the requests.
            It is never closed by ``AsyncAllScreenshotsClient``. If
            omitted, a client that follows redirects is created.

    Raises:
        MissingCredentialError: If no configuration is passed and no API
            key can be resolved.
        ValueError: If both ``configuration`` and ``api_key`` are
            passed.

    Example:
        ```pycon
        >>> import asyncio
        >>> from allscreenshots import AsyncAllScreenshotsClient
        >>> async def main():  # doctest: +SKIP
        ...     async with AsyncAllScreenshotsClient(api_key="my-key") as client:
        ...         return await client.get_usage()
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        configuration: ClientConfiguration | None = None,
        *,
        api_key: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if configuration is not None and api_key is not None:
            msg = "api_key cannot be combined with configuration; set it on the configuration"
            raise ValueError(msg)
        self._configuration: ClientConfiguration = configuration or ClientConfiguration(
            api_key=api_key
        )
        self._close_client = client is None
        self._client: httpx.AsyncClient = client or httpx.AsyncClient(
            timeout=self._configuration.timeout, follow_redirects=True
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base_url={str(self._configuration.base_url)!r})"

    @property
    def configuration(self) -> ClientConfiguration:
        return self._configuration

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying httpx client if this client created
        it."""
        if self._close_client:
            await self._client.aclose()

    async def execute(
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
            body: Optional JSON body.
            response_type: The expected type of the decoded JSON body.
            expect_binary: If ``True``, return the raw body bytes.

        Returns:
            The decoded response.

        Raises:
            AllScreenshotsError: If the request fails.
            RequestCancelledError: If the calling task is cancelled.
        """
        request = build_request(
            self._configuration,
            method,
            path,
            params=params,
            body=body,
            expect_binary=expect_binary,
        )
        return await execute_with_retry_async(
            self._client,
            request,
            retry_policy=self._configuration.retry_policy,
            response_type=response_type,
            expect_binary=expect_binary,
        )

    # Screenshots

    async def take_screenshot(self, request: ScreenshotRequest) -> bytes:
        """Capture a screenshot and return the image data."""
        return await self.execute("POST", "/v1/screenshots", body=request, expect_binary=True)

    async def take_screenshot_async(
        self, request: ScreenshotRequest
    ) -> AsyncJobCreatedResponse:
        """Start a screenshot job on the service side and return its
        identifier without waiting for the capture."""
        return await self.execute(
            "POST", "/v1/screenshots/async", body=request, response_type=AsyncJobCreatedResponse
        )

    async def list_jobs(self) -> list[JobResponse]:
        return await self.execute("GET", "/v1/screenshots/jobs", response_type=list[JobResponse])

    async def get_job(self, job_id: str) -> JobResponse:
        return await self.execute(
            "GET", f"/v1/screenshots/jobs/{job_id}", response_type=JobResponse
        )

    async def get_job_result(self, job_id: str) -> bytes:
        return await self.execute(
            "GET", f"/v1/screenshots/jobs/{job_id}/result", expect_binary=True
        )

    async def cancel_job(self, job_id: str) -> JobResponse:
        return await self.execute(
            "POST", f"/v1/screenshots/jobs/{job_id}/cancel", response_type=JobResponse
        )

    # Bulk screenshots

    async def create_bulk_job(self, request: BulkRequest) -> BulkResponse:
        return await self.execute(
            "POST", "/v1/screenshots/bulk", body=request, response_type=BulkResponse
        )

    async def list_bulk_jobs(self) -> list[BulkJobSummary]:
        return await self.execute(
            "GET", "/v1/screenshots/bulk", response_type=list[BulkJobSummary]
        )

    async def get_bulk_job(self, bulk_id: str) -> BulkStatusResponse:
        return await self.execute(
            "GET", f"/v1/screenshots/bulk/{bulk_id}", response_type=BulkStatusResponse
        )

    async def cancel_bulk_job(self, bulk_id: str) -> BulkJobSummary:
        return await self.execute(
            "POST", f"/v1/screenshots/bulk/{bulk_id}/cancel", response_type=BulkJobSummary
        )

    # Compose

    async def compose(self, request: ComposeRequest) -> ComposeJobStatusResponse:
        return await self.execute(
            "POST",
            "/v1/screenshots/compose",
            body=request,
            response_type=ComposeJobStatusResponse,
        )

    async def preview_layout(
        self,
        layout: LayoutType | str,
        image_count: int,
        canvas_width: int | None = None,
        canvas_height: int | None = None,
        aspect_ratios: Sequence[float] | None = None,
    ) -> LayoutPreviewResponse:
        return await self.execute(
            "GET",
            "/v1/screenshots/compose/preview",
            params=layout_preview_params(
                layout, image_count, canvas_width, canvas_height, aspect_ratios
            ),
            response_type=LayoutPreviewResponse,
        )

    async def list_compose_jobs(self) -> list[ComposeJobSummaryResponse]:
        return await self.execute(
            "GET", "/v1/screenshots/compose/jobs", response_type=list[ComposeJobSummaryResponse]
        )

    async def get_compose_job(self, job_id: str) -> ComposeJobStatusResponse:
        return await self.execute(
            "GET",
            f"/v1/screenshots/compose/jobs/{job_id}",
            response_type=ComposeJobStatusResponse,
        )

    # Schedules

    async def create_schedule(self, request: CreateScheduleRequest) -> ScheduleResponse:
        return await self.execute(
            "POST", "/v1/schedules", body=request, response_type=ScheduleResponse
        )

    async def list_schedules(self) -> ScheduleListResponse:
        return await self.execute("GET", "/v1/schedules", response_type=ScheduleListResponse)

    async def get_schedule(self, schedule_id: str) -> ScheduleResponse:
        return await self.execute(
            "GET", f"/v1/schedules/{schedule_id}", response_type=ScheduleResponse
        )

    async def update_schedule(
        self, schedule_id: str, request: UpdateScheduleRequest
    ) -> ScheduleResponse:
        return await self.execute(
            "PUT", f"/v1/schedules/{schedule_id}", body=request, response_type=ScheduleResponse
        )

    async def delete_schedule(self, schedule_id: str) -> None:
        await self.execute("DELETE", f"/v1/schedules/{schedule_id}", response_type=EmptyResponse)

    async def pause_schedule(self, schedule_id: str) -> ScheduleResponse:
        return await self.execute(
            "POST", f"/v1/schedules/{schedule_id}/pause", response_type=ScheduleResponse
        )

    async def resume_schedule(self, schedule_id: str) -> ScheduleResponse:
        return await self.execute(
            "POST", f"/v1/schedules/{schedule_id}/resume", response_type=ScheduleResponse
        )

    async def trigger_schedule(self, schedule_id: str) -> ScheduleResponse:
        return await self.execute(
            "POST", f"/v1/schedules/{schedule_id}/trigger", response_type=ScheduleResponse
        )

    async def get_schedule_history(
        self, schedule_id: str, limit: int | None = None
    ) -> ScheduleHistoryResponse:
        return await self.execute(
            "GET",
            f"/v1/schedules/{schedule_id}/history",
            params=[("limit", limit)],
            response_type=ScheduleHistoryResponse,
        )

    # Usage

    async def get_usage(self) -> UsageResponse:
        return await self.execute("GET", "/v1/usage", response_type=UsageResponse)

    async def get_quota_status(self) -> QuotaStatusResponse:
        return await self.execute("GET", "/v1/usage/quota", response_type=QuotaStatusResponse)
