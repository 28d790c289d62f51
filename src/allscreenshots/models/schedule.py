r"""Records for scheduled screenshots."""

from __future__ import annotations

__all__ = [
    "CreateScheduleRequest",
    "ScheduleExecutionResponse",
    "ScheduleHistoryResponse",
    "ScheduleListResponse",
    "ScheduleResponse",
    "ScheduleScreenshotOptions",
    "UpdateScheduleRequest",
]

from dataclasses import dataclass

from allscreenshots.models.base import JsonModel
from allscreenshots.models.screenshot import BlockLevel, ImageFormat, ViewportConfig, WaitUntil


@dataclass(frozen=True)
class ScheduleScreenshotOptions(JsonModel):
    viewport: ViewportConfig | None = None
    device: str | None = None
    format: ImageFormat | None = None
    full_page: bool | None = None
    quality: int | None = None
    delay: int | None = None
    wait_for: str | None = None
    wait_until: WaitUntil | None = None
    timeout: int | None = None
    dark_mode: bool | None = None
    custom_css: str | None = None
    hide_selectors: list[str] | None = None
    block_ads: bool | None = None
    block_cookie_banners: bool | None = None
    block_level: BlockLevel | None = None


@dataclass(frozen=True)
class CreateScheduleRequest(JsonModel):
    """Request to create a scheduled screenshot.

    Args:
        name: Display name of the schedule.
        url: Target URL to capture.
        schedule: Cron expression (e.g. ``"0 9 * * *"``).
        timezone: IANA timezone the cron expression is evaluated in.
        options: Capture options.
        webhook_url: Webhook URL notified after each execution.
        webhook_secret: Secret used to sign webhook payloads.
        retention_days: Number of days captures are kept.
        starts_at: ISO-8601 timestamp of the first allowed execution.
        ends_at: ISO-8601 timestamp after which the schedule stops.
    """

    name: str
    url: str
    schedule: str
    timezone: str | None = None
    options: ScheduleScreenshotOptions | None = None
    webhook_url: str | None = None
    webhook_secret: str | None = None
    retention_days: int | None = None
    starts_at: str | None = None
    ends_at: str | None = None


@dataclass(frozen=True)
class UpdateScheduleRequest(JsonModel):
    """Partial update of a schedule; unset fields are left unchanged."""

    name: str | None = None
    url: str | None = None
    schedule: str | None = None
    timezone: str | None = None
    options: ScheduleScreenshotOptions | None = None
    webhook_url: str | None = None
    webhook_secret: str | None = None
    retention_days: int | None = None
    starts_at: str | None = None
    ends_at: str | None = None


@dataclass(frozen=True)
class ScheduleResponse(JsonModel):
    id: str
    name: str
    url: str
    schedule: str
    schedule_description: str | None = None
    timezone: str | None = None
    status: str | None = None
    options: ScheduleScreenshotOptions | None = None
    webhook_url: str | None = None
    retention_days: int | None = None
    starts_at: str | None = None
    ends_at: str | None = None
    last_executed_at: str | None = None
    next_execution_at: str | None = None
    execution_count: int | None = None
    success_count: int | None = None
    failure_count: int | None = None
    created_at: str | None = None
    updated_at: str | None = None


@dataclass(frozen=True)
class ScheduleListResponse(JsonModel):
    schedules: list[ScheduleResponse]
    total: int


@dataclass(frozen=True)
class ScheduleExecutionResponse(JsonModel):
    id: str
    executed_at: str | None = None
    status: str | None = None
    result_url: str | None = None
    storage_url: str | None = None
    file_size: int | None = None
    render_time_ms: int | None = None
    error_code: str | None = None
    error_message: str | None = None
    expires_at: str | None = None


@dataclass(frozen=True)
class ScheduleHistoryResponse(JsonModel):
    schedule_id: str
    total_executions: int
    executions: list[ScheduleExecutionResponse]
