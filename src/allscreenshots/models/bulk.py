r"""Records for bulk screenshot jobs."""

from __future__ import annotations

__all__ = [
    "BulkDefaults",
    "BulkJobDetailInfo",
    "BulkJobInfo",
    "BulkJobSummary",
    "BulkRequest",
    "BulkResponse",
    "BulkStatusResponse",
    "BulkUrlOptions",
    "BulkUrlRequest",
]

from dataclasses import dataclass

from allscreenshots.models.base import JsonModel
from allscreenshots.models.screenshot import BlockLevel, ImageFormat, ViewportConfig, WaitUntil


@dataclass(frozen=True)
class BulkUrlOptions(JsonModel):
    """Capture options overriding the bulk defaults for one URL."""

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
    selector: str | None = None
    block_ads: bool | None = None
    block_cookie_banners: bool | None = None
    block_level: BlockLevel | None = None


@dataclass(frozen=True)
class BulkUrlRequest(JsonModel):
    url: str
    options: BulkUrlOptions | None = None


@dataclass(frozen=True)
class BulkDefaults(JsonModel):
    """Capture options applied to every URL of a bulk job."""

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
    block_ads: bool | None = None
    block_cookie_banners: bool | None = None
    block_level: BlockLevel | None = None


@dataclass(frozen=True)
class BulkRequest(JsonModel):
    """Request to capture several URLs in one job.

    Args:
        urls: The URLs to capture, each with optional overrides.
        defaults: Options applied to every URL.
        webhook_url: Webhook URL notified when the job completes.
        webhook_secret: Secret used to sign webhook payloads.
    """

    urls: list[BulkUrlRequest]
    defaults: BulkDefaults | None = None
    webhook_url: str | None = None
    webhook_secret: str | None = None


@dataclass(frozen=True)
class BulkJobInfo(JsonModel):
    id: str
    url: str | None = None
    status: str | None = None


@dataclass(frozen=True)
class BulkResponse(JsonModel):
    id: str
    status: str
    total_jobs: int
    completed_jobs: int
    failed_jobs: int
    progress: int
    jobs: list[BulkJobInfo] | None = None
    created_at: str | None = None
    completed_at: str | None = None


@dataclass(frozen=True)
class BulkJobSummary(JsonModel):
    id: str
    status: str
    total_jobs: int
    completed_jobs: int
    failed_jobs: int
    progress: int
    created_at: str | None = None
    completed_at: str | None = None


@dataclass(frozen=True)
class BulkJobDetailInfo(JsonModel):
    id: str
    url: str | None = None
    status: str | None = None
    result_url: str | None = None
    storage_url: str | None = None
    format: str | None = None
    width: int | None = None
    height: int | None = None
    file_size: int | None = None
    render_time_ms: int | None = None
    error_code: str | None = None
    error_message: str | None = None
    created_at: str | None = None
    completed_at: str | None = None


@dataclass(frozen=True)
class BulkStatusResponse(JsonModel):
    """Status of a bulk job with the details of each capture."""

    id: str
    status: str
    total_jobs: int
    completed_jobs: int
    failed_jobs: int
    progress: int
    jobs: list[BulkJobDetailInfo] | None = None
    created_at: str | None = None
    completed_at: str | None = None
