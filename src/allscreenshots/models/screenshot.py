r"""Records for screenshot requests and screenshot jobs."""

from __future__ import annotations

__all__ = [
    "Alignment",
    "AsyncJobCreatedResponse",
    "BlockLevel",
    "ImageFormat",
    "JobResponse",
    "JobStatus",
    "LayoutType",
    "ResponseType",
    "ScreenshotRequest",
    "ViewportConfig",
    "WaitUntil",
]

from dataclasses import dataclass
from enum import Enum
from typing import Any

from allscreenshots.models.base import JsonModel


class ImageFormat(str, Enum):
    PNG = "png"
    JPEG = "jpeg"
    JPG = "jpg"
    WEBP = "webp"
    PDF = "pdf"


class WaitUntil(str, Enum):
    """Page event to wait for before capturing."""

    LOAD = "load"
    DOMCONTENTLOADED = "domcontentloaded"
    NETWORKIDLE = "networkidle"
    COMMIT = "commit"


class BlockLevel(str, Enum):
    """Ad and content blocking level."""

    NONE = "none"
    LIGHT = "light"
    NORMAL = "normal"
    PRO = "pro"
    PRO_PLUS = "pro_plus"
    ULTIMATE = "ultimate"


class ResponseType(str, Enum):
    BINARY = "BINARY"
    JSON = "JSON"


class JobStatus(str, Enum):
    QUEUED = "QUEUED"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"


class LayoutType(str, Enum):
    """Layout used to compose several screenshots into one image."""

    GRID = "GRID"
    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"
    MASONRY = "MASONRY"
    MONDRIAN = "MONDRIAN"
    PARTITIONING = "PARTITIONING"
    AUTO = "AUTO"


class Alignment(str, Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class ViewportConfig(JsonModel):
    """Viewport configuration.

    Args:
        width: Width in pixels (100-4096).
        height: Height in pixels (100-4096).
        device_scale_factor: Device scale factor (1-3).
    """

    width: int | None = None
    height: int | None = None
    device_scale_factor: int | None = None


@dataclass(frozen=True)
class ScreenshotRequest(JsonModel):
    """Parameters for taking a screenshot.

    Only ``url`` is required. Every other field is left out of the
    request when unset, letting the service apply its own default.

    Args:
        url: Target URL to capture.
        viewport: Custom viewport configuration.
        device: Device preset name (e.g. "Desktop HD", "iPhone 14").
        format: Output image format.
        full_page: Capture the full scrollable page.
        quality: JPEG/WebP quality (1-100).
        delay: Delay before capture in milliseconds (0-30000).
        wait_for: CSS selector to wait for.
        wait_until: Page event to wait for.
        timeout: Render timeout in milliseconds (1000-60000).
        dark_mode: Emulate dark mode.
        custom_css: Custom CSS to inject.
        hide_selectors: CSS selectors of elements to hide.
        selector: CSS selector of the element to capture.
        block_ads: Block advertisements.
        block_cookie_banners: Block cookie consent banners.
        block_level: Content blocking level.
        webhook_url: Webhook URL for asynchronous notifications.
        webhook_secret: Secret used to sign webhook payloads.
        response_type: Whether to return the image or a JSON description.
    """

    url: str
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
    webhook_url: str | None = None
    webhook_secret: str | None = None
    response_type: ResponseType | None = None


@dataclass(frozen=True)
class AsyncJobCreatedResponse(JsonModel):
    id: str
    status: JobStatus
    status_url: str | None = None
    created_at: str | None = None


@dataclass(frozen=True)
class JobResponse(JsonModel):
    """Status of an asynchronous screenshot job."""

    id: str
    status: JobStatus
    url: str | None = None
    result_url: str | None = None
    error_code: str | None = None
    error_message: str | None = None
    created_at: str | None = None
    started_at: str | None = None
    completed_at: str | None = None
    expires_at: str | None = None
    metadata: dict[str, Any] | None = None
