r"""Records for compose jobs, which combine several captures into a
single image."""

from __future__ import annotations

__all__ = [
    "BorderConfig",
    "CaptureDefaults",
    "CaptureItem",
    "CaptureMetadata",
    "ComposeJobStatusResponse",
    "ComposeJobSummaryResponse",
    "ComposeMetadata",
    "ComposeOutputConfig",
    "ComposeRequest",
    "ComposeResponse",
    "LabelConfig",
    "LayoutPreviewResponse",
    "PlacementPreview",
    "ShadowConfig",
    "VariantConfig",
]

from dataclasses import dataclass
from typing import Any

from allscreenshots.models.base import JsonModel
from allscreenshots.models.screenshot import Alignment, ImageFormat, LayoutType, ViewportConfig


@dataclass(frozen=True)
class CaptureItem(JsonModel):
    """A single capture of a compose job."""

    url: str
    id: str | None = None
    label: str | None = None
    viewport: ViewportConfig | None = None
    device: str | None = None
    full_page: bool | None = None
    dark_mode: bool | None = None
    delay: int | None = None


@dataclass(frozen=True)
class VariantConfig(JsonModel):
    """One configuration of a single URL captured several ways."""

    id: str | None = None
    label: str | None = None
    viewport: ViewportConfig | None = None
    device: str | None = None
    full_page: bool | None = None
    dark_mode: bool | None = None
    delay: int | None = None
    custom_css: str | None = None


@dataclass(frozen=True)
class CaptureDefaults(JsonModel):
    viewport: ViewportConfig | None = None
    device: str | None = None
    format: str | None = None
    full_page: bool | None = None
    quality: int | None = None
    delay: int | None = None
    wait_for: str | None = None
    wait_until: str | None = None
    timeout: int | None = None
    dark_mode: bool | None = None
    custom_css: str | None = None
    hide_selectors: list[str] | None = None
    block_ads: bool | None = None
    block_cookie_banners: bool | None = None
    block_level: str | None = None


@dataclass(frozen=True)
class LabelConfig(JsonModel):
    enabled: bool | None = None
    position: str | None = None
    font_size: int | None = None
    font_color: str | None = None
    background_color: str | None = None
    padding: int | None = None


@dataclass(frozen=True)
class BorderConfig(JsonModel):
    enabled: bool | None = None
    width: int | None = None
    color: str | None = None
    radius: int | None = None


@dataclass(frozen=True)
class ShadowConfig(JsonModel):
    enabled: bool | None = None
    blur: int | None = None
    spread: int | None = None
    color: str | None = None
    offset_x: int | None = None
    offset_y: int | None = None


@dataclass(frozen=True)
class ComposeOutputConfig(JsonModel):
    """Output options of a compose job."""

    layout: LayoutType | None = None
    format: ImageFormat | None = None
    quality: int | None = None
    columns: int | None = None
    spacing: int | None = None
    padding: int | None = None
    background: str | None = None
    alignment: Alignment | None = None
    max_width: int | None = None
    max_height: int | None = None
    thumbnail_width: int | None = None
    labels: LabelConfig | None = None
    border: BorderConfig | None = None
    shadow: ShadowConfig | None = None


@dataclass(frozen=True)
class ComposeRequest(JsonModel):
    """Request for composing multiple screenshots.

    Either pass ``captures`` (several URLs), or ``url`` with ``variants``
    (one URL captured with several configurations).

    Note:
        ``async_`` is sent as ``async`` on the wire.
    """

    captures: list[CaptureItem] | None = None
    url: str | None = None
    variants: list[VariantConfig] | None = None
    defaults: CaptureDefaults | None = None
    output: ComposeOutputConfig | None = None
    async_: bool | None = None
    webhook_url: str | None = None
    webhook_secret: str | None = None
    captures_mode: bool | None = None
    variants_mode: bool | None = None


@dataclass(frozen=True)
class CaptureMetadata(JsonModel):
    id: str | None = None
    url: str | None = None
    label: str | None = None
    width: int | None = None
    height: int | None = None


@dataclass(frozen=True)
class ComposeMetadata(JsonModel):
    captures: list[CaptureMetadata] | None = None


@dataclass(frozen=True)
class ComposeResponse(JsonModel):
    url: str | None = None
    storage_url: str | None = None
    expires_at: str | None = None
    width: int | None = None
    height: int | None = None
    format: str | None = None
    file_size: int | None = None
    render_time_ms: int | None = None
    layout: str | None = None
    metadata: ComposeMetadata | None = None


@dataclass(frozen=True)
class ComposeJobStatusResponse(JsonModel):
    job_id: str
    status: str
    progress: int | None = None
    total_captures: int | None = None
    completed_captures: int | None = None
    result: ComposeResponse | None = None
    error_code: str | None = None
    error_message: str | None = None
    created_at: str | None = None
    completed_at: str | None = None


@dataclass(frozen=True)
class ComposeJobSummaryResponse(JsonModel):
    job_id: str
    status: str
    total_captures: int | None = None
    completed_captures: int | None = None
    failed_captures: int | None = None
    progress: int | None = None
    layout_type: str | None = None
    created_at: str | None = None
    completed_at: str | None = None


@dataclass(frozen=True)
class PlacementPreview(JsonModel):
    index: int
    x: int
    y: int
    width: int
    height: int
    label: str | None = None


@dataclass(frozen=True)
class LayoutPreviewResponse(JsonModel):
    layout: str
    canvas_width: int
    canvas_height: int
    placements: list[PlacementPreview]
    resolved_layout: str | None = None
    metadata: dict[str, Any] | None = None
