r"""Typed records sent to and returned by the screenshot service."""

from __future__ import annotations

__all__ = [
    "Alignment",
    "AsyncJobCreatedResponse",
    "BandwidthQuotaResponse",
    "BlockLevel",
    "BorderConfig",
    "BulkDefaults",
    "BulkJobDetailInfo",
    "BulkJobInfo",
    "BulkJobSummary",
    "BulkRequest",
    "BulkResponse",
    "BulkStatusResponse",
    "BulkUrlOptions",
    "BulkUrlRequest",
    "CaptureDefaults",
    "CaptureItem",
    "CaptureMetadata",
    "ComposeJobStatusResponse",
    "ComposeJobSummaryResponse",
    "ComposeMetadata",
    "ComposeOutputConfig",
    "ComposeRequest",
    "ComposeResponse",
    "CreateScheduleRequest",
    "EmptyResponse",
    "ImageFormat",
    "JobResponse",
    "JobStatus",
    "JsonModel",
    "LabelConfig",
    "LayoutPreviewResponse",
    "LayoutType",
    "PeriodUsageResponse",
    "PlacementPreview",
    "QuotaDetailResponse",
    "QuotaResponse",
    "QuotaStatusResponse",
    "ResponseType",
    "ScheduleExecutionResponse",
    "ScheduleHistoryResponse",
    "ScheduleListResponse",
    "ScheduleResponse",
    "ScheduleScreenshotOptions",
    "ScreenshotRequest",
    "ShadowConfig",
    "TotalsResponse",
    "UpdateScheduleRequest",
    "UsageResponse",
    "VariantConfig",
    "ViewportConfig",
    "WaitUntil",
]

from allscreenshots.models.base import EmptyResponse, JsonModel
from allscreenshots.models.bulk import (
    BulkDefaults,
    BulkJobDetailInfo,
    BulkJobInfo,
    BulkJobSummary,
    BulkRequest,
    BulkResponse,
    BulkStatusResponse,
    BulkUrlOptions,
    BulkUrlRequest,
)
from allscreenshots.models.compose import (
    BorderConfig,
    CaptureDefaults,
    CaptureItem,
    CaptureMetadata,
    ComposeJobStatusResponse,
    ComposeJobSummaryResponse,
    ComposeMetadata,
    ComposeOutputConfig,
    ComposeRequest,
    ComposeResponse,
    LabelConfig,
    LayoutPreviewResponse,
    PlacementPreview,
    ShadowConfig,
    VariantConfig,
)
from allscreenshots.models.schedule import (
    CreateScheduleRequest,
    ScheduleExecutionResponse,
    ScheduleHistoryResponse,
    ScheduleListResponse,
    ScheduleResponse,
    ScheduleScreenshotOptions,
    UpdateScheduleRequest,
)
from allscreenshots.models.screenshot import (
    Alignment,
    AsyncJobCreatedResponse,
    BlockLevel,
    ImageFormat,
    JobResponse,
    JobStatus,
    LayoutType,
    ResponseType,
    ScreenshotRequest,
    ViewportConfig,
    WaitUntil,
)
from allscreenshots.models.usage import (
    BandwidthQuotaResponse,
    PeriodUsageResponse,
    QuotaDetailResponse,
    QuotaResponse,
    QuotaStatusResponse,
    TotalsResponse,
    UsageResponse,
)
