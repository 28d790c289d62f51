r"""Records for usage statistics and quota status."""

from __future__ import annotations

__all__ = [
    "BandwidthQuotaResponse",
    "PeriodUsageResponse",
    "QuotaDetailResponse",
    "QuotaResponse",
    "QuotaStatusResponse",
    "TotalsResponse",
    "UsageResponse",
]

from dataclasses import dataclass

from allscreenshots.models.base import JsonModel


@dataclass(frozen=True)
class QuotaDetailResponse(JsonModel):
    limit: int
    used: int
    remaining: int
    percent_used: int


@dataclass(frozen=True)
class BandwidthQuotaResponse(JsonModel):
    limit_bytes: int
    limit_formatted: str
    used_bytes: int
    used_formatted: str
    remaining_bytes: int
    remaining_formatted: str
    percent_used: int


@dataclass(frozen=True)
class QuotaStatusResponse(JsonModel):
    tier: str
    screenshots: QuotaDetailResponse
    bandwidth: BandwidthQuotaResponse
    period_ends: str | None = None


@dataclass(frozen=True)
class QuotaResponse(JsonModel):
    screenshots: int | None = None
    bandwidth: int | None = None


@dataclass(frozen=True)
class PeriodUsageResponse(JsonModel):
    period_start: str
    period_end: str
    screenshots_count: int
    bandwidth_bytes: int
    bandwidth_formatted: str


@dataclass(frozen=True)
class TotalsResponse(JsonModel):
    screenshots_count: int
    bandwidth_bytes: int
    bandwidth_formatted: str


@dataclass(frozen=True)
class UsageResponse(JsonModel):
    """Usage for the current billing period, with history and totals."""

    tier: str
    current_period: PeriodUsageResponse
    quota: QuotaResponse | None = None
    history: list[PeriodUsageResponse] | None = None
    totals: TotalsResponse | None = None
