"""Parallel vote tabulation entities."""

from dataclasses import dataclass

from app.models.common import BaseEntity, Severity


@dataclass(frozen=True)
class StationCount(BaseEntity):
    """Leading-candidate votes at one station, crowd-sourced vs official."""

    station_code: str
    crowdsourced: int
    official: int


@dataclass(frozen=True)
class StationGap(BaseEntity):
    """gap_ratio is None when the official count is zero."""

    station_code: str
    crowdsourced: int
    official: int
    gap: int
    gap_ratio: float | None
    has_gap: bool
    severity: Severity


@dataclass(frozen=True)
class PvtComparison(BaseEntity):
    """Aggregate comparison of crowd-sourced and official totals."""

    official_total: int
    crowdsourced_total: int
    gap: int
    gap_percent: float
    is_suspicious: bool
    official_count: int
    crowdsourced_count: int
