"""Spatial analysis entities."""

from dataclasses import dataclass
from enum import StrEnum

from app.models.common import BaseEntity


class SpatialStatus(StrEnum):
    SCORED = "scored"
    INSUFFICIENT_DATA = "insufficient_data"
    ZERO_VARIANCE = "zero_variance"


@dataclass(frozen=True)
class SpatialUnit(BaseEntity):
    """Geo-tagged polling unit carrying the metric under test."""

    id: str
    latitude: float
    longitude: float
    metric_value: float


@dataclass(frozen=True)
class SpatialScore(BaseEntity):
    """Neighbor-relative z-score of one unit. z_score is None unless status is SCORED."""

    unit_id: str
    value: float
    neighbor_count: int
    neighbor_mean: float | None
    neighbor_std: float | None
    z_score: float | None
    status: SpatialStatus
    is_suspicious: bool


@dataclass(frozen=True)
class SpatialResult(BaseEntity):
    scores: list[SpatialScore]
    z_threshold: float

    @property
    def suspicious(self) -> list[SpatialScore]:
        return [s for s in self.scores if s.is_suspicious]

    @property
    def unscored(self) -> list[SpatialScore]:
        return [s for s in self.scores if s.status != SpatialStatus.SCORED]
