"""GLUE-FIN composite index entities."""

from dataclasses import dataclass, field
from enum import StrEnum

from app.models.common import BaseEntity


class RiskLevel(StrEnum):
    NORMAL = "normal"
    REVIEW = "review"
    SUSPICIOUS = "suspicious"
    CRITICAL = "critical"
    CRISIS = "crisis"


@dataclass(frozen=True)
class GlueFinInput(BaseEntity):
    """Signals from each module for one station. Missing signals stay None."""

    ocr_confidence: float | None = None  # 0-100
    klimek_alpha: float | None = None  # 0-1
    klimek_beta: float | None = None  # 0-1
    fraud_zone_percentage: float | None = None  # 0-100
    benford_chi_square: float | None = None
    pvt_gap_percentage: float | None = None  # 0-100
    sna_centrality: float | None = None  # 0-1


@dataclass(frozen=True)
class GlueFinWeights(BaseEntity):
    ocr: float = 0.15
    klimek: float = 0.30
    benford: float = 0.20
    pvt: float = 0.25
    sna: float = 0.10

    @property
    def total(self) -> float:
        return self.ocr + self.klimek + self.benford + self.pvt + self.sna


@dataclass(frozen=True)
class GlueFinComponent(BaseEntity):
    name: str
    raw_value: float | None
    normalized_value: float
    weight: float
    contribution: float


@dataclass(frozen=True)
class GlueFinResult(BaseEntity):
    score: float  # 0-100
    level: RiskLevel
    level_emoji: str
    level_description: str
    recommendation: str
    components: list[GlueFinComponent]
    formula: str


@dataclass(frozen=True)
class StationInput(BaseEntity):
    station_id: str
    input: GlueFinInput
    station_name: str | None = None


@dataclass(frozen=True)
class StationScore(BaseEntity):
    station_id: str
    result: GlueFinResult
    station_name: str | None = None


@dataclass(frozen=True)
class BatchSummary(BaseEntity):
    total: int
    by_level: dict[RiskLevel, int]
    average_score: float
    high_risk_stations: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class BatchScores(BaseEntity):
    stations: list[StationScore]
    summary: BatchSummary
