"""Analysis API request and response schemas."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class UnitObservationIn(BaseModel):
    """Turnout and leading vote share of one polling unit."""

    turnout: float = Field(ge=0, le=1)
    vote_share: float = Field(ge=0, le=1)


class KlimekRequest(BaseModel):
    units: list[UnitObservationIn] = Field(min_length=1)
    station_code: str | None = None
    province: str | None = None
    constituency: str | None = None


class BenfordRequest(BaseModel):
    votes: list[int] = Field(min_length=1)
    province: str | None = None
    constituency: str | None = None


class EdgeIn(BaseModel):
    source: str = Field(min_length=1)
    target: str = Field(min_length=1)


class NetworkRequest(BaseModel):
    edges: list[EdgeIn] = Field(min_length=1)


class SpatialUnitIn(BaseModel):
    id: str = Field(min_length=1)
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    metric_value: float


class NeighborsIn(BaseModel):
    """How neighbors are chosen: radius in km, k nearest, or explicit lists."""

    mode: Literal["distance", "k_nearest", "adjacency"] = "distance"
    km: float = Field(default=5.0, gt=0)
    k: int = Field(default=5, ge=1)
    adjacency: dict[str, list[str]] = Field(default_factory=dict)


class SpatialRequest(BaseModel):
    units: list[SpatialUnitIn] = Field(min_length=1)
    neighbors: NeighborsIn = Field(default_factory=NeighborsIn)


class StationCountIn(BaseModel):
    station_code: str = Field(min_length=1)
    crowdsourced: int = Field(ge=0)
    official: int = Field(ge=0)


class PvtRequest(BaseModel):
    stations: list[StationCountIn] = Field(min_length=1)


class GlueFinInputIn(BaseModel):
    ocr_confidence: float | None = Field(default=None, ge=0, le=100)
    klimek_alpha: float | None = Field(default=None, ge=0, le=1)
    klimek_beta: float | None = Field(default=None, ge=0, le=1)
    fraud_zone_percentage: float | None = Field(default=None, ge=0, le=100)
    benford_chi_square: float | None = Field(default=None, ge=0)
    pvt_gap_percentage: float | None = Field(default=None, ge=0)
    sna_centrality: float | None = Field(default=None, ge=0, le=1)


class StationInputIn(BaseModel):
    station_id: str = Field(min_length=1)
    station_name: str | None = None
    input: GlueFinInputIn


class GlueFinRequest(BaseModel):
    stations: list[StationInputIn] = Field(min_length=1)


class VerdictItem(BaseModel):
    """One detector verdict."""

    detector: str
    alert_type: str
    score: float
    is_suspicious: bool
    severity: str
    summary: str
    subject: str | None = None


class AlertItem(BaseModel):
    """Alert raised from a verdict."""

    alert_type: str
    detector: str
    severity: str
    summary: str
    score: float
    station_code: str | None = None
    province: str | None = None
    constituency: str | None = None


class AnalysisResponse(BaseModel):
    """Detector result with its verdicts and alerts."""

    detector: str
    result: dict[str, Any]
    verdicts: list[VerdictItem]
    alerts: list[AlertItem]


class GlueFinResponse(BaseModel):
    stations: list[dict[str, Any]]
    summary: dict[str, Any]
