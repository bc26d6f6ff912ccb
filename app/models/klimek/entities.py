"""Klimek model entities - per-unit observations and model output."""

from dataclasses import dataclass, field

from app.models.common import BaseEntity


@dataclass(frozen=True)
class UnitObservation(BaseEntity):
    """Turnout and leading-candidate vote share of one polling unit."""

    turnout: float
    vote_share: float


@dataclass(frozen=True)
class HeatmapCell(BaseEntity):
    """Occupied cell of the turnout/vote-share histogram, at its bin centre."""

    x: float
    y: float
    value: int


@dataclass(frozen=True)
class KlimekResult(BaseEntity):
    """Ballot-stuffing (alpha) and vote-stealing (beta) indicators."""

    alpha: float
    beta: float
    correlation: float | None
    fraud_zone_count: int
    total_units: int
    ballot_stuffing: bool
    vote_stealing: bool
    is_suspicious: bool
    heatmap: list[HeatmapCell] = field(default_factory=list)
