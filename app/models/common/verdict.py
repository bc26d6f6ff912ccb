"""Uniform verdict and alert records shared by every detector."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from app.models.common.base import BaseEntity


class Severity(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _SEVERITY_ORDER.index(self)


_SEVERITY_ORDER = (Severity.LOW, Severity.MEDIUM, Severity.HIGH, Severity.CRITICAL)


class Detector(StrEnum):
    KLIMEK = "klimek"
    BENFORD = "benford"
    NETWORK = "network"
    SPATIAL = "spatial"
    CROSS_VALIDATION = "cross_validation"
    PVT_GAP = "pvt_gap"


@dataclass(frozen=True)
class AnomalyVerdict(BaseEntity):
    """One detector's judgement on one subject (a batch, a node, a unit or a station)."""

    detector: Detector
    alert_type: str
    score: float
    is_suspicious: bool
    severity: Severity
    summary: str
    subject: str | None = None
    details: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class AlertContext(BaseEntity):
    """Where a verdict came from."""

    station_code: str | None = None
    province: str | None = None
    constituency: str | None = None


@dataclass(frozen=True)
class Alert(BaseEntity):
    """Alert record handed to the notification and storage layers."""

    alert_type: str
    detector: Detector
    severity: Severity
    summary: str
    score: float
    station_code: str | None = None
    province: str | None = None
    constituency: str | None = None
