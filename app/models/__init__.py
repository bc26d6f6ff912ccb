"""Models package - entities for all detectors."""

from app.models.benford import BenfordResult, DigitDeviation
from app.models.common import (
    Alert,
    AlertContext,
    AnomalyVerdict,
    BaseEntity,
    Detector,
    Severity,
)
from app.models.composite import (
    BatchScores,
    BatchSummary,
    GlueFinComponent,
    GlueFinInput,
    GlueFinResult,
    GlueFinWeights,
    RiskLevel,
    StationInput,
    StationScore,
)
from app.models.klimek import HeatmapCell, KlimekResult, UnitObservation
from app.models.network import Edge, NetworkResult, NodeCentrality
from app.models.ocr import (
    CandidateMismatch,
    CandidateVote,
    CrossValidationResult,
    DocumentType,
    TallyCheck,
    VoteTally,
)
from app.models.pvt import PvtComparison, StationCount, StationGap
from app.models.spatial import SpatialResult, SpatialScore, SpatialStatus, SpatialUnit

__all__ = [
    # Common
    "BaseEntity",
    "Alert",
    "AlertContext",
    "AnomalyVerdict",
    "Detector",
    "Severity",
    # Klimek
    "UnitObservation",
    "HeatmapCell",
    "KlimekResult",
    # Benford
    "BenfordResult",
    "DigitDeviation",
    # Network
    "Edge",
    "NodeCentrality",
    "NetworkResult",
    # Spatial
    "SpatialUnit",
    "SpatialScore",
    "SpatialStatus",
    "SpatialResult",
    # OCR
    "DocumentType",
    "CandidateVote",
    "VoteTally",
    "CandidateMismatch",
    "CrossValidationResult",
    "TallyCheck",
    # PVT
    "StationCount",
    "StationGap",
    "PvtComparison",
    # Composite
    "RiskLevel",
    "GlueFinInput",
    "GlueFinWeights",
    "GlueFinComponent",
    "GlueFinResult",
    "StationInput",
    "StationScore",
    "BatchSummary",
    "BatchScores",
]
