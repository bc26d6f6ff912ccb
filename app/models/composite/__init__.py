"""Composite index domain."""

from app.models.composite.entities import (
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

__all__ = [
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
