"""Spatial domain."""

from app.models.spatial.entities import SpatialResult, SpatialScore, SpatialStatus, SpatialUnit

__all__ = ["SpatialUnit", "SpatialScore", "SpatialStatus", "SpatialResult"]
