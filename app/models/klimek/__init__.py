"""Klimek model domain."""

from app.models.klimek.entities import HeatmapCell, KlimekResult, UnitObservation

__all__ = ["UnitObservation", "HeatmapCell", "KlimekResult"]
