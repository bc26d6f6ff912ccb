"""PVT domain."""

from app.models.pvt.entities import PvtComparison, StationCount, StationGap

__all__ = ["StationCount", "StationGap", "PvtComparison"]
