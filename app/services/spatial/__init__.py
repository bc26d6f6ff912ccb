"""Spatial neighbor analysis."""

from app.services.spatial.analyzer import SpatialAnalyzer
from app.services.spatial.neighbors import NeighborResolver, adjacency, k_nearest, within_distance

__all__ = ["SpatialAnalyzer", "NeighborResolver", "within_distance", "k_nearest", "adjacency"]
