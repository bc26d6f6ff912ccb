"""Services package - analyzer exports."""

from app.services.alerts import AlertAggregator, SeverityPolicy
from app.services.benford import BenfordAnalyzer
from app.services.composite import GlueFinIndex
from app.services.klimek import KlimekAnalyzer
from app.services.network import NetworkAnalyzer
from app.services.ocr import CrossValidator
from app.services.pvt import PvtGapAnalyzer
from app.services.spatial import SpatialAnalyzer

__all__ = [
    "AlertAggregator",
    "SeverityPolicy",
    "BenfordAnalyzer",
    "GlueFinIndex",
    "KlimekAnalyzer",
    "NetworkAnalyzer",
    "CrossValidator",
    "PvtGapAnalyzer",
    "SpatialAnalyzer",
]
