from app.services.pvt.gap import PvtGapAnalyzer

__all__ = ["PvtGapAnalyzer"]
