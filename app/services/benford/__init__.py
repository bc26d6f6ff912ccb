from app.services.benford.analyzer import BenfordAnalyzer

__all__ = ["BenfordAnalyzer"]
