from app.services.klimek.analyzer import KlimekAnalyzer

__all__ = ["KlimekAnalyzer"]
