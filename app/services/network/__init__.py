from app.services.network.analyzer import NetworkAnalyzer

__all__ = ["NetworkAnalyzer"]
