"""Alert classification and formatting."""

from app.services.alerts.aggregator import AlertAggregator
from app.services.alerts.severity import DEFAULT_POLICY, SeverityPolicy

__all__ = ["AlertAggregator", "SeverityPolicy", "DEFAULT_POLICY"]
