"""Common models - base classes, verdicts and alerts."""

from app.models.common.base import BaseEntity
from app.models.common.verdict import Alert, AlertContext, AnomalyVerdict, Detector, Severity

__all__ = [
    "BaseEntity",
    "Alert",
    "AlertContext",
    "AnomalyVerdict",
    "Detector",
    "Severity",
]
