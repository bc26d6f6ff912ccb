"""Alert aggregator: turn alert-worthy verdicts into alert records."""

from collections.abc import Iterable

from loguru import logger

import settings
from app.models.common import Alert, AlertContext, AnomalyVerdict, Detector, Severity

# Detectors whose verdict subject is a station code
_STATION_SUBJECTS = {Detector.SPATIAL, Detector.CROSS_VALIDATION, Detector.PVT_GAP}

MAX_SUMMARY_LENGTH = 500


def _truncate(summary: str) -> str:
    if len(summary) <= MAX_SUMMARY_LENGTH:
        return summary
    return summary[: MAX_SUMMARY_LENGTH - 3] + "..."


class AlertAggregator:
    """Classify and format verdicts. Never sends or stores anything."""

    def __init__(self, min_severity: Severity | str = settings.ALERT_MIN_SEVERITY):
        self.min_severity = Severity(min_severity)
        logger.debug("AlertAggregator initialized (min_severity={})", self.min_severity)

    def should_alert(self, verdict: AnomalyVerdict) -> bool:
        return verdict.is_suspicious and verdict.severity.rank >= self.min_severity.rank

    def to_alert(self, verdict: AnomalyVerdict, context: AlertContext | None = None) -> Alert | None:
        """Alert record for one verdict, or None when it is below the alert floor."""
        if not self.should_alert(verdict):
            return None

        ctx = context or AlertContext()
        station_code = ctx.station_code
        if station_code is None and verdict.detector in _STATION_SUBJECTS:
            station_code = verdict.subject

        return Alert(
            alert_type=verdict.alert_type,
            detector=verdict.detector,
            severity=verdict.severity,
            summary=_truncate(verdict.summary),
            score=verdict.score,
            station_code=station_code,
            province=ctx.province,
            constituency=ctx.constituency,
        )

    def collect(self, verdicts: Iterable[AnomalyVerdict], context: AlertContext | None = None) -> list[Alert]:
        """Alerts for every qualifying verdict, most severe first."""
        alerts = [a for a in (self.to_alert(v, context) for v in verdicts) if a is not None]
        alerts.sort(key=lambda a: a.severity.rank, reverse=True)
        if alerts:
            logger.info("Raised {} alerts (highest: {})", len(alerts), alerts[0].severity)
        return alerts
