"""Severity tiers per detector.

One policy object maps every detector's raw statistic onto the shared
low/medium/high/critical scale. Analyzers use it to stamp verdicts, so the
tiers live in one place and can be tuned together.

    Detector          Trigger                  Severity
    Klimek            alpha or beta flagged    high
    Benford           chi2 > critical value    medium, critical when p < 1e-4
    Network           centrality > 0.7         high
    Spatial           |z| > 2.5                medium, > 4 critical
    Cross-validation  discrepancy > 5%         high, > 15% critical
    PVT gap           gap ratio > 5%           high, > 10% critical
"""

from dataclasses import dataclass

import settings
from app.models.common import Severity


@dataclass(frozen=True)
class SeverityPolicy:
    """Configurable severity thresholds."""

    benford_critical_p_value: float = settings.BENFORD_CRITICAL_P_VALUE
    network_alert_score: float = settings.NETWORK_ALERT_SCORE
    spatial_escalation: float = settings.SPATIAL_Z_ESCALATION
    spatial_critical: float = settings.SPATIAL_Z_CRITICAL
    cross_validation_tolerance: float = settings.CROSS_VALIDATION_TOLERANCE
    cross_validation_critical: float = settings.CROSS_VALIDATION_CRITICAL
    pvt_gap_high: float = settings.PVT_GAP_HIGH
    pvt_gap_critical: float = settings.PVT_GAP_CRITICAL

    def klimek(self, ballot_stuffing: bool, vote_stealing: bool) -> Severity:
        return Severity.HIGH if ballot_stuffing or vote_stealing else Severity.LOW

    def benford(self, is_suspicious: bool, p_value: float) -> Severity:
        if not is_suspicious:
            return Severity.LOW
        return Severity.CRITICAL if p_value < self.benford_critical_p_value else Severity.MEDIUM

    def network(self, centrality_score: float) -> Severity:
        return Severity.HIGH if centrality_score > self.network_alert_score else Severity.LOW

    def spatial(self, z_score: float) -> Severity:
        z = abs(z_score)
        if z > self.spatial_critical:
            return Severity.CRITICAL
        if z > self.spatial_escalation:
            return Severity.MEDIUM
        return Severity.LOW

    def cross_validation(self, discrepancy: float) -> Severity:
        if discrepancy > self.cross_validation_critical:
            return Severity.CRITICAL
        if discrepancy > self.cross_validation_tolerance:
            return Severity.HIGH
        return Severity.LOW

    def pvt_gap(self, gap_ratio: float | None) -> Severity:
        if gap_ratio is None:
            return Severity.MEDIUM
        if gap_ratio > self.pvt_gap_critical:
            return Severity.CRITICAL
        if gap_ratio > self.pvt_gap_high:
            return Severity.HIGH
        return Severity.MEDIUM


DEFAULT_POLICY = SeverityPolicy()
