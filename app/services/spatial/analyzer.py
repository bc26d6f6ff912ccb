"""Spatial neighbor z-score analysis.

Nearby units should behave alike. A unit that departs sharply from its own
neighborhood (not from the global mean) is the signal.
"""

from collections import Counter
from collections.abc import Sequence

from loguru import logger

import settings
from app.errors import ValidationError
from app.models.common import AnomalyVerdict, Detector
from app.models.spatial import SpatialResult, SpatialScore, SpatialStatus, SpatialUnit
from app.services.alerts.severity import DEFAULT_POLICY, SeverityPolicy
from app.services.spatial.neighbors import NeighborResolver
from helpers import formulas

MIN_NEIGHBORS = 2


class SpatialAnalyzer:
    """Score each unit against the mean and spread of its neighbors."""

    def __init__(
        self,
        z_threshold: float = settings.SPATIAL_Z_THRESHOLD,
        policy: SeverityPolicy = DEFAULT_POLICY,
    ):
        self.z_threshold = z_threshold
        self._policy = policy
        logger.debug("SpatialAnalyzer initialized (z_threshold={})", z_threshold)

    def analyze(self, units: Sequence[SpatialUnit], resolver: NeighborResolver) -> SpatialResult:
        duplicates = [uid for uid, n in Counter(u.id for u in units).items() if n > 1]
        if duplicates:
            raise ValidationError(f"Duplicate unit ids: {', '.join(sorted(duplicates))}")

        scores = [self.score_unit(unit, resolver(unit, units)) for unit in units]
        result = SpatialResult(scores=scores, z_threshold=self.z_threshold)

        logger.info(
            "Spatial: {} units, {} suspicious, {} unscored",
            len(scores),
            len(result.suspicious),
            len(result.unscored),
        )
        return result

    def score_unit(self, unit: SpatialUnit, neighbors: Sequence[SpatialUnit]) -> SpatialScore:
        values = [n.metric_value for n in neighbors if n.id != unit.id]

        if len(values) < MIN_NEIGHBORS:
            return SpatialScore(
                unit_id=unit.id,
                value=unit.metric_value,
                neighbor_count=len(values),
                neighbor_mean=None,
                neighbor_std=None,
                z_score=None,
                status=SpatialStatus.INSUFFICIENT_DATA,
                is_suspicious=False,
            )

        mean, std = formulas.mean_std(values)
        if min(values) == max(values):
            return SpatialScore(
                unit_id=unit.id,
                value=unit.metric_value,
                neighbor_count=len(values),
                neighbor_mean=mean,
                neighbor_std=0.0,
                z_score=None,
                status=SpatialStatus.ZERO_VARIANCE,
                is_suspicious=False,
            )

        z = (unit.metric_value - mean) / std
        return SpatialScore(
            unit_id=unit.id,
            value=unit.metric_value,
            neighbor_count=len(values),
            neighbor_mean=mean,
            neighbor_std=std,
            z_score=z,
            status=SpatialStatus.SCORED,
            is_suspicious=abs(z) > self.z_threshold,
        )

    def verdicts(self, result: SpatialResult) -> list[AnomalyVerdict]:
        """One verdict per suspicious unit."""
        return [
            AnomalyVerdict(
                detector=Detector.SPATIAL,
                alert_type="spatial_anomaly",
                score=s.z_score,
                is_suspicious=True,
                severity=self._policy.spatial(s.z_score),
                summary=(
                    f"Spatial anomaly detected at {s.unit_id}: Z-score={s.z_score:.2f} "
                    f"(value={s.value:g}, neighbor mean={s.neighbor_mean:.2f}, n={s.neighbor_count})"
                ),
                subject=s.unit_id,
                details={"neighbor_mean": s.neighbor_mean, "neighbor_std": s.neighbor_std},
            )
            for s in result.suspicious
        ]
