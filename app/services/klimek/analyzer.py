"""Klimek turnout/vote-share model.

Klimek et al. (2012) observed that ballot stuffing pulls polling units into
the corner of high turnout and high winner share (alpha), and that vote
stealing couples the two (beta). Alpha is the share of units inside the
fraud zone; beta is the Pearson correlation in excess of a baseline.
"""

import math
from collections.abc import Sequence

from loguru import logger

import settings
from app.errors import InsufficientDataError
from app.models.common import AnomalyVerdict, Detector
from app.models.klimek import HeatmapCell, KlimekResult, UnitObservation
from app.services.alerts.severity import DEFAULT_POLICY, SeverityPolicy
from helpers import formulas


class KlimekAnalyzer:
    """Ballot-stuffing and vote-stealing indicators over a batch of units."""

    def __init__(
        self,
        fraud_zone: float = settings.KLIMEK_FRAUD_ZONE,
        correlation_baseline: float = settings.KLIMEK_CORRELATION_BASELINE,
        alpha_threshold: float = settings.KLIMEK_ALPHA_THRESHOLD,
        beta_threshold: float = settings.KLIMEK_BETA_THRESHOLD,
        heatmap_bins: int = settings.KLIMEK_HEATMAP_BINS,
        policy: SeverityPolicy = DEFAULT_POLICY,
    ):
        self.fraud_zone = fraud_zone
        self.correlation_baseline = correlation_baseline
        self.alpha_threshold = alpha_threshold
        self.beta_threshold = beta_threshold
        self.heatmap_bins = heatmap_bins
        self._policy = policy
        logger.debug("KlimekAnalyzer initialized (fraud_zone={})", fraud_zone)

    def analyze(self, observations: Sequence[UnitObservation]) -> KlimekResult:
        """Alpha, beta and heatmap for the batch."""
        if not observations:
            raise InsufficientDataError("Klimek model needs at least one polling unit")

        points = [
            (o.turnout, o.vote_share)
            for o in observations
            if math.isfinite(o.turnout) and math.isfinite(o.vote_share)
        ]
        skipped = len(observations) - len(points)
        if skipped:
            logger.warning("Skipped {} units with non-finite turnout or vote share", skipped)
        if not points:
            raise InsufficientDataError("Klimek model needs at least one unit with finite turnout and vote share")
        n = len(points)

        zone_count = formulas.fraud_zone_count(points, self.fraud_zone)
        alpha = zone_count / n

        correlation = formulas.pearson([p[0] for p in points], [p[1] for p in points])
        if correlation is None:
            # Constant turnout or vote share: no evidence of coupling either way
            logger.warning("Correlation undefined for {} units (constant turnout or vote share)", n)
            beta = 0.0
        else:
            beta = max(0.0, correlation - self.correlation_baseline)

        ballot_stuffing = alpha > self.alpha_threshold
        vote_stealing = beta > self.beta_threshold

        logger.info("Klimek: alpha={:.4f}, beta={:.4f} over {} units", alpha, beta, n)
        return KlimekResult(
            alpha=alpha,
            beta=beta,
            correlation=correlation,
            fraud_zone_count=zone_count,
            total_units=n,
            ballot_stuffing=ballot_stuffing,
            vote_stealing=vote_stealing,
            is_suspicious=ballot_stuffing or vote_stealing,
            heatmap=self.heatmap(points),
        )

    def heatmap(self, points: Sequence[tuple[float, float]]) -> list[HeatmapCell]:
        """Occupied cells of the turnout x vote-share histogram."""
        bins = self.heatmap_bins
        grid = formulas.histogram_2d(points, bins)
        return [
            HeatmapCell(x=(bx + 0.5) / bins, y=(by + 0.5) / bins, value=count)
            for (bx, by), count in sorted(grid.items())
        ]

    @staticmethod
    def alert_type(result: KlimekResult) -> str:
        """Names every indicator that fired, or the model itself when none did."""
        indicators = (("ballot_stuffing", result.ballot_stuffing), ("vote_stealing", result.vote_stealing))
        fired = [name for name, hit in indicators if hit]
        return "_and_".join(fired) or "klimek_model"

    def verdict(self, result: KlimekResult) -> AnomalyVerdict:
        if result.is_suspicious:
            summary = f"Klimek model detected anomaly: Alpha={result.alpha:.4f}, Beta={result.beta:.4f}"
        else:
            summary = f"Klimek model within bounds: Alpha={result.alpha:.4f}, Beta={result.beta:.4f}"

        return AnomalyVerdict(
            detector=Detector.KLIMEK,
            alert_type=self.alert_type(result),
            score=result.alpha + result.beta,
            is_suspicious=result.is_suspicious,
            severity=self._policy.klimek(result.ballot_stuffing, result.vote_stealing),
            summary=f"{summary} across {result.total_units} units",
            details={
                "alpha": result.alpha,
                "beta": result.beta,
                "correlation": result.correlation,
                "fraud_zone_count": result.fraud_zone_count,
            },
        )
