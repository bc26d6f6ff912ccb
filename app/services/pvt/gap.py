"""Parallel vote tabulation gaps: crowd-sourced counts against official ones."""

from collections.abc import Iterable

from loguru import logger

import settings
from app.errors import InsufficientDataError
from app.models.common import AnomalyVerdict, Detector
from app.models.pvt import PvtComparison, StationCount, StationGap
from app.services.alerts.severity import DEFAULT_POLICY, SeverityPolicy


class PvtGapAnalyzer:
    def __init__(
        self,
        gap_votes: int = settings.PVT_GAP_VOTES,
        total_gap_percent: float = settings.PVT_TOTAL_GAP_PERCENT,
        policy: SeverityPolicy = DEFAULT_POLICY,
    ):
        self.gap_votes = gap_votes
        self.total_gap_percent = total_gap_percent
        self._policy = policy
        logger.debug("PvtGapAnalyzer initialized (gap_votes={})", gap_votes)

    def station_gap(self, count: StationCount) -> StationGap:
        gap = abs(count.crowdsourced - count.official)
        gap_ratio = gap / count.official if count.official else None
        return StationGap(
            station_code=count.station_code,
            crowdsourced=count.crowdsourced,
            official=count.official,
            gap=gap,
            gap_ratio=gap_ratio,
            has_gap=gap > self.gap_votes,
            severity=self._policy.pvt_gap(gap_ratio),
        )

    def check_gaps(self, counts: Iterable[StationCount]) -> list[StationGap]:
        """Stations whose gap exceeds the vote threshold, largest first."""
        gaps = [g for g in (self.station_gap(c) for c in counts) if g.has_gap]
        gaps.sort(key=lambda g: g.gap, reverse=True)
        if gaps:
            logger.info("PVT: {} stations with gap > {} votes", len(gaps), self.gap_votes)
        return gaps

    def compare_totals(self, official: Iterable[int], crowdsourced: Iterable[int]) -> PvtComparison:
        """Aggregate comparison of official and crowd-sourced totals."""
        official = list(official)
        crowdsourced = list(crowdsourced)
        official_total = sum(official)
        if not official_total:
            raise InsufficientDataError("No official votes to compare against")

        crowdsourced_total = sum(crowdsourced)
        gap = abs(official_total - crowdsourced_total)
        gap_percent = gap * 100 / official_total

        logger.info("PVT totals: official={}, crowdsourced={}, gap={:.2f}%", official_total, crowdsourced_total, gap_percent)
        return PvtComparison(
            official_total=official_total,
            crowdsourced_total=crowdsourced_total,
            gap=gap,
            gap_percent=gap_percent,
            is_suspicious=gap_percent > self.total_gap_percent,
            official_count=len(official),
            crowdsourced_count=len(crowdsourced),
        )

    def verdict(self, gap: StationGap) -> AnomalyVerdict:
        ratio = f"{gap.gap_ratio:.2%}" if gap.gap_ratio is not None else "n/a"
        return AnomalyVerdict(
            detector=Detector.PVT_GAP,
            alert_type="pvt_gap",
            score=gap.gap_ratio if gap.gap_ratio is not None else float(gap.gap),
            is_suspicious=gap.has_gap,
            severity=gap.severity,
            summary=(
                f"Gap Alert: {gap.station_code} - Our: {gap.crowdsourced}, "
                f"Their: {gap.official}, Gap: {gap.gap} ({ratio})"
            ),
            subject=gap.station_code,
            details={"gap": gap.gap},
        )
