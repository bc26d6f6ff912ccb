"""GLUE-FIN composite fraud index.

    S = 100 * sigmoid(b0 + sum(w_k * z_k))

Each module signal z_k is normalized to [0, 1] before weighting. A station
with no signals at all still scores above zero: the bias and the neutral OCR
default keep it in the normal band.
"""

from collections import Counter
from collections.abc import Iterable, Sequence

import numpy as np
from loguru import logger

import settings
from app.errors import InsufficientDataError
from app.models.composite import (
    BatchScores,
    BatchSummary,
    GlueFinComponent,
    GlueFinInput,
    GlueFinResult,
    GlueFinWeights,
    RiskLevel,
    StationInput,
    StationScore,
)
from helpers import formulas

BIAS = -2.0
NEUTRAL_OCR = 0.5
KLIMEK_MAX = 0.2  # alpha + beta
FRAUD_ZONE_MAX = 20.0  # percent
PVT_GAP_MAX = 5.0  # percent

# Upper score bound per level
LEVEL_BOUNDS = (
    (20.0, RiskLevel.NORMAL),
    (40.0, RiskLevel.REVIEW),
    (60.0, RiskLevel.SUSPICIOUS),
    (80.0, RiskLevel.CRITICAL),
)

LEVEL_INFO = {
    RiskLevel.NORMAL: ("🟢", "Normal - no anomalous signals", "No further action"),
    RiskLevel.REVIEW: ("🟡", "Needs review - minor signals", "Check the source data"),
    RiskLevel.SUSPICIOUS: ("🟠", "Suspicious - several signals", "Investigate in depth"),
    RiskLevel.CRITICAL: ("🔴", "Highly suspicious - clear signals", "Report immediately"),
    RiskLevel.CRISIS: ("⚫", "Crisis - strong evidence", "Pursue legal action"),
}

HIGH_RISK_LEVELS = {RiskLevel.CRITICAL, RiskLevel.CRISIS}


def sigmoid(x: float) -> float:
    return float(1 / (1 + np.exp(-np.clip(x, -500, 500))))


def risk_level(score: float) -> RiskLevel:
    for bound, level in LEVEL_BOUNDS:
        if score <= bound:
            return level
    return RiskLevel.CRISIS


class GlueFinIndex:
    """Weighted sigmoid fusion of every detector's signal for one station."""

    def __init__(
        self,
        weights: GlueFinWeights | None = None,
        benford_critical: float = settings.BENFORD_CHI_SQUARE_CRITICAL,
    ):
        self.weights = weights or GlueFinWeights()
        self.benford_critical = benford_critical
        logger.debug("GlueFinIndex initialized (weights total={:.2f})", self.weights.total)

    def _components(self, data: GlueFinInput) -> list[GlueFinComponent]:
        w = self.weights

        z_ocr = formulas.normalize(data.ocr_confidence, 100) if data.ocr_confidence is not None else NEUTRAL_OCR

        if data.klimek_alpha is not None or data.klimek_beta is not None:
            z_klimek = formulas.normalize((data.klimek_alpha or 0) + (data.klimek_beta or 0), KLIMEK_MAX)
            klimek_raw = data.klimek_alpha
        elif data.fraud_zone_percentage is not None:
            z_klimek = formulas.normalize(data.fraud_zone_percentage, FRAUD_ZONE_MAX)
            klimek_raw = data.fraud_zone_percentage
        else:
            z_klimek, klimek_raw = 0.0, None

        z_benford = (
            formulas.normalize(data.benford_chi_square, self.benford_critical)
            if data.benford_chi_square is not None
            else 0.0
        )
        z_pvt = formulas.normalize(data.pvt_gap_percentage, PVT_GAP_MAX) if data.pvt_gap_percentage is not None else 0.0
        z_sna = formulas.normalize(data.sna_centrality, 1) if data.sna_centrality is not None else 0.0

        rows = [
            ("OCR Confidence", data.ocr_confidence, z_ocr, w.ocr),
            ("Klimek Model", klimek_raw, z_klimek, w.klimek),
            ("Benford's Law", data.benford_chi_square, z_benford, w.benford),
            ("PVT Gap", data.pvt_gap_percentage, z_pvt, w.pvt),
            ("SNA Centrality", data.sna_centrality, z_sna, w.sna),
        ]
        return [
            GlueFinComponent(name=name, raw_value=raw, normalized_value=z, weight=weight, contribution=weight * z)
            for name, raw, z, weight in rows
        ]

    def calculate(self, data: GlueFinInput) -> GlueFinResult:
        components = self._components(data)
        weighted_sum = sum(c.contribution for c in components)
        score = round(100 * sigmoid(BIAS + weighted_sum), 1)
        level = risk_level(score)
        emoji, description, recommendation = LEVEL_INFO[level]

        terms = " + ".join(f"{c.weight}×{c.normalized_value:.2f}" for c in components)
        return GlueFinResult(
            score=score,
            level=level,
            level_emoji=emoji,
            level_description=description,
            recommendation=recommendation,
            components=components,
            formula=f"S = 100 × σ({BIAS:g} + {terms}) = {score}",
        )

    def score_stations(self, stations: Sequence[StationInput]) -> BatchScores:
        """GLUE-FIN for every station plus a per-level summary."""
        if not stations:
            raise InsufficientDataError("No stations to score")

        scored = [
            StationScore(station_id=s.station_id, result=self.calculate(s.input), station_name=s.station_name)
            for s in stations
        ]

        levels = Counter(s.result.level for s in scored)
        summary = BatchSummary(
            total=len(scored),
            by_level={level: levels.get(level, 0) for level in RiskLevel},
            average_score=round(sum(s.result.score for s in scored) / len(scored), 1),
            high_risk_stations=[s.station_id for s in scored if s.result.level in HIGH_RISK_LEVELS],
        )
        logger.info(
            "GLUE-FIN: {} stations, average {:.1f}, {} high risk",
            summary.total,
            summary.average_score,
            len(summary.high_risk_stations),
        )
        return BatchScores(stations=scored, summary=summary)


def fraud_probability(probabilities: Iterable[float]) -> float:
    """P = 1 - prod(1 - p_i) over probabilities in [0, 1]."""
    return formulas.fuse_probabilities(probabilities)
