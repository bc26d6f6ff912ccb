"""Tests for the GLUE-FIN composite index."""

import pytest

from app.errors import InsufficientDataError
from app.models.composite import GlueFinInput, GlueFinWeights, RiskLevel, StationInput
from app.services.composite import GlueFinIndex, fraud_probability, risk_level

CLEAN = GlueFinInput(
    ocr_confidence=95,
    klimek_alpha=0.01,
    klimek_beta=0.01,
    benford_chi_square=5.07,
    pvt_gap_percentage=0.25,
    sna_centrality=0.15,
)

MAXED = GlueFinInput(
    ocr_confidence=100,
    klimek_alpha=0.10,
    klimek_beta=0.10,
    benford_chi_square=16.92,
    pvt_gap_percentage=5,
    sna_centrality=1.0,
)

HEAVY = GlueFinWeights(ocr=1.0, klimek=2.0, benford=2.0, pvt=2.0, sna=1.0)


@pytest.fixture
def index():
    return GlueFinIndex()


class TestCalculate:
    def test_clean_station(self, index):
        result = index.calculate(CLEAN)
        assert result.level == RiskLevel.NORMAL
        assert result.score < 20
        assert result.level_emoji == "🟢"

    def test_more_signal_scores_higher(self, index):
        risky = GlueFinInput(
            ocr_confidence=50,
            klimek_alpha=0.15,
            klimek_beta=0.08,
            benford_chi_square=25,
            pvt_gap_percentage=8,
            sna_centrality=0.9,
        )
        assert index.calculate(risky).score > 20
        assert index.calculate(risky).score > index.calculate(CLEAN).score

    def test_missing_values(self, index):
        result = index.calculate(GlueFinInput(ocr_confidence=90))
        assert 0 <= result.score <= 100
        assert len(result.components) == 5

    def test_neutral_ocr_default(self, index):
        ocr = index.calculate(GlueFinInput()).components[0]
        assert ocr.raw_value is None
        assert ocr.normalized_value == 0.5

    def test_fraud_zone_fallback(self, index):
        klimek = index.calculate(GlueFinInput(fraud_zone_percentage=10)).components[1]
        assert klimek.normalized_value == 0.5
        assert klimek.raw_value == 10

    def test_custom_weights(self, index):
        data = GlueFinInput(klimek_alpha=0.20, klimek_beta=0.10)
        custom = GlueFinIndex(GlueFinWeights(ocr=0.05, klimek=0.60, benford=0.15, pvt=0.15, sna=0.05))
        assert custom.calculate(data).score > index.calculate(data).score

    def test_formula(self, index):
        result = index.calculate(GlueFinInput(ocr_confidence=80, klimek_alpha=0.05))
        assert "S = 100 × σ" in result.formula
        assert str(result.score) in result.formula

    def test_maxed_components(self, index):
        result = index.calculate(MAXED)
        for component in result.components:
            assert component.normalized_value == 1
            assert component.contribution == component.weight * component.normalized_value

    def test_score_rounded(self, index):
        score = index.calculate(CLEAN).score
        assert round(score, 1) == score


class TestLevels:
    @pytest.mark.parametrize(
        ("score", "level"),
        [
            (0, RiskLevel.NORMAL),
            (20, RiskLevel.NORMAL),
            (20.1, RiskLevel.REVIEW),
            (60, RiskLevel.SUSPICIOUS),
            (80, RiskLevel.CRITICAL),
            (80.1, RiskLevel.CRISIS),
        ],
    )
    def test_bounds(self, score, level):
        assert risk_level(score) == level

    def test_heavy_weights_reach_crisis(self):
        result = GlueFinIndex(HEAVY).calculate(MAXED)
        assert result.level == RiskLevel.CRISIS
        assert result.level_emoji == "⚫"


class TestScoreStations:
    def test_summary(self):
        stations = [
            StationInput("S-1", CLEAN, "School 1"),
            StationInput("S-2", MAXED),
        ]
        batch = GlueFinIndex(HEAVY).score_stations(stations)
        assert batch.summary.total == 2
        assert sum(batch.summary.by_level.values()) == 2
        assert batch.summary.high_risk_stations == ["S-2"]
        assert batch.stations[0].station_name == "School 1"

    def test_average(self, index):
        batch = index.score_stations([StationInput("A", CLEAN), StationInput("B", CLEAN)])
        assert batch.summary.average_score == index.calculate(CLEAN).score

    def test_empty(self, index):
        with pytest.raises(InsufficientDataError):
            index.score_stations([])

    def test_to_dict_levels_are_plain(self, index):
        data = index.score_stations([StationInput("A", CLEAN)]).summary.to_dict()
        assert data["by_level"]["normal"] == 1


class TestFraudProbability:
    def test_empty(self):
        assert fraud_probability([]) == 0

    def test_single(self):
        assert fraud_probability([0.3]) == pytest.approx(0.3)

    def test_many_low(self):
        assert fraud_probability([0.1] * 5) == pytest.approx(0.41, abs=0.01)
