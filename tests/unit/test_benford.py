"""Tests for the second-digit Benford analyzer."""

import pytest

from app.errors import InsufficientDataError
from app.models.common import Severity
from app.services.benford import BenfordAnalyzer
from helpers.formulas import BENFORD_SECOND_DIGIT


@pytest.fixture
def analyzer():
    return BenfordAnalyzer()


def benford_shaped():
    """1000 values whose second digits follow the Benford proportions."""
    values = []
    for digit, freq in enumerate(BENFORD_SECOND_DIGIT):
        values += [10 + digit] * round(freq * 1000)
    return values


class TestAnalyze:
    def test_identical_second_digit(self, analyzer):
        result = analyzer.analyze([110] * 100)
        assert result.observed_counts[1] == 100
        assert result.chi_square > 16.92
        assert result.is_suspicious

    def test_benford_shaped_passes(self, analyzer):
        result = analyzer.analyze(benford_shaped())
        assert result.total == 1000
        assert result.chi_square < 1
        assert result.p_value > 0.05
        assert not result.is_suspicious

    def test_single_digits_excluded(self, analyzer):
        result = analyzer.analyze([3, 7, 110, 9])
        assert result.total == 1

    def test_negatives_use_absolute_value(self, analyzer):
        result = analyzer.analyze([-110, 110])
        assert result.observed_counts[1] == 2

    def test_no_usable_values(self, analyzer):
        with pytest.raises(InsufficientDataError):
            analyzer.analyze([1, 2, 3])

    def test_empty(self, analyzer):
        with pytest.raises(InsufficientDataError):
            analyzer.analyze([])


class TestDetail:
    def test_frequencies_sum_to_one(self, analyzer):
        result = analyzer.analyze(benford_shaped())
        assert sum(result.observed_freq) == pytest.approx(1.0)
        assert result.expected_freq == list(BENFORD_SECOND_DIGIT)

    def test_deviations(self, analyzer):
        result = analyzer.analyze([110] * 10)
        deviation = result.deviations[1]
        assert deviation.digit == 1
        assert deviation.deviation == pytest.approx(1.0 - 0.1139)
        assert len(result.deviations) == 10


class TestVerdict:
    def test_extreme_is_critical(self, analyzer):
        verdict = analyzer.verdict(analyzer.analyze([110] * 100))
        assert verdict.alert_type == "benford_violation"
        assert verdict.severity == Severity.CRITICAL
        assert verdict.summary.startswith("Benford's Law violation detected: Chi-square=")

    def test_mild_violation_is_medium(self):
        analyzer = BenfordAnalyzer(chi_square_critical=0.5)
        verdict = analyzer.verdict(analyzer.analyze(benford_shaped() + [11] * 20))
        assert verdict.is_suspicious
        assert verdict.severity == Severity.MEDIUM

    def test_clean_is_low(self, analyzer):
        verdict = analyzer.verdict(analyzer.analyze(benford_shaped()))
        assert not verdict.is_suspicious
        assert verdict.severity == Severity.LOW
