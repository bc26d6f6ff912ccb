"""Second-digit Benford's law test for vote counts."""

from collections.abc import Iterable

from loguru import logger
from scipy.stats import chi2

import settings
from app.errors import InsufficientDataError
from app.models.benford import BenfordResult
from app.models.common import AnomalyVerdict, Detector
from app.services.alerts.severity import DEFAULT_POLICY, SeverityPolicy
from helpers import formulas

DEGREES_OF_FREEDOM = 9


class BenfordAnalyzer:
    """Chi-square of observed second digits against the Benford distribution."""

    def __init__(
        self,
        chi_square_critical: float = settings.BENFORD_CHI_SQUARE_CRITICAL,
        policy: SeverityPolicy = DEFAULT_POLICY,
    ):
        self.chi_square_critical = chi_square_critical
        self._policy = policy
        logger.debug("BenfordAnalyzer initialized (critical={})", chi_square_critical)

    def analyze(self, votes: Iterable[int]) -> BenfordResult:
        """Counts below 10 carry no second digit and are left out."""
        counts = formulas.second_digit_counts(votes)
        total = sum(counts)
        if not total:
            raise InsufficientDataError("No vote counts with at least two digits")

        expected = list(formulas.BENFORD_SECOND_DIGIT)
        stat = formulas.chi_square(counts, expected)
        p_value = float(chi2.sf(stat, DEGREES_OF_FREEDOM))

        logger.info("Benford: chi2={:.2f}, p={:.3g} over {} counts", stat, p_value, total)
        return BenfordResult(
            observed_counts=counts,
            observed_freq=[c / total for c in counts],
            expected_freq=expected,
            chi_square=stat,
            p_value=p_value,
            total=total,
            is_suspicious=stat > self.chi_square_critical,
        )

    def verdict(self, result: BenfordResult) -> AnomalyVerdict:
        if result.is_suspicious:
            summary = f"Benford's Law violation detected: Chi-square={result.chi_square:.2f}"
        else:
            summary = f"Second digits consistent with Benford's Law: Chi-square={result.chi_square:.2f}"

        return AnomalyVerdict(
            detector=Detector.BENFORD,
            alert_type="benford_violation",
            score=result.chi_square,
            is_suspicious=result.is_suspicious,
            severity=self._policy.benford(result.is_suspicious, result.p_value),
            summary=f"{summary} (p={result.p_value:.3g}, n={result.total})",
            details={"p_value": result.p_value, "observed_counts": result.observed_counts},
        )
