"""OCR cross-validation of two tallies for one station.

Candidates are matched by number only. OCR name extraction is unreliable,
so a differing name under the same number is not a mismatch.
"""

from collections import Counter
from collections.abc import Iterable

from loguru import logger

import settings
from app.errors import ValidationError
from app.models.common import Alert, AnomalyVerdict, Detector
from app.models.ocr import CandidateMismatch, CrossValidationResult, DocumentType, VoteTally
from app.services.alerts.severity import DEFAULT_POLICY, SeverityPolicy
from app.services.batch import BatchReport, run_isolated
from helpers import formulas

ALERT_TYPE = "ocr_mismatch"


def _check_unique_numbers(tally: VoteTally) -> None:
    duplicates = [n for n, c in Counter(v.candidate_number for v in tally.votes).items() if c > 1]
    if duplicates:
        raise ValidationError(f"Duplicate candidate numbers in {tally.station_code}: {sorted(duplicates)}")


class CrossValidator:
    """Compare a tally-board extraction against the official result form."""

    def __init__(
        self,
        tolerance: float = settings.CROSS_VALIDATION_TOLERANCE,
        expected_pair: tuple[DocumentType, DocumentType] = (DocumentType.SS5_11, DocumentType.SS5_18),
        policy: SeverityPolicy = DEFAULT_POLICY,
    ):
        self.tolerance = tolerance
        self.expected_pair = expected_pair
        self._policy = policy
        logger.debug("CrossValidator initialized (tolerance={}%, pair={})", tolerance, expected_pair)

    @classmethod
    def for_providers(cls, document_type: DocumentType = DocumentType.SS5_18, **kwargs) -> "CrossValidator":
        """Two OCR providers reading the same document."""
        return cls(expected_pair=(document_type, document_type), **kwargs)

    def validate(self, tally_a: VoteTally, tally_b: VoteTally) -> CrossValidationResult:
        if (tally_a.document_type, tally_b.document_type) != self.expected_pair:
            raise ValidationError("wrong document types")
        if not tally_a.votes or not tally_b.votes:
            raise ValidationError("missing vote data")
        _check_unique_numbers(tally_a)
        _check_unique_numbers(tally_b)

        if tally_a.station_code != tally_b.station_code:
            logger.warning("Comparing tallies of different stations: {} vs {}", tally_a.station_code, tally_b.station_code)

        counts_a = tally_a.counts_by_number()
        counts_b = tally_b.counts_by_number()
        discrepancy = formulas.tally_discrepancy(counts_a, counts_b)

        mismatches = [
            CandidateMismatch(
                candidate_number=v.candidate_number,
                candidate_name=v.candidate_name,
                count_a=v.vote_count,
                count_b=counts_b[v.candidate_number],
            )
            for v in tally_a.votes
            if v.candidate_number in counts_b and counts_b[v.candidate_number] != v.vote_count
        ]

        # First candidate stands in for whole-document confidence
        overall_confidence = (tally_a.votes[0].confidence + tally_b.votes[0].confidence) / 2

        is_valid = discrepancy <= self.tolerance
        alert = None if is_valid else self._alert(tally_a, discrepancy, mismatches)

        logger.info("Cross-validation {}: discrepancy={:.1f}%", tally_a.station_code, discrepancy)
        return CrossValidationResult(
            station_code=tally_a.station_code,
            discrepancy=discrepancy,
            is_valid=is_valid,
            overall_confidence=overall_confidence,
            mismatches=mismatches,
            alert=alert,
        )

    def validate_many(self, pairs: Iterable[tuple[VoteTally, VoteTally]]) -> BatchReport[CrossValidationResult]:
        """Validate each pair on its own, keyed by the first tally's station."""
        return run_isolated(pairs, lambda pair: self.validate(*pair), key=lambda pair: pair[0].station_code)

    def _alert(self, tally: VoteTally, discrepancy: float, mismatches: list[CandidateMismatch]) -> Alert:
        summary = f"Cross-validation discrepancy {discrepancy:.1f}% detected for {tally.station_code}. "
        summary += "".join(f"{m.candidate_name}: {m.count_a} vs {m.count_b}. " for m in mismatches)
        return Alert(
            alert_type=ALERT_TYPE,
            detector=Detector.CROSS_VALIDATION,
            severity=self._policy.cross_validation(discrepancy),
            summary=summary,
            score=discrepancy,
            station_code=tally.station_code,
            province=tally.province,
            constituency=tally.constituency,
        )

    def verdict(self, result: CrossValidationResult) -> AnomalyVerdict:
        summary = result.alert.summary if result.alert else (
            f"Tallies agree for {result.station_code}: discrepancy {result.discrepancy:.1f}%"
        )
        return AnomalyVerdict(
            detector=Detector.CROSS_VALIDATION,
            alert_type=ALERT_TYPE,
            score=result.discrepancy,
            is_suspicious=not result.is_valid,
            severity=self._policy.cross_validation(result.discrepancy),
            summary=summary,
            subject=result.station_code,
            details={"overall_confidence": result.overall_confidence, "mismatches": len(result.mismatches)},
        )
