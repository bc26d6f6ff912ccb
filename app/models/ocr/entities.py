"""OCR tally entities - extracted vote tallies and their cross-validation."""

from dataclasses import dataclass, field
from enum import StrEnum

from app.models.common import Alert, BaseEntity


class DocumentType(StrEnum):
    SS5_11 = "ss5_11"  # tally board
    SS5_18 = "ss5_18"  # official result form


@dataclass(frozen=True)
class CandidateVote(BaseEntity):
    """One candidate line of a tally. confidence is the OCR score, 0-100."""

    candidate_number: int
    candidate_name: str
    vote_count: int
    confidence: float = 100.0


@dataclass(frozen=True)
class VoteTally(BaseEntity):
    """One OCR extraction or official submission for a station."""

    station_code: str
    province: str
    constituency: str
    document_type: DocumentType
    votes: list[CandidateVote] = field(default_factory=list)
    total_voters: int | None = None
    total_ballots: int | None = None
    spoiled_ballots: int | None = None

    def counts_by_number(self) -> dict[int, int]:
        return {v.candidate_number: v.vote_count for v in self.votes}


@dataclass(frozen=True)
class CandidateMismatch(BaseEntity):
    candidate_number: int
    candidate_name: str
    count_a: int
    count_b: int


@dataclass(frozen=True)
class CrossValidationResult(BaseEntity):
    """Comparison of two tallies of the same station."""

    station_code: str
    discrepancy: float
    is_valid: bool
    overall_confidence: float
    mismatches: list[CandidateMismatch] = field(default_factory=list)
    alert: Alert | None = None


@dataclass(frozen=True)
class TallyCheck(BaseEntity):
    """Internal consistency of a single tally's totals."""

    station_code: str
    valid_votes: int | None
    vote_sum: int
    is_consistent: bool
    turnout: float | None
    leading_share: float | None
    issues: list[str] = field(default_factory=list)
