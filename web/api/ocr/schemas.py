"""OCR API request and response schemas."""

from pydantic import BaseModel, Field

from app.models.ocr import DocumentType


class CandidateVoteIn(BaseModel):
    candidate_number: int = Field(ge=1)
    candidate_name: str = ""
    vote_count: int = Field(ge=0)
    confidence: float = Field(default=100.0, ge=0, le=100)


class VoteTallyIn(BaseModel):
    """One extracted tally."""

    station_code: str = Field(min_length=1)
    province: str = ""
    constituency: str = ""
    document_type: DocumentType
    votes: list[CandidateVoteIn] = Field(default_factory=list)
    total_voters: int | None = Field(default=None, ge=0)
    total_ballots: int | None = Field(default=None, ge=0)
    spoiled_ballots: int | None = Field(default=None, ge=0)


class CrossValidationRequest(BaseModel):
    tally_a: VoteTallyIn
    tally_b: VoteTallyIn
    same_document: bool = False


class MismatchItem(BaseModel):
    candidate_number: int
    candidate_name: str
    count_a: int
    count_b: int


class CrossValidationResponse(BaseModel):
    """Cross-validation verdict for one station."""

    station_code: str
    discrepancy: float
    is_valid: bool
    overall_confidence: float
    mismatches: list[MismatchItem]
    alert: dict | None = None


class TallyCheckResponse(BaseModel):
    station_code: str
    valid_votes: int | None
    vote_sum: int
    is_consistent: bool
    turnout: float | None
    leading_share: float | None
    issues: list[str]
