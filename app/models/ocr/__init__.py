"""OCR tally domain."""

from app.models.ocr.entities import (
    CandidateMismatch,
    CandidateVote,
    CrossValidationResult,
    DocumentType,
    TallyCheck,
    VoteTally,
)

__all__ = [
    "DocumentType",
    "CandidateVote",
    "VoteTally",
    "CandidateMismatch",
    "CrossValidationResult",
    "TallyCheck",
]
