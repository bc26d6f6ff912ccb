"""OCR API views - thin layer over services."""

from app.container import container
from app.models.ocr import CandidateVote, VoteTally
from app.services.ocr import CrossValidator, check_tally
from web.api.errors import parse_request

from .schemas import CrossValidationRequest, CrossValidationResponse, TallyCheckResponse, VoteTallyIn


def _tally(data: VoteTallyIn) -> VoteTally:
    return VoteTally(
        station_code=data.station_code,
        province=data.province,
        constituency=data.constituency,
        document_type=data.document_type,
        votes=[CandidateVote(**v.model_dump()) for v in data.votes],
        total_voters=data.total_voters,
        total_ballots=data.total_ballots,
        spoiled_ballots=data.spoiled_ballots,
    )


def cross_validate(payload: dict) -> CrossValidationResponse:
    """Compare two tallies of one station.

    same_document compares two providers' reads of one form instead of the
    tally board against the result form.
    """
    container.init()
    request = parse_request(CrossValidationRequest, payload)
    validator = container.cross_validator
    if request.same_document:
        validator = CrossValidator.for_providers(request.tally_a.document_type, policy=container.policy)

    result = validator.validate(_tally(request.tally_a), _tally(request.tally_b))
    return CrossValidationResponse(**result.to_dict())


def get_tally_check(payload: dict) -> TallyCheckResponse:
    """Internal consistency of one tally."""
    request = parse_request(VoteTallyIn, payload)
    return TallyCheckResponse(**check_tally(_tally(request)).to_dict())
