"""Internal consistency of a single tally's totals."""

from loguru import logger

from app.errors import InsufficientDataError
from app.models.klimek import UnitObservation
from app.models.ocr import TallyCheck, VoteTally


def check_tally(tally: VoteTally) -> TallyCheck:
    """Check valid votes, candidate sum, turnout and leading share of one tally."""
    issues = []
    vote_sum = sum(v.vote_count for v in tally.votes)

    valid_votes = None
    if tally.total_ballots is not None:
        valid_votes = tally.total_ballots - (tally.spoiled_ballots or 0)
        if valid_votes < 0:
            issues.append(f"spoiled ballots ({tally.spoiled_ballots}) exceed ballots cast ({tally.total_ballots})")
        elif vote_sum > valid_votes:
            issues.append(f"candidate votes ({vote_sum}) exceed valid votes ({valid_votes})")

    turnout = None
    if tally.total_voters and tally.total_ballots is not None:
        turnout = tally.total_ballots / tally.total_voters
        if turnout > 1:
            issues.append(f"ballots cast ({tally.total_ballots}) exceed registered voters ({tally.total_voters})")

    if any(v.vote_count < 0 for v in tally.votes):
        issues.append("negative vote count")

    denominator = valid_votes if valid_votes else vote_sum
    leading_share = None
    if tally.votes and denominator > 0:
        leading_share = max(v.vote_count for v in tally.votes) / denominator

    if issues:
        logger.warning("Tally {} inconsistent: {}", tally.station_code, "; ".join(issues))

    return TallyCheck(
        station_code=tally.station_code,
        valid_votes=valid_votes,
        vote_sum=vote_sum,
        is_consistent=not issues,
        turnout=turnout,
        leading_share=leading_share,
        issues=issues,
    )


def to_observation(tally: VoteTally) -> UnitObservation:
    """Turnout and leading vote share of a tally, for the Klimek model."""
    check = check_tally(tally)
    if check.turnout is None or check.leading_share is None:
        raise InsufficientDataError(f"Tally {tally.station_code} lacks voter or ballot totals")
    return UnitObservation(turnout=check.turnout, vote_share=check.leading_share)
