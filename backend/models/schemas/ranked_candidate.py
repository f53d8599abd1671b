"""Ranking output: one applicant's position in the employer's list."""

from datetime import datetime

from pydantic import BaseModel

from models.schemas.score_vector import ScoreVector


def match_band(score: float) -> str:
    """Bucket an absolute score for display."""
    if score >= 0.8:
        return "strong"
    elif score >= 0.6:
        return "good"
    elif score >= 0.4:
        return "fair"
    return "weak"


class RankedCandidate(BaseModel):
    """A candidate with its sub-scores, TOPSIS closeness and absolute % match.

    topsis_score holds the absolute score when the pool has a single candidate.
    applied_at is only a tie-break, never an identity.
    """
    candidate_id: str
    display_name: str = ""
    rank: int = 0  # 1 = best
    scores: ScoreVector = ScoreVector()
    topsis_score: float = 0.0
    absolute_score: float = 0.0
    match_band: str = "weak"
    applied_at: datetime | None = None
