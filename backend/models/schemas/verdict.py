"""Employer-facing explanation of a ranked candidate."""

from pydantic import BaseModel


class RankingVerdict(BaseModel):
    """Template-generated summary for one RankedCandidate (deterministic, no ML)."""
    candidate_id: str = ""
    summary: str = ""
    strengths: list[str] = []
    weaknesses: list[str] = []
