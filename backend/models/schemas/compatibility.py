"""Compatibility scorer output: the coarse discovery score and its audit trail."""

from pydantic import BaseModel, Field


class ScoreAdjustment(BaseModel):
    """A single bonus or penalty applied to the running compatibility total."""
    criterion: str
    reason: str
    points: float

    def __str__(self) -> str:
        sign = "+" if self.points >= 0 else ""
        return f"[{self.criterion}] {self.reason} ({sign}{self.points:.1f})"


class CompatibilityResult(BaseModel):
    """Unbounded, non-negative score for a (vacancy, seeker) pair.

    disqualified forces score to 0. missing_essential means the deferred
    -40 penalty was applied.
    """
    score: float = Field(0.0, ge=0.0)
    disqualified: bool = False
    missing_essential: bool = False
    adjustments: list[ScoreAdjustment] = []


class DiscoveredVacancy(BaseModel):
    """A vacancy that passed discovery filtering, in display order."""
    vacancy_id: str
    score: float = 0.0
    tier: str = "other"  # perfect | field | other
    distance_km: float | None = None
    remote: bool = False
