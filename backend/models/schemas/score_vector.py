"""Per-candidate criterion sub-scores, the input rows of the decision matrix."""

from pydantic import BaseModel, Field

CRITERIA = ("education", "experience", "field_match", "language", "location")


class ScoreVector(BaseModel):
    """Five independently computed sub-scores, each in [0, 1].

    Not to be mixed with the unbounded compatibility bonus space.
    """
    education: float = Field(0.0, ge=0.0, le=1.0)
    experience: float = Field(0.0, ge=0.0, le=1.0)
    field_match: float = Field(0.0, ge=0.0, le=1.0)
    language: float = Field(0.0, ge=0.0, le=1.0)
    location: float = Field(0.0, ge=0.0, le=1.0)

    def as_list(self) -> list[float]:
        return [getattr(self, name) for name in CRITERIA]
