from typing import Any

from pydantic import BaseModel, Field


class RankRequest(BaseModel):
    vacancy: dict[str, Any] = Field(..., description="Vacancy attributes as stored")
    candidates: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Applicant records already enriched with workExperiences and languages",
    )
    weights: dict[str, float] | None = Field(
        None, description="Overrides the vacancy's topsisWeights (educationWeight, ...)"
    )
    normalize_weights: bool = Field(False, description="Scale weights to sum to 1 before ranking")


class CompatibilityRequest(BaseModel):
    vacancy: dict[str, Any] = Field(..., description="Vacancy attributes as stored")
    candidate: dict[str, Any] = Field(..., description="Job seeker attributes as stored")
    distance_km: float | None = Field(None, ge=0, description="Seeker to job distance, if on-site")


class DiscoverRequest(BaseModel):
    seeker: dict[str, Any] = Field(..., description="Job seeker attributes as stored")
    vacancies: list[dict[str, Any]] = Field(default_factory=list, description="Active vacancies")
    excluding_ids: list[str] = Field(default_factory=list, description="Vacancies already swiped")
