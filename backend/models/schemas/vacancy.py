"""Vacancy side of a match: the job requirement and the employer's criterion weights."""

import numpy as np
from pydantic import BaseModel, Field

from models.schemas.levels import EducationLevel, Proficiency


class CriterionWeights(BaseModel):
    """Employer importance weights, one per criterion.

    Weights are used as supplied and need not sum to 1. Call normalized()
    before ranking if a weighted average is wanted.
    """
    education: float = Field(0.2, ge=0.0, alias="educationWeight")
    experience: float = Field(0.2, ge=0.0, alias="experienceWeight")
    field_match: float = Field(0.2, ge=0.0, alias="fieldMatchWeight")
    language: float = Field(0.2, ge=0.0, alias="skillsWeight")
    location: float = Field(0.2, ge=0.0, alias="locationWeight")

    model_config = {"populate_by_name": True}

    def as_vector(self) -> np.ndarray:
        return np.array(
            [self.education, self.experience, self.field_match, self.language, self.location],
            dtype=float,
        )

    def normalized(self) -> "CriterionWeights":
        total = float(self.as_vector().sum())
        if total <= 0:
            return self.model_copy()
        return CriterionWeights(
            education=self.education / total,
            experience=self.experience / total,
            field_match=self.field_match / total,
            language=self.language / total,
            location=self.location / total,
        )


class RequiredLanguage(BaseModel):
    """A language the vacancy requires, with the minimum accepted level."""
    name: str = ""
    proficiency: Proficiency = Proficiency.A1


class JobRequirement(BaseModel):
    """Minimal vacancy record the scorers need."""
    id: str = ""
    job_title: str = ""
    job_type: str = ""

    required_education_level: EducationLevel = EducationLevel.NO_EDUCATION
    education_field: str = ""
    education_specialization: str = ""
    required_experience_years: float = 0.0
    requires_driver_license: bool = False

    job_field: str = ""
    job_specialization: str = ""
    required_languages: list[RequiredLanguage] = []

    city: str = ""
    country: str = ""
    latitude: float | None = None
    longitude: float | None = None
    city_place_id: str = ""
    country_place_id: str = ""

    weights: CriterionWeights = CriterionWeights()

    def is_remote(self, remote_job_type: str = "Remote") -> bool:
        return self.job_type == remote_job_type

    @property
    def coordinates(self) -> tuple[float, float] | None:
        if self.latitude is None or self.longitude is None:
            return None
        return (self.latitude, self.longitude)
