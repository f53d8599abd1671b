"""Candidate side of a match: a job seeker's profile with nested experience and languages."""

from datetime import datetime

from pydantic import BaseModel

from models.schemas.levels import EducationLevel, Proficiency


class WorkExperience(BaseModel):
    """A single work experience entry, duration already resolved to fractional years."""
    field: str = ""
    specialization: str = ""
    duration_years: float = 0.0
    is_current: bool = False
    position: str = ""
    company: str = ""


class PreferredField(BaseModel):
    """A preferred job field with the specializations chosen inside it."""
    field: str = ""
    specializations: list[str] = []


class SpokenLanguage(BaseModel):
    """A language the candidate speaks (canonical English name)."""
    name: str = ""
    proficiency: Proficiency = Proficiency.A1


class CandidateProfile(BaseModel):
    """Typed job-seeker record.

    An empty preferred_fields list means the seeker accepts any field.
    """
    id: str = ""
    first_name: str = ""
    last_name: str = ""

    education_level: EducationLevel = EducationLevel.NO_EDUCATION
    study_field: str = ""
    specialization: str = ""

    work_experience: list[WorkExperience] = []
    declared_experience_years: float | None = None  # profile-level total, if stored

    preferred_fields: list[PreferredField] = []
    languages: list[SpokenLanguage] = []

    city: str = ""
    country: str = ""
    latitude: float | None = None
    longitude: float | None = None
    country_place_id: str = ""
    acceptable_distance_km: float = 0.0

    has_driver_license: bool = False
    applied_at: datetime | None = None

    @property
    def experience_years(self) -> float:
        if self.declared_experience_years is not None:
            return self.declared_experience_years
        return sum(we.duration_years for we in self.work_experience)

    @property
    def all_fields_selected(self) -> bool:
        return not self.preferred_fields

    @property
    def preferred_field_names(self) -> list[str]:
        return [pf.field for pf in self.preferred_fields if pf.field]

    @property
    def preferred_specializations(self) -> list[str]:
        return [s for pf in self.preferred_fields for s in pf.specializations if s]

    @property
    def coordinates(self) -> tuple[float, float] | None:
        if self.latitude is None or self.longitude is None:
            return None
        return (self.latitude, self.longitude)

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
