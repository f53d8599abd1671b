"""Pydantic contracts shared by the discovery scorer and the ranking engine."""

from models.schemas.levels import EducationLevel, Proficiency
from models.schemas.vacancy import CriterionWeights, JobRequirement, RequiredLanguage
from models.schemas.candidate import CandidateProfile, PreferredField, SpokenLanguage, WorkExperience
from models.schemas.score_vector import CRITERIA, ScoreVector
from models.schemas.compatibility import CompatibilityResult, DiscoveredVacancy, ScoreAdjustment
from models.schemas.ranked_candidate import RankedCandidate
from models.schemas.verdict import RankingVerdict

__all__ = [
    "EducationLevel",
    "Proficiency",
    "CriterionWeights",
    "JobRequirement",
    "RequiredLanguage",
    "CandidateProfile",
    "PreferredField",
    "SpokenLanguage",
    "WorkExperience",
    "CRITERIA",
    "ScoreVector",
    "CompatibilityResult",
    "DiscoveredVacancy",
    "ScoreAdjustment",
    "RankedCandidate",
    "RankingVerdict",
]
