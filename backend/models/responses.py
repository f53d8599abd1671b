from pydantic import BaseModel

from models.schemas.compatibility import DiscoveredVacancy
from models.schemas.ranked_candidate import RankedCandidate
from models.schemas.verdict import RankingVerdict


class RankResponse(BaseModel):
    vacancy_id: str = ""
    ranked: list[RankedCandidate] = []
    ranked_ids: list[str] = []  # order to persist as rankedApplicants
    verdicts: list[RankingVerdict] = []


class DiscoverResponse(BaseModel):
    seeker_id: str = ""
    matches: list[DiscoveredVacancy] = []
