"""Discovery ordering: which postings a seeker sees, and in what order.

Flow per vacancy:
    excluded id?                      -> skip
    remote?       same country place  -> score without distance
    on-site?      coordinates known, distance <= acceptable -> score with distance
    score >= minimum_match_score      -> bucket into perfect / field / other

Buckets are concatenated in that order, each sorted by score descending. Two
on-site postings whose scores are within score_tie_window of each other are
ordered by distance instead.
"""

import logging
from functools import cmp_to_key
from typing import Callable, Iterable

from config import settings
from models.schemas.candidate import CandidateProfile
from models.schemas.compatibility import DiscoveredVacancy
from models.schemas.vacancy import JobRequirement
from services.geo import great_circle_km
from services.pipeline.compatibility import score_compatibility

logger = logging.getLogger(__name__)

TIERS = ("perfect", "field", "other")


def _tier(vacancy: JobRequirement, seeker: CandidateProfile) -> str:
    field_match = seeker.all_fields_selected or vacancy.job_field in seeker.preferred_field_names
    spec_match = (
        not vacancy.job_specialization
        or vacancy.job_specialization in seeker.preferred_specializations
    )
    if field_match and spec_match:
        return "perfect"
    if field_match:
        return "field"
    return "other"


def _compare(a: DiscoveredVacancy, b: DiscoveredVacancy, tie_window: float) -> int:
    if (
        not a.remote
        and not b.remote
        and abs(a.score - b.score) < tie_window
        and a.distance_km is not None
        and b.distance_km is not None
    ):
        if a.distance_km != b.distance_km:
            return -1 if a.distance_km < b.distance_km else 1
        return 0
    if a.score != b.score:
        return -1 if a.score > b.score else 1
    return 0


def discover_vacancies(
    seeker: CandidateProfile,
    vacancies: Iterable[JobRequirement],
    excluding_ids: Iterable[str] = (),
    distance_fn: Callable[[tuple[float, float], tuple[float, float]], float] = great_circle_km,
    minimum_score: float | None = None,
    tie_window: float | None = None,
    remote_job_type: str | None = None,
) -> list[DiscoveredVacancy]:
    """Filter and order vacancies for one seeker.

    Returns an empty list when the seeker has no coordinates, acceptable
    distance or country place id. minimum_score, tie_window and
    remote_job_type default to the matching settings.
    """
    if minimum_score is None:
        minimum_score = settings.minimum_match_score
    if tie_window is None:
        tie_window = settings.score_tie_window
    if remote_job_type is None:
        remote_job_type = settings.remote_job_type

    seeker_coords = seeker.coordinates
    if seeker_coords is None or seeker.acceptable_distance_km <= 0 or not seeker.country_place_id:
        logger.warning("Seeker %s is missing location or acceptable distance", seeker.id)
        return []

    excluded = set(excluding_ids)
    buckets: dict[str, list[DiscoveredVacancy]] = {tier: [] for tier in TIERS}

    for vacancy in vacancies:
        if vacancy.id in excluded:
            continue

        if vacancy.is_remote(remote_job_type):
            if vacancy.country_place_id != seeker.country_place_id:
                continue
            distance = None
        else:
            job_coords = vacancy.coordinates
            if job_coords is None:
                continue
            distance = distance_fn(seeker_coords, job_coords)
            if distance > seeker.acceptable_distance_km:
                continue

        result = score_compatibility(vacancy, seeker, distance, remote_job_type=remote_job_type)
        if result.score < minimum_score:
            continue

        tier = _tier(vacancy, seeker)
        buckets[tier].append(DiscoveredVacancy(
            vacancy_id=vacancy.id,
            score=result.score,
            tier=tier,
            distance_km=distance,
            remote=distance is None,
        ))

    key = cmp_to_key(lambda a, b: _compare(a, b, tie_window))
    ordered: list[DiscoveredVacancy] = []
    for tier in TIERS:
        ordered.extend(sorted(buckets[tier], key=key))

    logger.info(
        "Discovery for seeker %s: %d perfect, %d field, %d other",
        seeker.id, len(buckets["perfect"]), len(buckets["field"]), len(buckets["other"]),
    )
    return ordered
