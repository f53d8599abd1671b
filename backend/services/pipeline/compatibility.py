"""Compatibility scorer: coarse heuristic score for ordering postings shown to a seeker.

Single pass over one (vacancy, seeker) pair accumulating bonuses and penalties
into an unbounded running total:

    driver's license  required and missing -> disqualified (score forced to 0)
    distance          tiered +30/+20/+10/+5 by distance / acceptable distance
    education         +15 when the seeker meets the level
    experience        up to +40 by experience ratio, +5 when none is required
    study field       +20 / -10
    specialization    +25 / -5
    job field         +30 (+40 specialization), -30 on no field, +10 for any field
    missing essential -40 deferred penalty (clamped at 0)

This score lives in its own space; it is never mixed with the [0, 1]
sub-scores used by the ranking engine.
"""

import logging

from models.schemas.candidate import CandidateProfile
from models.schemas.compatibility import CompatibilityResult, ScoreAdjustment
from models.schemas.levels import EducationLevel
from models.schemas.vacancy import JobRequirement

logger = logging.getLogger(__name__)

MISSING_ESSENTIAL_PENALTY = 40.0
MAX_EXPERIENCE_RATIO = 2.0

# (upper bound on distance / acceptable distance, bonus)
DISTANCE_TIERS = [(0.2, 30.0), (0.5, 20.0), (0.8, 10.0)]
DISTANCE_FLOOR_BONUS = 5.0


def education_matches(required: EducationLevel, actual: EducationLevel) -> bool:
    if required == EducationLevel.NO_EDUCATION or required == actual:
        return True
    return actual.ordinal >= required.ordinal


def _distance_bonus(distance_km: float, acceptable_km: float) -> float:
    # TODO: beyond-radius seekers still get the floor bonus; discovery hard-filters them,
    # decide whether direct callers should be disqualified here too.
    if distance_km > acceptable_km:
        return DISTANCE_FLOOR_BONUS
    ratio = distance_km / acceptable_km
    for bound, bonus in DISTANCE_TIERS:
        if ratio < bound:
            return bonus
    return DISTANCE_FLOOR_BONUS


def score_compatibility(
    vacancy: JobRequirement,
    candidate: CandidateProfile,
    distance_km: float | None = None,
    remote_job_type: str = "Remote",
) -> CompatibilityResult:
    """Score one vacancy for one seeker.

    Args:
        vacancy: The posting.
        candidate: The seeker's profile.
        distance_km: Great-circle distance between seeker and job. Ignored for
            remote vacancies.
        remote_job_type: job_type value that marks a vacancy as remote.

    Returns:
        CompatibilityResult with the clamped score, both flags and the list of
        adjustments that produced it.
    """
    adjustments: list[ScoreAdjustment] = []
    disqualified = False
    missing_essential = False

    def adjust(criterion: str, reason: str, points: float) -> None:
        adjustments.append(ScoreAdjustment(criterion=criterion, reason=reason, points=points))

    # 1. driver's license
    if vacancy.requires_driver_license and not candidate.has_driver_license:
        disqualified = True

    # 2. distance
    acceptable = candidate.acceptable_distance_km
    if distance_km is not None and acceptable > 0 and not vacancy.is_remote(remote_job_type):
        adjust("distance", f"{distance_km:.1f} km of {acceptable:.0f} km acceptable",
               _distance_bonus(distance_km, acceptable))

    # 3. education
    required_level = vacancy.required_education_level
    if education_matches(required_level, candidate.education_level):
        adjust("education", "education level met", 15.0)
    elif required_level != EducationLevel.NO_EDUCATION:
        missing_essential = True

    # 4. experience
    required_years = vacancy.required_experience_years
    seeker_years = candidate.experience_years
    if required_years > 0:
        if seeker_years >= required_years:
            ratio = min(seeker_years / required_years, MAX_EXPERIENCE_RATIO)
            adjust("experience", "experience requirement met", 20.0 * ratio)
        elif seeker_years > 0:
            ratio = seeker_years / required_years
            adjust("experience", "partial experience", 10.0 * ratio)
            if ratio < 0.5:
                missing_essential = True
        else:
            missing_essential = True
    elif seeker_years > 0:
        adjust("experience", "experience where none is required", 5.0)

    # 5. study field
    if vacancy.education_field:
        if candidate.study_field == vacancy.education_field:
            adjust("study_field", "study field matches", 20.0)
        elif candidate.study_field:
            adjust("study_field", "study field differs", -10.0)

    # 6. specialization
    if vacancy.education_specialization:
        if candidate.specialization == vacancy.education_specialization:
            adjust("specialization", "specialization matches", 25.0)
        elif candidate.specialization:
            adjust("specialization", "specialization differs", -5.0)

    # 7. job field preference
    if candidate.all_fields_selected:
        adjust("job_field", "seeker accepts any field", 10.0)
    elif vacancy.job_field:
        if vacancy.job_field in candidate.preferred_field_names:
            adjust("job_field", "preferred field", 30.0)
            if vacancy.job_specialization:
                specs = candidate.preferred_specializations
                if vacancy.job_specialization in specs:
                    adjust("job_field", "preferred specialization", 40.0)
                elif specs:
                    adjust("job_field", "specialization not preferred", -10.0)
        else:
            adjust("job_field", "field not preferred", -30.0)
            missing_essential = True

    score = sum(a.points for a in adjustments)

    # 8. deferred penalty
    if missing_essential:
        adjust("essential", "essential requirement missing", -MISSING_ESSENTIAL_PENALTY)
        score = max(score - MISSING_ESSENTIAL_PENALTY, 0.0)

    # 9. disqualifier
    if disqualified:
        score = 0.0

    result = CompatibilityResult(
        score=max(score, 0.0),
        disqualified=disqualified,
        missing_essential=missing_essential,
        adjustments=adjustments,
    )
    logger.debug(
        "Compatibility vacancy=%s seeker=%s score=%.1f disqualified=%s",
        vacancy.id, candidate.id, result.score, disqualified,
    )
    return result
