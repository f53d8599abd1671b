"""Criterion sub-scorers: five pure functions mapping a (requirement, candidate) pair to [0, 1].

Each scorer is total. Missing data on either side resolves to a documented
default instead of raising:

    education    1.0 when no education is required
    experience   1.0 when no experience is required, 0.0 without entries
    field_match  0.5 when either side is unrestricted, 0.2 floor on no match
    language     1.0 when no language is required, 0.0 without languages
    location     1.0 when either city is unspecified
"""

import logging

from models.schemas.candidate import CandidateProfile
from models.schemas.levels import EducationLevel
from models.schemas.score_vector import ScoreVector
from models.schemas.vacancy import JobRequirement

logger = logging.getLogger(__name__)

FIELD_MISMATCH_PENALTY = 0.2
PARTIAL_SPECIALIZATION_CREDIT = 0.7
UNRELATED_FIELD_CREDIT = 0.2
CONTAINMENT_SCORE = 0.7
WORD_OVERLAP_BASE = 0.3
WORD_OVERLAP_SPAN = 0.4
SPECIALIZATION_BONUS = 0.1
NO_FIELD_MATCH_FLOOR = 0.2


def _clamp(value: float) -> float:
    return max(0.0, min(value, 1.0))


# ---------------------------------------------------------------------------
# Education
# ---------------------------------------------------------------------------

def education_score(requirement: JobRequirement, candidate: CandidateProfile) -> float:
    required = requirement.required_education_level
    if required == EducationLevel.NO_EDUCATION:
        return 1.0

    if candidate.education_level.ordinal >= required.ordinal:
        score = 1.0
    else:
        score = candidate.education_level.ordinal / required.ordinal

    req_field = requirement.education_field.lower()
    cand_field = candidate.study_field.lower()
    if req_field and cand_field and req_field != cand_field:
        score -= FIELD_MISMATCH_PENALTY

    req_spec = requirement.education_specialization.lower()
    cand_spec = candidate.specialization.lower()
    if req_spec and cand_spec and req_spec != cand_spec:
        score -= FIELD_MISMATCH_PENALTY

    return _clamp(score)


# ---------------------------------------------------------------------------
# Experience
# ---------------------------------------------------------------------------

def experience_score(requirement: JobRequirement, candidate: CandidateProfile) -> float:
    """Ratio of relevant months to required months, capped at 1.0.

    Field + specialization match earns full credit, field only 0.7x,
    an unrelated field 0.2x. Entries without a field are ignored.
    """
    required_years = requirement.required_experience_years
    if required_years <= 0:
        return 1.0
    if not candidate.work_experience:
        return 0.0

    req_field = requirement.job_field.lower()
    req_spec = requirement.job_specialization.lower()
    relevant_months = 0.0

    for we in candidate.work_experience:
        exp_field = we.field.lower()
        if not exp_field or not req_field:
            continue

        months = we.duration_years * 12
        if exp_field == req_field:
            if not req_spec or we.specialization.lower() == req_spec:
                relevant_months += months
            else:
                relevant_months += months * PARTIAL_SPECIALIZATION_CREDIT
        else:
            relevant_months += months * UNRELATED_FIELD_CREDIT

    return _clamp(relevant_months / (required_years * 12))


# ---------------------------------------------------------------------------
# Field / specialization preference
# ---------------------------------------------------------------------------

def _partial_field_score(vacancy_field: str, candidate_field: str) -> float:
    if vacancy_field in candidate_field or candidate_field in vacancy_field:
        return CONTAINMENT_SCORE

    vacancy_words = vacancy_field.split()
    field_words = candidate_field.split()
    common = [w for w in vacancy_words if w in field_words]
    if not common:
        return 0.0
    overlap = len(common) / max(len(vacancy_words), len(field_words))
    return WORD_OVERLAP_BASE + overlap * WORD_OVERLAP_SPAN


def field_match_score(requirement: JobRequirement, candidate: CandidateProfile) -> float:
    vacancy_field = requirement.job_field.lower()
    vacancy_spec = requirement.job_specialization.lower()

    if not vacancy_field or candidate.all_fields_selected:
        return 0.5

    groups = [pf for pf in candidate.preferred_fields if pf.field]
    if not groups:
        # restricted to fields, but none named
        return 0.0

    for group in groups:
        if group.field.lower() != vacancy_field:
            continue
        if not vacancy_spec:
            return 1.0
        if any(s.lower() == vacancy_spec for s in group.specializations):
            return 1.0

    best = 0.0
    for group in groups:
        best = max(best, _partial_field_score(vacancy_field, group.field.lower()))

    if best > 0.0:
        specs = candidate.preferred_specializations
        if vacancy_spec and any(s.lower() == vacancy_spec for s in specs):
            best = min(best + SPECIALIZATION_BONUS, 1.0)
        return best

    return NO_FIELD_MATCH_FLOOR


# ---------------------------------------------------------------------------
# Languages
# ---------------------------------------------------------------------------

def language_score(requirement: JobRequirement, candidate: CandidateProfile) -> float:
    """Mean over required languages of the best same-name match.

    Meeting the level gives 1.0, otherwise candidate_rank / required_rank.
    """
    if not requirement.required_languages:
        return 1.0
    if not candidate.languages:
        return 0.0

    total = 0.0
    for required in requirement.required_languages:
        name = required.name.lower()
        best = 0.0
        for spoken in candidate.languages:
            if spoken.name.lower() != name:
                continue
            if spoken.proficiency.rank >= required.proficiency.rank:
                match = 1.0
            else:
                match = spoken.proficiency.rank / required.proficiency.rank
            best = max(best, match)
        total += best

    return _clamp(total / len(requirement.required_languages))


# ---------------------------------------------------------------------------
# Location
# ---------------------------------------------------------------------------

def location_score(requirement: JobRequirement, candidate: CandidateProfile) -> float:
    vacancy_city = requirement.city.lower()
    candidate_city = candidate.city.lower()
    if not vacancy_city or not candidate_city:
        return 1.0

    if vacancy_city == candidate_city:
        return 1.0
    if vacancy_city in candidate_city or candidate_city in vacancy_city:
        return 0.9

    vacancy_country = requirement.country.lower()
    candidate_country = candidate.country.lower()
    if vacancy_country and candidate_country and vacancy_country != candidate_country:
        return 0.2
    if vacancy_country == candidate_country:
        return 0.8
    return 0.5


def score_vector(requirement: JobRequirement, candidate: CandidateProfile) -> ScoreVector:
    """Compute all five sub-scores for one candidate."""
    vector = ScoreVector(
        education=education_score(requirement, candidate),
        experience=experience_score(requirement, candidate),
        field_match=field_match_score(requirement, candidate),
        language=language_score(requirement, candidate),
        location=location_score(requirement, candidate),
    )
    logger.debug("Sub-scores for %s: %s", candidate.id or candidate.display_name, vector.as_list())
    return vector
