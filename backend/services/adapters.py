"""Document-store adapters: untyped attribute dictionaries -> typed records.

This is the only place that looks at raw stored data. Every shape the store
has used is normalized here so the scorers never branch on storage layout:

    preferred fields   flat parallel arrays | list of {category, specializations}
    languages          "English" | {"en": "English", "uk": ...}
    work experience    list | mapping of entries, under either key spelling
    durations          direct "duration" in years | startDate/endDate
    dates              datetime | epoch seconds | several string formats

Missing or malformed values fall back to their zero value.
"""

import logging
import re
from datetime import datetime, timezone
from typing import Any

from models.schemas.candidate import (
    CandidateProfile,
    PreferredField,
    SpokenLanguage,
    WorkExperience,
)
from models.schemas.levels import EducationLevel, Proficiency
from models.schemas.vacancy import CriterionWeights, JobRequirement, RequiredLanguage

logger = logging.getLogger(__name__)

_DATE_FORMATS = [
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S",
    "%B %d, %Y at %I:%M:%S %p %z",
    "%b %d, %Y at %I:%M:%S %p %z",
]

# "UTC", "UTC+3", "UTC-5:30" as written by the store's timestamp display
_UTC_SUFFIX = re.compile(r"\s*UTC(?:([+-])(\d{1,2})(?::?(\d{2}))?)?$")

_DAYS_PER_YEAR = 365.25


# ---------------------------------------------------------------------------
# Scalar coercion
# ---------------------------------------------------------------------------

def _str(data: dict[str, Any], *keys: str) -> str:
    for key in keys:
        value = data.get(key)
        if isinstance(value, str):
            return value.strip()
    return ""


def _float(data: dict[str, Any], *keys: str) -> float | None:
    for key in keys:
        value = data.get(key)
        if isinstance(value, bool):
            continue
        if isinstance(value, (int, float)):
            return float(value)
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                continue
    return None


def _bool(data: dict[str, Any], key: str) -> bool:
    value = data.get(key)
    return value if isinstance(value, bool) else False


def _localized_name(value: Any) -> str:
    """Canonical (English) name from a plain string or a {"en": ...} mapping."""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, dict):
        en = value.get("en")
        return en.strip() if isinstance(en, str) else ""
    return ""


def _normalize_utc_suffix(text: str) -> str:
    """Rewrite a trailing "UTC+H[:MM]" (or bare "UTC") as a %z-compatible offset."""
    match = _UTC_SUFFIX.search(text)
    if match is None:
        return text
    sign, hours, minutes = match.groups()
    if sign is None:
        offset = "+00:00"
    else:
        offset = f"{sign}{int(hours):02d}:{minutes or '00'}"
    return f"{text[:match.start()]} {offset}"


def parse_datetime(value: Any) -> datetime | None:
    """Parse a stored timestamp. Naive values are taken as UTC."""
    parsed: datetime | None = None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str) and value.strip():
        text = value.strip().replace("\u202f", " ")
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            text = _normalize_utc_suffix(text)
            for fmt in _DATE_FORMATS:
                try:
                    parsed = datetime.strptime(text, fmt)
                    break
                except ValueError:
                    continue
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


# ---------------------------------------------------------------------------
# Nested records
# ---------------------------------------------------------------------------

def _entries(value: Any, entry_key: str) -> list[dict[str, Any]]:
    """Entries stored as a list, a mapping of id -> entry, or a single inline entry."""
    if isinstance(value, list):
        return [e for e in value if isinstance(e, dict)]
    if isinstance(value, dict):
        if entry_key in value:
            return [value]
        return [e for e in value.values() if isinstance(e, dict)]
    return []


def parse_work_experience(entry: dict[str, Any], now: datetime | None = None) -> WorkExperience | None:
    """Resolve one experience entry. Returns None when no duration can be derived."""
    is_current = _bool(entry, "isCurrentJob")
    duration = _float(entry, "duration")

    if duration is None:
        start = parse_datetime(entry.get("startDate"))
        if start is None:
            logger.warning("Skipping experience entry without a parseable startDate")
            return None
        end = None if is_current else parse_datetime(entry.get("endDate"))
        end = end or now or datetime.now(timezone.utc)
        duration = max((end - start).days / _DAYS_PER_YEAR, 0.0)

    return WorkExperience(
        field=_str(entry, "field"),
        specialization=_str(entry, "specialization"),
        duration_years=max(duration, 0.0),
        is_current=is_current,
        position=_str(entry, "position"),
        company=_str(entry, "company"),
    )


def _parse_experiences(data: dict[str, Any], now: datetime | None) -> list[WorkExperience]:
    raw = data.get("workExperiences")
    if raw is None or isinstance(raw, (int, float)):
        raw = data.get("workExperience")
    if isinstance(raw, (int, float)):
        return []
    parsed = (parse_work_experience(e, now) for e in _entries(raw, "field"))
    return [we for we in parsed if we is not None]


def _parse_preferred_fields(data: dict[str, Any]) -> list[PreferredField]:
    raw = data.get("preferredJobFields")
    if not isinstance(raw, list) or not raw:
        return []

    if all(isinstance(f, str) for f in raw):
        specs = data.get("preferredJobFieldSpecializations")
        specs = [s for s in specs if isinstance(s, str)] if isinstance(specs, list) else []
        groups = [PreferredField(field=f, specializations=[]) for f in raw]
        # legacy parallel arrays: pair by index, surplus goes to the last field
        for i, spec in enumerate(specs):
            groups[min(i, len(groups) - 1)].specializations.append(spec)
        return groups

    groups = []
    for group in raw:
        if not isinstance(group, dict):
            continue
        specs = group.get("preferredJobFieldSpecializations")
        groups.append(PreferredField(
            field=_localized_name(group.get("category")),
            specializations=[s for s in specs if isinstance(s, str)] if isinstance(specs, list) else [],
        ))
    return groups


def _parse_spoken_languages(data: dict[str, Any]) -> list[SpokenLanguage]:
    languages = []
    for entry in _entries(data.get("languages"), "language"):
        proficiency = Proficiency.parse(entry.get("proficiency"))
        name = _localized_name(entry.get("language"))
        if proficiency is None or not name:
            continue
        languages.append(SpokenLanguage(name=name, proficiency=proficiency))
    return languages


def _parse_required_languages(data: dict[str, Any]) -> list[RequiredLanguage]:
    languages = []
    for entry in _entries(data.get("requiredLanguages"), "language"):
        name = _localized_name(entry.get("language"))
        if not name:
            continue
        proficiency = Proficiency.parse(entry.get("proficiency")) or Proficiency.A1
        languages.append(RequiredLanguage(name=name, proficiency=proficiency))
    return languages


# ---------------------------------------------------------------------------
# Top-level records
# ---------------------------------------------------------------------------

def parse_weights(data: dict[str, Any] | None) -> CriterionWeights:
    """Criterion weights from a weights mapping; missing or negative entries use the default."""
    if not isinstance(data, dict):
        return CriterionWeights()
    values = {}
    for alias in ("educationWeight", "experienceWeight", "fieldMatchWeight", "skillsWeight", "locationWeight"):
        value = _float(data, alias)
        if value is not None and value >= 0:
            values[alias] = value
    return CriterionWeights(**values)


def parse_vacancy(data: dict[str, Any], vacancy_id: str | None = None) -> JobRequirement:
    return JobRequirement(
        id=vacancy_id or _str(data, "id", "vacancyId"),
        job_title=_str(data, "jobTitle"),
        job_type=_str(data, "jobType"),
        required_education_level=EducationLevel.parse(data.get("requiredEducationLevel")),
        education_field=_str(data, "educationField", "studyField"),
        education_specialization=_str(data, "educationSpecialization", "specialization"),
        required_experience_years=max(_float(data, "requiredWorkExperience") or 0.0, 0.0),
        requires_driver_license=_bool(data, "requiresDriverLicense"),
        job_field=_str(data, "jobField"),
        job_specialization=_str(data, "jobSpecialization"),
        required_languages=_parse_required_languages(data),
        city=_str(data, "city"),
        country=_str(data, "country"),
        latitude=_float(data, "city_latitude"),
        longitude=_float(data, "city_longitude"),
        city_place_id=_str(data, "city_place_id"),
        country_place_id=_str(data, "country_place_id"),
        weights=parse_weights(data.get("topsisWeights")),
    )


def parse_candidate(
    data: dict[str, Any],
    candidate_id: str | None = None,
    now: datetime | None = None,
) -> CandidateProfile:
    """Build a CandidateProfile from a merged applicant + job-seeker record.

    Args:
        data: Applicant attributes with nested workExperiences and languages.
        candidate_id: Overrides any id stored in the record.
        now: End date for current jobs; defaults to the current time.
    """
    declared = data.get("workExperience")
    declared_years = (
        float(declared)
        if isinstance(declared, (int, float)) and not isinstance(declared, bool)
        else None
    )

    return CandidateProfile(
        id=candidate_id or _str(data, "jobSeekerId", "uid", "id"),
        first_name=_str(data, "firstName"),
        last_name=_str(data, "lastName"),
        education_level=EducationLevel.parse(data.get("educationLevel")),
        study_field=_str(data, "studyField"),
        specialization=_str(data, "specialization"),
        work_experience=_parse_experiences(data, now),
        declared_experience_years=declared_years,
        preferred_fields=_parse_preferred_fields(data),
        languages=_parse_spoken_languages(data),
        city=_str(data, "city"),
        country=_str(data, "country"),
        latitude=_float(data, "city_latitude"),
        longitude=_float(data, "city_longitude"),
        country_place_id=_str(data, "country_place_id"),
        acceptable_distance_km=max(_float(data, "acceptableDistance") or 0.0, 0.0),
        has_driver_license=_bool(data, "hasDriverLicense"),
        applied_at=parse_datetime(data.get("appliedDate")),
    )
