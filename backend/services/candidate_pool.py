"""Candidate pool assembly at the document-store boundary.

Each applicant's record must be fully enriched (work experience and
languages) before the decision matrix is built. A fetch that keeps failing
after its retries drops that candidate from the pool; a half-populated
record is never ranked.

assemble_pool() is what store-backed ranking calls (see
services.pipeline.orchestrator.rank_applicants); fetch is the caller's
store read.
"""

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Iterable

from config import settings
from models.schemas.candidate import CandidateProfile
from services.adapters import parse_candidate

logger = logging.getLogger(__name__)


class EnrichmentError(Exception):
    """Raised when a candidate's nested records cannot be fetched."""


@dataclass
class CandidatePool:
    candidates: list[CandidateProfile] = field(default_factory=list)
    excluded_ids: list[str] = field(default_factory=list)


def fetch_with_retry(
    fetch: Callable[[str], dict[str, Any]],
    candidate_id: str,
    retries: int = 1,
    base_delay: float = 0.0,
    exponential_base: float = 2.0,
) -> dict[str, Any]:
    """Call fetch(candidate_id), retrying with exponential back-off.

    Raises:
        EnrichmentError: when every attempt failed.
    """
    delay = base_delay
    for attempt in range(retries + 1):
        try:
            return fetch(candidate_id)
        except Exception as e:
            if attempt >= retries:
                raise EnrichmentError(
                    f"Enrichment of {candidate_id} failed after {retries + 1} attempts: {e}"
                ) from e
            logger.warning(
                "Enrichment of %s failed (attempt %d/%d): %s",
                candidate_id, attempt + 1, retries + 1, e,
            )
            if delay > 0:
                time.sleep(delay)
            delay *= exponential_base
    raise EnrichmentError(f"Enrichment of {candidate_id} was never attempted")


def assemble_pool(
    candidate_ids: Iterable[str],
    fetch: Callable[[str], dict[str, Any]],
    retries: int | None = None,
    base_delay: float | None = None,
    now: datetime | None = None,
) -> CandidatePool:
    """Fetch, parse and collect every applicant; exclude the ones that fail.

    Args:
        candidate_ids: Applicant identifiers for the vacancy.
        fetch: Returns the merged applicant record (with nested workExperiences
            and languages) for one id, or raises.
        retries: Extra attempts per candidate. Defaults to
            settings.enrichment_retries.
        base_delay: First back-off delay in seconds. Defaults to
            settings.enrichment_retry_delay.
        now: End date for current jobs when resolving durations.
    """
    if retries is None:
        retries = settings.enrichment_retries
    if base_delay is None:
        base_delay = settings.enrichment_retry_delay

    pool = CandidatePool()
    for candidate_id in candidate_ids:
        try:
            record = fetch_with_retry(fetch, candidate_id, retries=retries, base_delay=base_delay)
        except EnrichmentError as e:
            logger.warning("Excluding candidate from pool: %s", e)
            pool.excluded_ids.append(candidate_id)
            continue
        if not isinstance(record, dict):
            logger.warning("Excluding candidate %s: fetch returned no record", candidate_id)
            pool.excluded_ids.append(candidate_id)
            continue
        pool.candidates.append(parse_candidate(record, candidate_id=candidate_id, now=now))

    logger.info(
        "Candidate pool assembled: %d included, %d excluded",
        len(pool.candidates), len(pool.excluded_ids),
    )
    return pool
