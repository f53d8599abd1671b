"""Ranking orchestrator: wires the scoring stages together.

Flow:
    vacancy + applicant ids
      └─ assemble_pool()              → enriched CandidateProfiles (rank_applicants only)
      └─ build_decision_matrix()      → (n x 5) matrix + ScoreVectors
              ↓                                ↓
      ├─ TopsisEngine.closeness()     → closeness per candidate (n > 1)
      └─ absolute_score()             → % match per candidate (always)
                       ↓
         sort: score desc, later applied_at first, candidate id
                       ↓
         list[RankedCandidate]  → ranked_ids() persisted by the caller

Discovery scoring for a single (vacancy, seeker) pair goes through
score_compatibility() instead and never touches this pipeline.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Sequence

from config import settings
from models.schemas.candidate import CandidateProfile
from models.schemas.ranked_candidate import RankedCandidate, match_band
from models.schemas.vacancy import CriterionWeights, JobRequirement
from services.candidate_pool import assemble_pool
from services.pipeline.absolute_score import absolute_score
from services.pipeline.compatibility import score_compatibility
from services.pipeline.decision_matrix import build_decision_matrix
from services.pipeline.topsis import TopsisEngine

logger = logging.getLogger(__name__)

__all__ = ["rank_applicants", "rank_candidates", "ranked_ids", "score_compatibility"]


def _applied_timestamp(applied_at: datetime | None) -> float:
    if applied_at is None:
        return -math.inf
    if applied_at.tzinfo is None:
        applied_at = applied_at.replace(tzinfo=timezone.utc)
    return applied_at.timestamp()


def _sort_key(candidate: RankedCandidate) -> tuple[float, float, str]:
    applied = _applied_timestamp(candidate.applied_at)
    return (-candidate.topsis_score, -applied, candidate.candidate_id)


def rank_candidates(
    vacancy: JobRequirement,
    weights: CriterionWeights,
    candidates: Sequence[CandidateProfile],
    max_workers: int | None = None,
) -> list[RankedCandidate]:
    """Rank an applicant pool for one vacancy.

    Candidates must already carry their work experience and languages.
    With a single candidate TOPSIS is undefined and the absolute score is
    used as the ranking score. Same inputs always give the same order.
    """
    if not candidates:
        return []

    workers = settings.matrix_workers if max_workers is None else max_workers
    matrix, vectors = build_decision_matrix(vacancy, candidates, max_workers=workers)

    absolute = [
        absolute_score(
            vector,
            weights,
            requires_license=vacancy.requires_driver_license,
            has_license=candidate.has_driver_license,
        )
        for vector, candidate in zip(vectors, candidates)
    ]

    if len(candidates) > 1:
        closeness = [float(c) for c in TopsisEngine(weights).closeness(matrix)]
    else:
        closeness = list(absolute)

    ranked = [
        RankedCandidate(
            candidate_id=candidate.id,
            display_name=candidate.display_name,
            scores=vector,
            topsis_score=closeness[i],
            absolute_score=absolute[i],
            match_band=match_band(absolute[i]),
            applied_at=candidate.applied_at,
        )
        for i, (candidate, vector) in enumerate(zip(candidates, vectors))
    ]
    ranked.sort(key=_sort_key)
    for position, candidate in enumerate(ranked, start=1):
        candidate.rank = position

    logger.info("Ranked %d candidates for vacancy %s", len(ranked), vacancy.id)
    return ranked


def ranked_ids(ranked: Sequence[RankedCandidate]) -> list[str]:
    """Identifier order to persist back onto the vacancy record."""
    return [c.candidate_id for c in ranked]


def rank_applicants(
    vacancy: JobRequirement,
    applicant_ids: Iterable[str],
    fetch: Callable[[str], dict[str, Any]],
    weights: CriterionWeights | None = None,
) -> tuple[list[RankedCandidate], list[str]]:
    """Rank a vacancy's applicants straight from the document store.

    Each applicant record is fetched through assemble_pool(), so applicants
    whose enrichment keeps failing are left out instead of being ranked on
    partial data.

    Returns:
        The ranked list and the ids that were excluded.
    """
    pool = assemble_pool(applicant_ids, fetch)
    if pool.excluded_ids:
        logger.warning(
            "Vacancy %s: %d applicants excluded from ranking", vacancy.id, len(pool.excluded_ids)
        )
    ranked = rank_candidates(vacancy, weights or vacancy.weights, pool.candidates)
    return ranked, pool.excluded_ids
