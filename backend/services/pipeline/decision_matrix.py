"""Decision matrix builder: one row of five sub-scores per candidate."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

import numpy as np

from models.schemas.candidate import CandidateProfile
from models.schemas.score_vector import CRITERIA, ScoreVector
from models.schemas.vacancy import JobRequirement
from services.pipeline.criteria import score_vector

logger = logging.getLogger(__name__)


def build_decision_matrix(
    requirement: JobRequirement,
    candidates: Sequence[CandidateProfile],
    max_workers: int = 1,
) -> tuple[np.ndarray, list[ScoreVector]]:
    """Score every candidate and stack the rows into an (n, 5) matrix.

    Rows are independent, so with max_workers > 1 the scoring runs on a
    thread pool. Row order always follows the input order.
    """
    if max_workers > 1 and len(candidates) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            vectors = list(executor.map(lambda c: score_vector(requirement, c), candidates))
    else:
        vectors = [score_vector(requirement, c) for c in candidates]

    if not vectors:
        return np.zeros((0, len(CRITERIA))), []

    matrix = np.array([v.as_list() for v in vectors], dtype=float)
    logger.info("Decision matrix built: %d candidates x %d criteria", *matrix.shape)
    return matrix, vectors
