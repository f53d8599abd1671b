"""Absolute score projector: the human-readable "% match" shown next to the rank."""

import numpy as np

from models.schemas.score_vector import ScoreVector
from models.schemas.vacancy import CriterionWeights

LICENSE_MISSING_FACTOR = 0.5
LICENSE_PRESENT_FACTOR = 1.2


def absolute_score(
    vector: ScoreVector,
    weights: CriterionWeights,
    requires_license: bool = False,
    has_license: bool = False,
) -> float:
    """Weighted sum of the raw sub-scores with the driver's-license adjustment.

    This is a weighted average only when the weights sum to 1.
    """
    score = float(np.dot(vector.as_list(), weights.as_vector()))
    if requires_license and not has_license:
        score *= LICENSE_MISSING_FACTOR
    elif requires_license and has_license:
        score = min(score * LICENSE_PRESENT_FACTOR, 1.0)
    return score
