"""TOPSIS ranking engine.

Fixed pipeline over the decision matrix, no branching:

    RAW_MATRIX -> NORMALIZED -> WEIGHTED -> IDEAL_SOLUTIONS
               -> SEPARATIONS -> CLOSENESS

All five criteria are benefit criteria (higher is better), so the positive
ideal is the column maximum and the negative ideal the column minimum.
"""

import logging

import numpy as np

from models.schemas.vacancy import CriterionWeights

logger = logging.getLogger(__name__)


class TopsisEngine:
    """Relative closeness of each candidate to the ideal solution.

    Weights are applied as supplied. Callers that want them to sum to 1
    normalize before constructing the engine.
    """

    def __init__(self, weights: CriterionWeights) -> None:
        self.weights = weights.as_vector()

    @staticmethod
    def normalize(matrix: np.ndarray) -> np.ndarray:
        """Vector normalization: divide each column by its Euclidean norm.

        Zero-norm columns become all zeros.
        """
        norms = np.linalg.norm(matrix, axis=0)
        safe = np.where(norms > 0, norms, 1.0)
        return np.where(norms > 0, matrix / safe, 0.0)

    def apply_weights(self, normalized: np.ndarray) -> np.ndarray:
        return normalized * self.weights

    @staticmethod
    def ideal_solutions(weighted: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        return weighted.max(axis=0), weighted.min(axis=0)

    @staticmethod
    def separations(
        weighted: np.ndarray,
        ideal_positive: np.ndarray,
        ideal_negative: np.ndarray,
    ) -> tuple[np.ndarray, np.ndarray]:
        d_pos = np.linalg.norm(weighted - ideal_positive, axis=1)
        d_neg = np.linalg.norm(weighted - ideal_negative, axis=1)
        return d_pos, d_neg

    @staticmethod
    def relative_closeness(d_pos: np.ndarray, d_neg: np.ndarray) -> np.ndarray:
        """d_neg / (d_pos + d_neg); 0 where both distances are 0."""
        denom = d_pos + d_neg
        safe = np.where(denom > 0, denom, 1.0)
        return np.where(denom > 0, d_neg / safe, 0.0)

    def closeness(self, matrix: np.ndarray) -> np.ndarray:
        """Run the full pipeline and return one closeness value per row."""
        if matrix.shape[0] == 0:
            return np.zeros(0)

        normalized = self.normalize(matrix)
        weighted = self.apply_weights(normalized)
        ideal_positive, ideal_negative = self.ideal_solutions(weighted)
        d_pos, d_neg = self.separations(weighted, ideal_positive, ideal_negative)
        scores = self.relative_closeness(d_pos, d_neg)

        logger.debug("TOPSIS ideal+=%s ideal-=%s", ideal_positive.round(4), ideal_negative.round(4))
        return np.clip(scores, 0.0, 1.0)
