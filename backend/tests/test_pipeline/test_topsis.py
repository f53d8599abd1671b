"""Tests for the TOPSIS ranking engine."""

import numpy as np
import pytest

from models.schemas.vacancy import CriterionWeights
from services.pipeline.topsis import TopsisEngine


def _equal_weights() -> CriterionWeights:
    return CriterionWeights(
        education=0.2, experience=0.2, field_match=0.2, language=0.2, location=0.2
    )


class TestTopsisStages:
    def test_normalize_divides_by_column_norm(self):
        matrix = np.array([[3.0, 0.0], [4.0, 0.0]])
        normalized = TopsisEngine.normalize(matrix)
        assert normalized[:, 0] == pytest.approx([0.6, 0.8])
        assert normalized[:, 1] == pytest.approx([0.0, 0.0])

    def test_apply_weights(self):
        engine = TopsisEngine(CriterionWeights(
            education=1.0, experience=0.5, field_match=0.0, language=2.0, location=1.0
        ))
        weighted = engine.apply_weights(np.ones((1, 5)))
        assert weighted[0] == pytest.approx([1.0, 0.5, 0.0, 2.0, 1.0])

    def test_ideal_solutions_are_column_extremes(self):
        weighted = np.array([[0.1, 0.4], [0.3, 0.2]])
        positive, negative = TopsisEngine.ideal_solutions(weighted)
        assert positive == pytest.approx([0.3, 0.4])
        assert negative == pytest.approx([0.1, 0.2])

    def test_relative_closeness_handles_zero_denominator(self):
        closeness = TopsisEngine.relative_closeness(np.array([0.0, 1.0]), np.array([0.0, 3.0]))
        assert closeness == pytest.approx([0.0, 0.75])


class TestCloseness:
    def test_empty_matrix(self):
        assert TopsisEngine(_equal_weights()).closeness(np.zeros((0, 5))).shape == (0,)

    def test_dominating_row_is_ideal(self):
        matrix = np.array([
            [1.0, 1.0, 1.0, 1.0, 1.0],
            [0.5, 0.2, 0.1, 0.3, 0.4],
        ])
        closeness = TopsisEngine(_equal_weights()).closeness(matrix)
        assert closeness == pytest.approx([1.0, 0.0])

    def test_symmetric_rows_meet_halfway(self):
        matrix = np.array([
            [1.0, 0.0, 0.5, 0.5, 0.5],
            [0.0, 1.0, 0.5, 0.5, 0.5],
        ])
        closeness = TopsisEngine(_equal_weights()).closeness(matrix)
        assert closeness == pytest.approx([0.5, 0.5])

    def test_identical_rows_score_zero(self):
        matrix = np.full((3, 5), 0.7)
        closeness = TopsisEngine(_equal_weights()).closeness(matrix)
        assert closeness == pytest.approx([0.0, 0.0, 0.0])

    def test_weights_shift_the_ranking(self):
        matrix = np.array([
            [1.0, 0.0, 0.0, 0.0, 0.0],
            [0.0, 1.0, 0.0, 0.0, 0.0],
        ])
        education_first = CriterionWeights(
            education=0.9, experience=0.1, field_match=0.0, language=0.0, location=0.0
        )
        closeness = TopsisEngine(education_first).closeness(matrix)
        assert closeness[0] > closeness[1]

    @pytest.mark.properties
    def test_scaling_weights_keeps_closeness(self):
        rng = np.random.default_rng(7)
        matrix = rng.random((6, 5))
        weights = CriterionWeights(
            education=0.3, experience=0.3, field_match=0.2, language=0.1, location=0.1
        )
        scaled = CriterionWeights(
            education=3.0, experience=3.0, field_match=2.0, language=1.0, location=1.0
        )
        assert TopsisEngine(weights).closeness(matrix) == pytest.approx(
            TopsisEngine(scaled).closeness(matrix)
        )

    @pytest.mark.properties
    def test_closeness_in_unit_interval(self):
        rng = np.random.default_rng(11)
        for _ in range(20):
            matrix = rng.random((5, 5))
            closeness = TopsisEngine(_equal_weights()).closeness(matrix)
            assert np.all(closeness >= 0.0)
            assert np.all(closeness <= 1.0)

    @pytest.mark.properties
    def test_normalized_columns_have_unit_norm_or_are_zero(self):
        rng = np.random.default_rng(23)
        for _ in range(50):
            n = int(rng.integers(2, 12))
            matrix = rng.random((n, 5))
            # knock out a random column
            matrix[:, rng.integers(5)] = 0.0
            normalized = TopsisEngine.normalize(matrix)
            for column in range(5):
                if np.all(matrix[:, column] == 0.0):
                    assert np.all(normalized[:, column] == 0.0)
                else:
                    assert np.sum(normalized[:, column] ** 2) == pytest.approx(1.0)
