"""Tests for the ranking verdict template engine."""

from models.schemas.ranked_candidate import RankedCandidate, match_band
from models.schemas.score_vector import ScoreVector
from models.schemas.verdict import RankingVerdict
from services.pipeline.verdict import build_verdict


def _make_ranked(**overrides) -> RankedCandidate:
    defaults = dict(
        candidate_id="cand-1",
        rank=1,
        scores=ScoreVector(education=1.0, experience=0.85, field_match=0.6, language=0.3, location=1.0),
        topsis_score=0.9,
        absolute_score=0.853,
        match_band="strong",
    )
    defaults.update(overrides)
    return RankedCandidate(**defaults)


class TestBuildVerdict:
    def test_produces_complete_output(self):
        verdict = build_verdict(_make_ranked(), pool_size=3)
        assert isinstance(verdict, RankingVerdict)
        assert verdict.candidate_id == "cand-1"
        assert verdict.summary
        assert verdict.strengths
        assert verdict.weaknesses

    def test_summary_with_pool(self):
        verdict = build_verdict(_make_ranked(rank=2), pool_size=5)
        assert verdict.summary == "85% match (strong fit). Ranked 2 of 5 applicants."

    def test_summary_single_applicant(self):
        verdict = build_verdict(_make_ranked(), pool_size=1)
        assert verdict.summary == "85% match (strong fit). Only applicant for this vacancy."

    def test_strengths_list_high_criteria(self):
        verdict = build_verdict(_make_ranked(), pool_size=3)
        assert verdict.strengths == [
            "Education (100/100)",
            "Relevant work experience (85/100)",
            "Location (100/100)",
        ]

    def test_weaknesses_list_low_criteria(self):
        verdict = build_verdict(_make_ranked(), pool_size=3)
        assert verdict.weaknesses == ["Language requirements below requirements (30/100)"]

    def test_defaults_when_nothing_stands_out(self):
        flat = ScoreVector(education=0.6, experience=0.6, field_match=0.6, language=0.6, location=0.6)
        verdict = build_verdict(_make_ranked(scores=flat), pool_size=2)
        assert verdict.strengths == ["No criterion stands out"]
        assert verdict.weaknesses == ["No significant gaps identified"]

    def test_deterministic(self):
        candidate = _make_ranked()
        assert build_verdict(candidate, 4) == build_verdict(candidate, 4)


class TestMatchBand:
    def test_band_boundaries(self):
        assert match_band(0.8) == "strong"
        assert match_band(0.79) == "good"
        assert match_band(0.6) == "good"
        assert match_band(0.45) == "fair"
        assert match_band(0.4) == "fair"
        assert match_band(0.39) == "weak"
        assert match_band(0.0) == "weak"
