"""Ranking verdict: employer-facing explanation of a ranked candidate.

Template-based rules engine over the five sub-scores. No model, fully
deterministic, so the same ranking always explains itself the same way.
"""

from models.schemas.ranked_candidate import RankedCandidate
from models.schemas.verdict import RankingVerdict

STRENGTH_THRESHOLD = 0.8
WEAKNESS_THRESHOLD = 0.5

_CRITERION_LABELS = {
    "education": "Education",
    "experience": "Relevant work experience",
    "field_match": "Preferred job field",
    "language": "Language requirements",
    "location": "Location",
}


def build_verdict(candidate: RankedCandidate, pool_size: int) -> RankingVerdict:
    return RankingVerdict(
        candidate_id=candidate.candidate_id,
        summary=_build_summary(candidate, pool_size),
        strengths=_build_strengths(candidate),
        weaknesses=_build_weaknesses(candidate),
    )


# ---------------------------------------------------------------------------
# Template builders
# ---------------------------------------------------------------------------

def _build_summary(candidate: RankedCandidate, pool_size: int) -> str:
    percent = round(candidate.absolute_score * 100)
    parts = [f"{percent}% match ({candidate.match_band} fit)."]
    if pool_size > 1:
        parts.append(f"Ranked {candidate.rank} of {pool_size} applicants.")
    else:
        parts.append("Only applicant for this vacancy.")
    return " ".join(parts)


def _build_strengths(candidate: RankedCandidate) -> list[str]:
    scores = candidate.scores.model_dump()
    strengths = [
        f"{_CRITERION_LABELS[name]} ({value * 100:.0f}/100)"
        for name, value in scores.items()
        if value >= STRENGTH_THRESHOLD
    ]
    return strengths or ["No criterion stands out"]


def _build_weaknesses(candidate: RankedCandidate) -> list[str]:
    scores = candidate.scores.model_dump()
    weaknesses = [
        f"{_CRITERION_LABELS[name]} below requirements ({value * 100:.0f}/100)"
        for name, value in scores.items()
        if value < WEAKNESS_THRESHOLD
    ]
    return weaknesses or ["No significant gaps identified"]
