"""Shared test configuration, pytest markers and record factories."""

from datetime import datetime, timezone

import pytest

from models.schemas.candidate import CandidateProfile
from models.schemas.vacancy import CriterionWeights, JobRequirement


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "properties: invariants that must hold for every input"
    )


@pytest.fixture
def now():
    return datetime(2025, 6, 1, tzinfo=timezone.utc)


@pytest.fixture
def example_weights():
    return CriterionWeights(
        education=0.3, experience=0.3, field_match=0.2, language=0.1, location=0.1
    )


@pytest.fixture
def make_vacancy():
    def _make(**overrides) -> JobRequirement:
        return JobRequirement(**{"id": "vac-1", **overrides})
    return _make


@pytest.fixture
def make_candidate():
    def _make(**overrides) -> CandidateProfile:
        return CandidateProfile(**{"id": "cand-1", **overrides})
    return _make
