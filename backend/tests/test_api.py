import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_settings
from config import Settings
from main import app

client = TestClient(app)

VACANCY = {
    "id": "vac-1",
    "jobTitle": "Backend Developer",
    "jobType": "Full-time",
    "requiredEducationLevel": "Bachelor",
    "requiredWorkExperience": 2,
    "jobField": "IT",
    "topsisWeights": {
        "educationWeight": 0.3,
        "experienceWeight": 0.3,
        "fieldMatchWeight": 0.2,
        "skillsWeight": 0.1,
        "locationWeight": 0.1,
    },
}

STRONG = {
    "jobSeekerId": "strong",
    "firstName": "Olena",
    "lastName": "Koval",
    "educationLevel": "Bachelor",
    "workExperiences": [{"field": "IT", "duration": 3}],
    "preferredJobFields": ["IT"],
    "appliedDate": "2025-05-01T10:00:00Z",
}

WEAK = {
    "jobSeekerId": "weak",
    "educationLevel": "Secondary",
    "preferredJobFields": ["Agriculture"],
}


@pytest.fixture
def small_pool_settings():
    app.dependency_overrides[get_settings] = lambda: Settings(max_pool_size=1)
    yield
    app.dependency_overrides.clear()


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["minimum_match_score"] == 30.0


def test_rank():
    response = client.post("/rank", json={"vacancy": VACANCY, "candidates": [WEAK, STRONG]})
    assert response.status_code == 200
    data = response.json()
    assert data["vacancy_id"] == "vac-1"
    assert data["ranked_ids"] == ["strong", "weak"]
    assert data["ranked"][0]["rank"] == 1
    assert data["ranked"][0]["match_band"] == "strong"
    assert data["ranked"][1]["absolute_score"] == pytest.approx(0.315)
    assert len(data["verdicts"]) == 2
    assert data["verdicts"][0]["summary"] == "100% match (strong fit). Ranked 1 of 2 applicants."


def test_rank_weight_override_and_normalization():
    response = client.post(
        "/rank",
        json={
            "vacancy": VACANCY,
            "candidates": [WEAK],
            "weights": {
                "educationWeight": 2,
                "experienceWeight": 0,
                "fieldMatchWeight": 0,
                "skillsWeight": 0,
                "locationWeight": 2,
            },
            "normalize_weights": True,
        },
    )
    assert response.status_code == 200
    ranked = response.json()["ranked"]
    # (0.25 + 1.0) / 2
    assert ranked[0]["absolute_score"] == pytest.approx(0.625)
    assert ranked[0]["topsis_score"] == pytest.approx(0.625)


def test_rank_empty_pool():
    response = client.post("/rank", json={"vacancy": VACANCY})
    assert response.status_code == 200
    assert response.json()["ranked"] == []


def test_rank_rejects_oversized_pool(small_pool_settings):
    response = client.post("/rank", json={"vacancy": VACANCY, "candidates": [WEAK, STRONG]})
    assert response.status_code == 400


def test_rank_requires_vacancy():
    response = client.post("/rank", json={"candidates": []})
    assert response.status_code == 422


def test_compatibility():
    response = client.post(
        "/compatibility",
        json={"vacancy": VACANCY, "candidate": STRONG, "distance_km": 5},
    )
    assert response.status_code == 200
    data = response.json()
    # no acceptable distance: 15 education + 30 experience + 30 field
    assert data["score"] == pytest.approx(75.0)
    assert data["disqualified"] is False
    assert data["missing_essential"] is False
    assert len(data["adjustments"]) == 3


def test_compatibility_rejects_negative_distance():
    response = client.post(
        "/compatibility",
        json={"vacancy": VACANCY, "candidate": STRONG, "distance_km": -1},
    )
    assert response.status_code == 422


def test_discover():
    seeker = {
        **STRONG,
        "city_latitude": 50.4501,
        "city_longitude": 30.5234,
        "acceptableDistance": 30,
        "country_place_id": "UA",
    }
    near = {**VACANCY, "id": "near", "city_latitude": 50.45, "city_longitude": 30.52}
    far = {**VACANCY, "id": "far", "city_latitude": 49.8397, "city_longitude": 24.0297}
    remote = {**VACANCY, "id": "remote", "jobType": "Remote", "country_place_id": "UA"}

    response = client.post(
        "/discover",
        json={"seeker": seeker, "vacancies": [far, remote, near], "excluding_ids": []},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["seeker_id"] == "strong"
    assert [m["vacancy_id"] for m in data["matches"]] == ["near", "remote"]
    assert data["matches"][1]["remote"] is True


def test_discover_excludes_ids():
    seeker = {
        **STRONG,
        "city_latitude": 50.4501,
        "city_longitude": 30.5234,
        "acceptableDistance": 30,
        "country_place_id": "UA",
    }
    remote = {**VACANCY, "id": "remote", "jobType": "Remote", "country_place_id": "UA"}
    response = client.post(
        "/discover",
        json={"seeker": seeker, "vacancies": [remote], "excluding_ids": ["remote"]},
    )
    assert response.status_code == 200
    assert response.json()["matches"] == []


@pytest.fixture
def strict_discovery_settings():
    app.dependency_overrides[get_settings] = lambda: Settings(minimum_match_score=200.0)
    yield
    app.dependency_overrides.clear()


def _located_seeker():
    return {
        **STRONG,
        "city_latitude": 50.4501,
        "city_longitude": 30.5234,
        "acceptableDistance": 30,
        "country_place_id": "UA",
    }


def test_discover_uses_configured_threshold(strict_discovery_settings):
    near = {**VACANCY, "id": "near", "city_latitude": 50.45, "city_longitude": 30.52}
    response = client.post("/discover", json={"seeker": _located_seeker(), "vacancies": [near]})
    assert response.status_code == 200
    assert response.json()["matches"] == []


def test_discover_rejects_oversized_vacancy_list(small_pool_settings):
    remote = {**VACANCY, "id": "remote", "jobType": "Remote", "country_place_id": "UA"}
    response = client.post(
        "/discover",
        json={"seeker": _located_seeker(), "vacancies": [remote, {**remote, "id": "remote-2"}]},
    )
    assert response.status_code == 400
