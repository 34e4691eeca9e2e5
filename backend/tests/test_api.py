"""HTTP shell tests with the narrative source disabled."""

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_narrative_source
from api.router import DOCX_MEDIA_TYPE, limiter
from main import app


@pytest.fixture
def client():
    limiter.enabled = False
    app.dependency_overrides[get_narrative_source] = lambda: None
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    limiter.enabled = True


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "narrative_source": "none"}


def test_match(client, job_spec_raw, candidate_profile_raw):
    response = client.post("/match", json={
        "jobSpec": job_spec_raw,
        "candidateProfile": candidate_profile_raw,
    })
    assert response.status_code == 200
    data = response.json()
    assert 0 <= data["fit_score"] <= 100
    assert data["verdict"]
    assert isinstance(data["highlights"], list)


def test_match_rejects_invalid_job_spec(client, candidate_profile_raw):
    response = client.post("/match", json={
        "jobSpec": {"title": "Designer", "mustHaves": "Figma"},
        "candidateProfile": candidate_profile_raw,
    })
    assert response.status_code == 422
    data = response.json()
    assert data["error"] == "Invalid job spec."
    assert [d["path"] for d in data["details"]] == ["mustHaves"]


def test_rewrite(client, job_spec_raw, candidate_profile_raw):
    response = client.post("/rewrite", json={
        "jobSpec": job_spec_raw,
        "candidateProfile": candidate_profile_raw,
        "matchOutput": {"fit_score": 64, "highlights": ["Figma"], "gaps": [], "verdict": "Partial"},
    })
    assert response.status_code == 200
    rewrite = response.json()["rewrite"]
    assert rewrite["headline"] == "Senior Product Designer"
    assert rewrite["contact"]["name"] == "Kerem Unce"


def test_parse(client):
    response = client.post("/parse", json={"resumeText": "Ana Li\nProduct Designer\nana@example.com"})
    assert response.status_code == 200
    assert response.json()["contact"]["email"] == "ana@example.com"


def test_parse_rejects_empty_text(client):
    response = client.post("/parse", json={"resumeText": "   "})
    assert response.status_code == 400


def test_parse_upload_rejects_unknown_type(client):
    response = client.post(
        "/parse/upload",
        files={"resume_file": ("resume.txt", b"Ana Li", "text/plain")},
    )
    assert response.status_code == 400


def test_export_resume(client, candidate_profile_raw):
    response = client.post("/export/resume", json={
        "candidateProfile": candidate_profile_raw,
        "optimizedResume": {
            "contact": {"name": "Kerem Ünce"},
            "headline": "Product Designer",
            "summary": "Designer — researcher.",
            "skills": ["Figma"],
        },
    })
    assert response.status_code == 200
    assert response.headers["content-type"] == DOCX_MEDIA_TYPE
    assert response.content.startswith(b"PK")


def test_export_match(client, candidate_profile_raw):
    response = client.post("/export/match", json={
        "candidateProfile": candidate_profile_raw,
        "matchOutput": {"fit_score": 50, "verdict": "Partial"},
    })
    assert response.status_code == 200
    assert "match-report.docx" in response.headers["content-disposition"]


def test_export_match_rejects_invalid_output(client, candidate_profile_raw):
    response = client.post("/export/match", json={
        "candidateProfile": candidate_profile_raw,
        "matchOutput": {"fit_score": -5, "verdict": "Partial"},
    })
    assert response.status_code == 422
    assert response.json()["details"][0]["path"] == "fit_score"
