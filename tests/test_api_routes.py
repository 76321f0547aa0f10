"""Tests for the mapping API routes."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from columnsmith.api.routes import router


@pytest.fixture
def client():
    """Create a test client for the API router."""
    app = FastAPI()
    app.include_router(router, prefix="/api")
    return TestClient(app)


class TestDetectEndpoint:
    """Test POST /api/mapping/detect."""

    def test_detect_with_fields(self, client):
        """Test auto-detection against an explicit field list."""
        response = client.post(
            "/api/mapping/detect",
            json={
                "headers": ["Admission No", "Student Name", "Class"],
                "fields": ["admissionNumber", "studentName", "class"],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["mapping"] == {"admissionNumber": 0, "studentName": 1, "class": 2}
        assert data["confidence"]["class"] == 1.0
        assert data["labels"]["admissionNumber"] == {"label": "Excellent", "tier": "excellent"}
        assert data["display_names"]["admissionNumber"] == "Admission Number"
        assert data["unmapped_headers"] == []
        assert data["unmapped_fields"] == []
        assert data["missing_required"] == []

    def test_detect_with_module(self, client):
        """Test auto-detection against an import profile."""
        response = client.post(
            "/api/mapping/detect",
            json={"headers": ["Student Name", "Favorite Color", None], "module": "students"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["mapping"] == {"studentName": 0}
        assert data["unmapped_headers"] == ["Favorite Color"]
        assert data["missing_required"] == ["admissionNumber", "class"]

    def test_detect_requires_fields_or_module(self, client):
        """Test that a request with neither fields nor module is rejected."""
        response = client.post("/api/mapping/detect", json={"headers": ["Class"]})

        assert response.status_code == 400

    def test_detect_unknown_module(self, client):
        """Test that an unknown module returns 404."""
        response = client.post(
            "/api/mapping/detect", json={"headers": ["Class"], "module": "payroll"}
        )

        assert response.status_code == 404

    def test_detect_validates_body(self, client):
        """Test that a malformed body is rejected by validation."""
        response = client.post("/api/mapping/detect", json={"fields": ["class"]})

        assert response.status_code == 422


class TestBestMatchEndpoint:
    """Test POST /api/mapping/best-match."""

    def test_best_match(self, client):
        """Test finding the best field for a header."""
        response = client.post(
            "/api/mapping/best-match",
            json={"header": "Adm No", "fields": ["studentName", "admissionNumber"]},
        )

        assert response.status_code == 200
        assert response.json() == {"field": "admissionNumber", "score": 1.0}

    def test_no_match(self, client):
        """Test that an unrelated header reports no field."""
        response = client.post(
            "/api/mapping/best-match",
            json={"header": "Favorite Color", "fields": ["admissionNumber"]},
        )

        assert response.json() == {"field": None, "score": 0.0}


class TestSuggestionsEndpoint:
    """Test POST /api/mapping/suggestions."""

    def test_suggestions(self, client):
        """Test suggestions skip excluded columns and are capped at three."""
        response = client.post(
            "/api/mapping/suggestions",
            json={
                "field": "phone",
                "headers": ["Tel", "Telephone", "Mobile", "Cell", "Contact"],
                "exclude_indices": [1],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["field"] == "phone"
        assert [s["index"] for s in data["suggestions"]] == [0, 2, 3]
        assert data["suggestions"][0] == {"index": 0, "header": "Tel", "score": 1.0}


class TestConfidenceEndpoint:
    """Test GET /api/mapping/confidence."""

    @pytest.mark.parametrize(
        "score,label",
        [(0.95, "Excellent"), (0.75, "Good"), (0.55, "Fair"), (0.3, "Low")],
    )
    def test_labels(self, client, score, label):
        """Test that each bucket is returned."""
        response = client.get("/api/mapping/confidence", params={"score": score})

        assert response.status_code == 200
        assert response.json()["label"] == label

    def test_missing_score(self, client):
        """Test that the score parameter is required."""
        assert client.get("/api/mapping/confidence").status_code == 422


class TestProfileEndpoints:
    """Test the profile listing endpoints."""

    def test_list_profiles(self, client):
        """Test listing all profiles."""
        response = client.get("/api/profiles")

        assert response.status_code == 200
        assert len(response.json()) == 8

    def test_read_profile(self, client):
        """Test reading one profile."""
        response = client.get("/api/profiles/fees")

        assert response.status_code == 200
        assert response.json()["required_fields"] == [
            "admissionNumber",
            "studentName",
            "feeType",
            "amount",
        ]

    def test_unknown_profile(self, client):
        """Test that an unknown profile returns 404."""
        assert client.get("/api/profiles/payroll").status_code == 404


class TestRegistryEndpoint:
    """Test GET /api/registry/{field}."""

    def test_known_field(self, client):
        """Test reading the aliases of a registered field."""
        response = client.get("/api/registry/gender")

        assert response.status_code == 200
        data = response.json()
        assert data["display_name"] == "Gender"
        assert data["aliases"] == ["gender", "sex", "m/f", "male/female", "boy/girl"]

    def test_unknown_field(self, client):
        """Test that an unregistered field returns 404."""
        assert client.get("/api/registry/favoriteColor").status_code == 404
