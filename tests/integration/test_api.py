"""
Integration Tests for the FastAPI Backend

Tests for API endpoints: analysis, patterns, risk scores, trends, health checks.
Uses async httpx for ASGI app testing.
"""
import pytest
import httpx

from labinsight.main import app
from labinsight.config import settings


@pytest.fixture
async def async_client():
    """Create async test client."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test"
    ) as client:
        yield client


@pytest.mark.asyncio
class TestHealthEndpoints:
    """Tests for health check endpoints."""

    async def test_root_endpoint(self, async_client):
        response = await async_client.get("/")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == settings.version

    async def test_health_endpoint(self, async_client):
        response = await async_client.get("/health")
        assert response.status_code == 200
        assert response.json()["uptime_seconds"] >= 0

    async def test_pattern_catalogue(self, async_client):
        response = await async_client.get("/api/v1/patterns")
        assert response.status_code == 200

        data = response.json()
        assert "systemic_inflammation" in data["pattern_types"]
        assert data["severities"] == ["low", "moderate", "high", "critical"]
        assert data["risk_domains"] == ["cardiovascular", "diabetes", "kidneyDisease"]
        assert len(data["detectors"]) == 7


@pytest.mark.asyncio
class TestAnalyzeEndpoint:
    """Tests for the full analysis endpoint."""

    async def test_scenario_a_camel_case(self, async_client):
        response = await async_client.post("/api/v1/labs/analyze", json={
            "patientId": "TEST-001",
            "labValues": [{"testName": "Fasting Glucose", "result": "145 mg/dL"}],
        })
        assert response.status_code == 200

        data = response.json()
        assert data["patient_id"] == "TEST-001"
        assert data["analysis_id"].startswith("LAB-")
        assert data["patterns"][0]["patternType"] == "diabetes"
        assert data["patterns"][0]["severity"] == "high"
        assert data["riskScores"]["diabetes"] == pytest.approx(50.0)
        assert data["summary"]["total_patterns"] == 1

    async def test_snake_case_body(self, async_client):
        response = await async_client.post("/api/v1/labs/analyze", json={
            "patient_id": "TEST-002",
            "lab_values": [
                {"test_name": "CRP", "result": "4.0 mg/L"},
                {"test_name": "ESR", "result": "35 mm/hr"},
            ],
        })
        assert response.status_code == 200

        patterns = response.json()["patterns"]
        assert [p["patternType"] for p in patterns] == ["systemic_inflammation"]
        assert patterns[0]["relatedTests"] == ["CRP", "ESR"]

    async def test_empty_batch(self, async_client):
        response = await async_client.post("/api/v1/labs/analyze", json={"labValues": []})
        assert response.status_code == 200

        data = response.json()
        assert data["patterns"] == []
        assert data["riskScores"] == {"cardiovascular": 0.0, "diabetes": 0.0, "kidneyDisease": 0.0}

    async def test_missing_result_field(self, async_client):
        response = await async_client.post("/api/v1/labs/analyze", json={
            "labValues": [{"testName": "TSH"}],
        })
        assert response.status_code == 422

    async def test_batch_size_limit(self, async_client, monkeypatch):
        monkeypatch.setattr(settings, "max_batch_size", 1)
        response = await async_client.post("/api/v1/labs/analyze", json={
            "labValues": [
                {"testName": "TSH", "result": "2.0"},
                {"testName": "CRP", "result": "1.0"},
            ],
        })
        assert response.status_code == 413
        assert response.json()["error"] == "LAB_INPUT_ERROR"


@pytest.mark.asyncio
class TestPartialEndpoints:
    """Pattern-only and score-only endpoints."""

    async def test_patterns_endpoint(self, async_client):
        response = await async_client.post("/api/v1/labs/patterns", json={
            "labValues": [{"testName": "Creatinine", "result": "3.2 mg/dL"}],
        })
        assert response.status_code == 200

        (pattern,) = response.json()["patterns"]
        assert pattern["patternType"] == "kidney_dysfunction"
        assert pattern["severity"] == "critical"

    async def test_risk_scores_endpoint(self, async_client):
        response = await async_client.post("/api/v1/labs/risk-scores", json={
            "labValues": [
                {"testName": "Creatinine", "result": "1.4 mg/dL"},
                {"testName": "eGFR", "result": "45"},
            ],
        })
        assert response.status_code == 200
        assert response.json()["riskScores"]["kidneyDisease"] == pytest.approx(60.0)


@pytest.mark.asyncio
class TestTrendEndpoint:
    """Tests for the trend analysis endpoint."""

    async def test_trends(self, async_client):
        response = await async_client.post("/api/v1/labs/trends", json={
            "history": [
                {"date": "2024-01-01", "labValues": [{"testName": "HbA1c", "result": "7.4 %"}]},
                {"date": "2024-07-01", "labValues": [{"testName": "HbA1c", "result": "6.6 %"}]},
            ],
        })
        assert response.status_code == 200

        (trend,) = response.json()["trends"]
        assert trend["testName"] == "HbA1c"
        assert trend["trend"] == "improving"
        assert trend["direction"] == "decreasing"

    async def test_invalid_date(self, async_client):
        response = await async_client.post("/api/v1/labs/trends", json={
            "history": [{"date": "last tuesday", "labValues": []}],
        })
        assert response.status_code == 422
        assert response.json()["error"] == "TREND_ERROR"


@pytest.mark.asyncio
class TestAPIDocumentation:
    """Tests for API documentation availability."""

    async def test_docs_endpoint(self, async_client):
        response = await async_client.get("/docs")
        assert response.status_code == 200


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
