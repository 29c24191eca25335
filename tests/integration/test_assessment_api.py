"""Integration tests for the readiness scoring HTTP API.

Requests go through the real FastAPI app with the built-in configuration.
Failure paths override ``get_assessment_service`` with a service whose
configuration provider raises.
"""

from typing import Any

import pytest
from fastapi import status
from httpx import AsyncClient

from marketing_ai_readiness.api.router import get_assessment_service
from marketing_ai_readiness.core.config import EngineConfig
from marketing_ai_readiness.core.errors import ConfigurationError
from marketing_ai_readiness.core.services import ReadinessAssessmentService
from marketing_ai_readiness.main import app

_SCORE_URL = "/api/v1/assessments/score"


def _broken_config() -> EngineConfig:
    raise ConfigurationError("Company size table must include 'small'")


@pytest.fixture()
def broken_config() -> None:
    """Route requests to a service with an invalid configuration."""
    app.dependency_overrides[get_assessment_service] = lambda: ReadinessAssessmentService(
        config_provider=_broken_config
    )


# ---------------------------------------------------------------------------
# POST /api/v1/assessments/score
# ---------------------------------------------------------------------------


class TestScoreEndpoint:
    """Tests for the scoring endpoint."""

    @pytest.mark.asyncio()
    async def test_empty_assessment(self, client: AsyncClient) -> None:
        """An empty b2b_saas assessment scores 60.0 and 'Developing'."""
        response = await client.post(_SCORE_URL, json={"industry": "b2b_saas"})
        assert response.status_code == status.HTTP_200_OK
        body: dict[str, Any] = response.json()
        assert body["overall_score"] == 60.0
        assert body["readiness_category"] == "Developing"
        assert body["percentile_estimate"] == 35
        assert body["degraded"] is False
        assert len(body["recommendations"]) == 6
        assert body["impact_estimate"]["disclaimer"]

    @pytest.mark.asyncio()
    async def test_full_request(self, client: AsyncClient) -> None:
        """Answers, activities, company size, and a cap all flow through."""
        response = await client.post(
            _SCORE_URL,
            json={
                "answers": {"PS_01": 5, "ACT_CONTENT_01": 4},
                "selected_activities": ["content_marketing", "pr_communications"],
                "industry": "manufacturing",
                "company_size": "medium",
                "max_results": 3,
            },
        )
        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["dimension_scores"]["people_skills"]["value"] == 100.0
        assert body["activity_scores"]["content_marketing"]["value"] == 80.0
        assert body["activity_scores"]["pr_communications"]["readiness_tier"] == "moderate"
        assert body["company_size"] == "medium"
        assert body["impact_estimate"]["team_size"] == 8
        assert len(body["recommendations"]) == 3

    @pytest.mark.asyncio()
    async def test_invalid_answer_returns_422(self, client: AsyncClient) -> None:
        """An option the question does not offer is rejected."""
        response = await client.post(_SCORE_URL, json={"answers": {"PS_01": 1}})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert "PS_01" in response.json()["detail"]

    @pytest.mark.asyncio()
    async def test_malformed_body_returns_422(self, client: AsyncClient) -> None:
        """Non-integer answers fail request validation."""
        response = await client.post(_SCORE_URL, json={"answers": {"PS_01": "often"}})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    @pytest.mark.asyncio()
    async def test_too_many_activities_returns_422(self, client: AsyncClient) -> None:
        """The activity selection list is bounded."""
        activities = [f"activity_{index}" for index in range(21)]
        response = await client.post(_SCORE_URL, json={"selected_activities": activities})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    @pytest.mark.asyncio()
    async def test_activity_answers_reach_dimension_scores(self, client: AsyncClient) -> None:
        """A selected activity's answers count toward their declared dimension."""
        response = await client.post(
            _SCORE_URL,
            json={
                "answers": {"ACT_CONTENT_01": 5},
                "selected_activities": ["content_marketing"],
            },
        )
        process = response.json()["dimension_scores"]["process_infrastructure"]
        assert process["answered_questions"] == 1
        assert process["value"] == 100.0

    @pytest.mark.asyncio()
    async def test_degraded_result(self, client: AsyncClient, broken_config: None) -> None:
        """A broken configuration returns the flagged fallback, not an error."""
        response = await client.post(
            _SCORE_URL, json={"industry": "healthcare", "company_size": "solo"}
        )
        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["degraded"] is True
        assert body["readiness_category"] == "Unavailable"
        assert body["overall_score"] == 50.0
        assert body["recommendations"] == []
        assert body["impact_estimate"] is None
        assert body["industry"] == "healthcare"


# ---------------------------------------------------------------------------
# Catalog endpoints
# ---------------------------------------------------------------------------


class TestCatalogEndpoints:
    """Tests for the catalog endpoints."""

    @pytest.mark.asyncio()
    async def test_industries(self, client: AsyncClient) -> None:
        """GET /industries lists the configured industry profiles."""
        response = await client.get("/api/v1/assessments/industries")
        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["total"] == 5
        saas = next(item for item in body["industries"] if item["key"] == "b2b_saas")
        assert saas["benchmark_average"] == 75.0

    @pytest.mark.asyncio()
    async def test_activities(self, client: AsyncClient) -> None:
        """GET /activities lists the marketing activities."""
        response = await client.get("/api/v1/assessments/activities")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["total"] == 10

    @pytest.mark.asyncio()
    async def test_company_sizes(self, client: AsyncClient) -> None:
        """GET /company-sizes lists the company size brackets."""
        response = await client.get("/api/v1/assessments/company-sizes")
        assert response.status_code == status.HTTP_200_OK
        keys = [item["key"] for item in response.json()["company_sizes"]]
        assert keys == ["solo", "small", "medium", "large"]

    @pytest.mark.asyncio()
    async def test_questions_for_selection(self, client: AsyncClient) -> None:
        """GET /questions includes only the selected activity and industry questions."""
        response = await client.get(
            "/api/v1/assessments/questions",
            params=[("activities", "content_marketing"), ("industry", "b2b_saas")],
        )
        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["total"] == 19
        ps_01 = next(item for item in body["questions"] if item["question_id"] == "PS_01")
        assert ps_01["options"] == [0, 2, 3, 4, 5]

    @pytest.mark.asyncio()
    async def test_core_questions_only(self, client: AsyncClient) -> None:
        """Without selections only the core questions are returned."""
        response = await client.get("/api/v1/assessments/questions")
        assert response.json()["total"] == 15

    @pytest.mark.asyncio()
    async def test_catalog_unavailable(self, client: AsyncClient, broken_config: None) -> None:
        """Catalogs return 503 when the configuration is invalid."""
        response = await client.get("/api/v1/assessments/industries")
        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


class TestHealth:
    """Tests for the liveness probe."""

    @pytest.mark.asyncio()
    async def test_health(self, client: AsyncClient) -> None:
        """GET /health reports the service and configuration state."""
        response = await client.get("/health")
        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["status"] == "ok"
        assert body["configuration"] == "ok"
