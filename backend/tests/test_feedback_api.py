"""
Survey API Backend: Feedback, Health & Middleware Endpoint Tests
==================================================================
"""

import pytest
from httpx import ASGITransport, AsyncClient

from survey_api.config import Settings
from survey_api.database import dispose_engine
from survey_api.main import create_app


FEEDBACK = {
    "username": "grace",
    "email": "grace@example.com",
    "rating": 4,
    "topic": "Survey builder is great",
}


class TestFeedbackEndpoints:

    @pytest.mark.asyncio
    async def test_empty_then_one_entry(self, test_client):
        empty = await test_client.get("/api/feedback")
        assert empty.status_code == 200
        assert empty.json() == {"success": True, "feedbacks": []}

        created = await test_client.post("/api/feedback", json=FEEDBACK)
        assert created.status_code == 201
        assert created.json()["success"] is True
        feedback_id = created.json()["feedbackId"]

        listed = (await test_client.get("/api/feedback")).json()["feedbacks"]
        assert len(listed) == 1
        entry = listed[0]
        assert entry["_id"] == feedback_id
        assert entry["username"] == "grace"
        assert entry["rating"] == 4
        assert entry["technical_issue"] is False
        assert entry["profileImg"] is None
        assert entry["submittedAt"]

    @pytest.mark.asyncio
    async def test_optional_fields_kept(self, test_client):
        await test_client.post(
            "/api/feedback",
            json={**FEEDBACK, "technical_issue": True, "profileImg": "https://img/g.png"},
        )

        entry = (await test_client.get("/api/feedback")).json()["feedbacks"][0]
        assert entry["technical_issue"] is True
        assert entry["profileImg"] == "https://img/g.png"

    @pytest.mark.asyncio
    async def test_missing_required_fields_returns_400(self, test_client):
        response = await test_client.post("/api/feedback", json={"username": "grace"})

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Missing required fields (username, email, rating, topic)."
        assert body["details"]["missing"] == ["email", "rating", "topic"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rating", [4.5, "five stars", 0])
    async def test_rating_stored_as_sent(self, test_client, rating):
        created = await test_client.post("/api/feedback", json={**FEEDBACK, "rating": rating})

        assert created.status_code == 201
        entry = (await test_client.get("/api/feedback")).json()["feedbacks"][0]
        assert entry["rating"] == rating

    @pytest.mark.asyncio
    async def test_wrongly_typed_field_uses_error_envelope(self, test_client):
        response = await test_client.post(
            "/api/feedback",
            json={**FEEDBACK, "username": {"first": "grace"}},
            headers={"X-Request-ID": "fb000001"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["request_id"] == "fb000001"
        assert body["details"]["errors"][0]["loc"] == ["body", "username"]


class TestAmbient:

    @pytest.mark.asyncio
    async def test_health_reports_database(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"

    @pytest.mark.asyncio
    async def test_health_unhealthy_when_database_unreachable(self, tmp_path):
        unreachable = Settings(
            database_url=f"sqlite+aiosqlite:///{tmp_path / 'missing-dir' / 'survey.db'}",
            log_level="WARNING",
            bcrypt_rounds=4,
        )
        app = create_app(unreachable)
        try:
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                response = await client.get("/health")
        finally:
            await dispose_engine(app.state.engine)

        assert response.status_code == 503
        body = response.json()
        assert body["status"] == "unhealthy"
        assert body["database"] == "disconnected"

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, test_client):
        response = await test_client.get("/api/feedback", headers={"X-Request-ID": "abc12345"})

        assert response.headers["X-Request-ID"] == "abc12345"

    @pytest.mark.asyncio
    async def test_request_id_generated_when_absent(self, test_client):
        response = await test_client.get("/api/surveys")

        assert len(response.headers["X-Request-ID"]) == 8
