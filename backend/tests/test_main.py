"""Tests for the FastAPI endpoints."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.integrations.script_generation import ScriptGenerator
from app.integrations.video_generation import GenerationOrchestrator
from app.integrations.video_generation.exceptions import ScriptGenerationError
from app.integrations.video_generation.fallback import CHARACTER, URBAN
from app.main import app, get_orchestrator, get_script_generator


@pytest.fixture
def client(clear_provider_keys):
    app.dependency_overrides[get_settings] = lambda: Settings(_env_file=None)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestGenerateVideo:
    """Tests for POST /generate-video."""

    def test_demo_when_no_providers(self, client):
        response = client.post(
            "/generate-video",
            json={"prompt": "a walk in the rain", "settings": {"platform": "tiktok", "duration": 15}},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["isDemo"] is True
        assert body["isStaticImage"] is False
        assert body["videoUrl"] == URBAN.video_url
        assert body["thumbnailUrl"] == URBAN.thumbnail_url
        assert body["errors"] == []
        assert body["platform"] is None

    def test_empty_prompt_is_400(self, client):
        response = client.post("/generate-video", json={"prompt": "  ", "settings": {}})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Prompt is required"}

    def test_missing_prompt_is_400(self, client):
        response = client.post("/generate-video", json={"settings": {"platform": "youtube"}})
        assert response.status_code == 400

    def test_real_result(self, client, succeeding_provider, failing_provider):
        orchestrator = GenerationOrchestrator([failing_provider("Runway"), succeeding_provider("LumaAI")])
        app.dependency_overrides[get_orchestrator] = lambda: orchestrator

        response = client.post("/generate-video", json={"prompt": "A forest at dawn"})

        body = response.json()
        assert response.status_code == 200
        assert body["isDemo"] is False
        assert body["platform"] == "LumaAI Display"
        assert body["taskId"] == "LumaAI-job"
        assert len(body["errors"]) == 1
        assert body["errors"][0].startswith("Runway:")

    def test_unexpected_error_degrades_to_demo(self, client):
        orchestrator = GenerationOrchestrator([])
        orchestrator.run = AsyncMock(side_effect=RuntimeError("database offline"))
        app.dependency_overrides[get_orchestrator] = lambda: orchestrator

        response = client.post("/generate-video", json={"prompt": "A forest at dawn"})

        body = response.json()
        assert response.status_code == 200
        assert body["success"] is True
        assert body["isDemo"] is True
        assert body["videoUrl"] == CHARACTER.video_url
        assert body["error"] == "database offline"
        assert body["errors"] == ["database offline"]
        assert body["message"] == "Demo video provided due to error: database offline"


class TestGenerateScript:
    """Tests for POST /generate-script."""

    def test_template_script(self, client):
        response = client.post("/generate-script", json={"prompt": "budget travel", "settings": {"duration": 15}})

        body = response.json()
        assert response.status_code == 200
        assert body["success"] is True
        assert "budget travel" in body["script"]
        assert "fallback method" in body["message"]
        assert "platform" not in body

    def test_openai_script(self, client):
        generator = MagicMock(spec=ScriptGenerator)
        generator.generate = AsyncMock(
            return_value=MagicMock(script="AI script", platform="OpenAI", is_fallback=False, message=None)
        )
        app.dependency_overrides[get_script_generator] = lambda: generator

        response = client.post(
            "/generate-script", json={"prompt": "budget travel", "settings": {"platform": "youtube", "cta": "follow"}}
        )

        body = response.json()
        assert body["script"] == "AI script"
        assert body["platform"] == "OpenAI"
        assert body["settings"]["platform"] == "youtube"
        assert body["settings"]["cta"] == "follow"

    def test_empty_prompt_is_400(self, client):
        response = client.post("/generate-script", json={"prompt": ""})
        assert response.status_code == 400

    def test_openai_failure_is_500(self, client):
        generator = MagicMock(spec=ScriptGenerator)
        generator.generate = AsyncMock(side_effect=ScriptGenerationError("rate limited"))
        app.dependency_overrides[get_script_generator] = lambda: generator

        response = client.post("/generate-script", json={"prompt": "budget travel"})

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Script generation failed: rate limited"}


class TestAnalyzePrompt:
    def test_analysis(self, client):
        response = client.post("/analyze-prompt", json={"prompt": "man walking in the city"})

        body = response.json()
        assert body["analysis"]["settings"] == ["city"]
        assert "Every step tells a story" in body["script"]
