"""
Integration tests for video generation with real API calls.

These tests require actual API keys and will incur costs.
Run with: pytest backend/tests/test_integration.py -v -s

Set environment variables:
- RUNWAY_API_KEY: For Runway tests
- LUMA_API_KEY: For Luma tests
- PIKA_API_KEY: For Pika tests
- OPENAI_API_KEY: For image fallback and script tests

Skip with: pytest -m "not integration"
"""

import asyncio
import json
import os
from datetime import datetime
from pathlib import Path

import pytest
from dotenv import load_dotenv

from app.config import Settings
from app.integrations.script_generation import ScriptGenerator, ScriptSettings
from app.integrations.video_generation import (
    GenerationOrchestrator,
    GenerationSettings,
    LumaProvider,
    OpenAIImageProvider,
    OrchestrationResult,
    RunwayProvider,
)

load_dotenv(Path(__file__).parent.parent / ".env")

# Mark all tests in this module as integration tests
pytestmark = pytest.mark.integration

PROMPT = "A golden retriever running along a beach at sunset, cinematic lighting"


def requires_env(name: str):
    return pytest.mark.skipif(not os.environ.get(name), reason=f"{name} not set")


def get_output_dir() -> Path:
    """Get or create the result output directory."""
    output_dir = Path(__file__).parent.parent / "test_outputs"
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


def save_result(name: str, result: OrchestrationResult) -> None:
    """Save orchestration result to a JSON file."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    filepath = get_output_dir() / f"{name}_{timestamp}.json"
    with open(filepath, "w") as f:
        json.dump(result.model_dump(mode="json"), f, indent=2)
    print(f"\nResult saved to: {filepath}")


class TestRealProviders:
    @requires_env("RUNWAY_API_KEY")
    @pytest.mark.asyncio
    async def test_runway(self):
        provider = RunwayProvider(api_key=os.environ["RUNWAY_API_KEY"])
        result = await GenerationOrchestrator([provider]).run(PROMPT, GenerationSettings(duration=5))
        save_result("runway", result)
        assert result.is_demo is False, result.errors

    @requires_env("LUMA_API_KEY")
    @pytest.mark.asyncio
    async def test_luma(self):
        provider = LumaProvider(api_key=os.environ["LUMA_API_KEY"])
        result = await GenerationOrchestrator([provider]).run(PROMPT, GenerationSettings(platform="youtube"))
        save_result("luma", result)
        assert result.is_demo is False, result.errors

    @requires_env("OPENAI_API_KEY")
    @pytest.mark.asyncio
    async def test_openai_image(self):
        provider = OpenAIImageProvider(api_key=os.environ["OPENAI_API_KEY"])
        result = await GenerationOrchestrator([provider]).run(PROMPT)
        save_result("openai_image", result)
        assert result.asset.kind == "static_image"

    @requires_env("OPENAI_API_KEY")
    @pytest.mark.asyncio
    async def test_openai_script(self):
        generator = ScriptGenerator(api_key=os.environ["OPENAI_API_KEY"])
        result = await generator.generate("morning routines", ScriptSettings(duration=30))
        print(result.script)
        assert result.platform == "OpenAI"


async def main():
    """Run the full configured chain once and print the result."""
    orchestrator = GenerationOrchestrator.from_config(Settings())
    print(f"Configured providers: {[p.provider_name for p in orchestrator.providers]}")
    result = await orchestrator.run(PROMPT)
    print(json.dumps(result.model_dump(mode="json"), indent=2))


if __name__ == "__main__":
    asyncio.run(main())
