"""Pytest configuration and shared fixtures for generation tests."""

import json
import os
from typing import Any, Callable
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from app.integrations.video_generation import (
    GeneratedAsset,
    GenerationSettings,
    VideoProvider,
)
from app.integrations.video_generation.exceptions import ProviderRequestError


PROVIDER_ENV_VARS = ("RUNWAY_API_KEY", "LUMA_API_KEY", "PIKA_API_KEY", "OPENAI_API_KEY")


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def tiktok_settings() -> GenerationSettings:
    """Vertical short-form settings."""
    return GenerationSettings(platform="tiktok", duration=30, style="cinematic")


@pytest.fixture
def youtube_settings() -> GenerationSettings:
    """Horizontal settings with a short duration."""
    return GenerationSettings(platform="youtube", duration=5, style="documentary")


# ============================================================================
# Transport Fixtures
# ============================================================================


class RecordingHandler:
    """httpx.MockTransport handler replaying queued responses per method."""

    def __init__(self, post: list[httpx.Response] | None = None, get: list[httpx.Response] | None = None):
        self.post_responses = list(post or [])
        self.get_responses = list(get or [])
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self.post_responses if request.method == "POST" else self.get_responses
        if not queue:
            raise AssertionError(f"Unexpected {request.method} {request.url}")
        # Keep repeating the last response once the queue runs dry
        return queue.pop(0) if len(queue) > 1 else queue[0]

    @property
    def posts(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == "POST"]

    @property
    def gets(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == "GET"]

    def post_json(self, index: int = 0) -> dict[str, Any]:
        return json.loads(self.posts[index].content)


@pytest.fixture
def recorder() -> type[RecordingHandler]:
    """The RecordingHandler class, for building per-test handlers."""
    return RecordingHandler


@pytest.fixture
def make_client() -> Callable[[RecordingHandler], httpx.AsyncClient]:
    """Factory for an httpx.AsyncClient backed by a RecordingHandler."""

    def factory(handler: RecordingHandler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture
def no_sleep() -> AsyncMock:
    """Stand-in for asyncio.sleep so poll loops run instantly."""
    return AsyncMock(return_value=None)


# ============================================================================
# Provider Fakes
# ============================================================================


class FakeProvider(VideoProvider):
    """Provider double returning a canned asset or raising a canned error."""

    def __init__(self, name: str, asset: GeneratedAsset | None = None, error: Exception | None = None):
        super().__init__(api_key="test-key")
        self.provider_name = name
        self.display_name = f"{name} Display"
        self._asset = asset
        self._error = error
        self.calls: list[tuple[str, GenerationSettings]] = []

    async def submit(self, prompt: str, settings: GenerationSettings) -> GeneratedAsset:
        self.calls.append((prompt, settings))
        if self._error is not None:
            raise self._error
        assert self._asset is not None
        return self._asset


@pytest.fixture
def fake_provider() -> type[FakeProvider]:
    """The FakeProvider class, for tests needing custom assets or errors."""
    return FakeProvider


@pytest.fixture
def succeeding_provider() -> Callable[[str], FakeProvider]:
    def factory(name: str) -> FakeProvider:
        return FakeProvider(
            name,
            asset=GeneratedAsset(
                url=f"https://cdn.example.com/{name}.mp4",
                thumbnail_url=f"https://cdn.example.com/{name}_thumb.jpg",
                provider=name,
                platform=f"{name} Display",
                job_id=f"{name}-job",
            ),
        )

    return factory


@pytest.fixture
def failing_provider() -> Callable[..., FakeProvider]:
    def factory(name: str, status_code: int = 500) -> FakeProvider:
        return FakeProvider(name, error=ProviderRequestError(name, status_code, "boom"))

    return factory


# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture
def clear_provider_keys():
    """Remove every provider key from the environment."""
    with patch.dict(os.environ, {}, clear=False):
        for name in PROVIDER_ENV_VARS:
            os.environ.pop(name, None)
        yield


@pytest.fixture
def mock_all_api_keys(clear_provider_keys):
    """Mock all provider API keys."""
    keys = {
        "RUNWAY_API_KEY": "runway-test-key",
        "LUMA_API_KEY": "luma-test-key",
        "PIKA_API_KEY": "pika-test-key",
        "OPENAI_API_KEY": "sk-test-key-12345",
    }
    with patch.dict(os.environ, keys):
        yield keys
