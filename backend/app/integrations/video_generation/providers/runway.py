"""Runway ML video generation provider implementation."""

from typing import Any

from ..types import GenerationSettings
from .base import AsyncJobProvider, JobState


class RunwayProvider(AsyncJobProvider):
    """Runway Gen-3 provider using the task-based REST API."""

    provider_name = "Runway"
    display_name = "Runway ML"
    api_key_env = "RUNWAY_API_KEY"
    BASE_URL = "https://api.runwayml.com/v1"
    MODEL = "gen3a_turbo"

    # Runway renders clips of at most 10 seconds
    MAX_DURATION = 10

    SUCCEEDED_STATES = {"SUCCEEDED", "COMPLETED"}
    FAILED_STATES = {"FAILED", "CANCELLED"}

    def _create_url(self) -> str:
        return f"{self.BASE_URL}/image_to_video"

    def _status_url(self, job_id: str) -> str:
        return f"{self.BASE_URL}/tasks/{job_id}"

    def _build_payload(self, prompt: str, settings: GenerationSettings) -> dict[str, Any]:
        return {
            "model": self.MODEL,
            "prompt_text": prompt,
            "duration": settings.clamp_duration(self.MAX_DURATION),
            "ratio": settings.aspect_ratio,
            "watermark": False,
        }

    def _parse_status(self, data: dict[str, Any]) -> tuple[JobState, str | None, str | None, str | None]:
        status = str(data.get("status", "")).upper()
        if status in self.SUCCEEDED_STATES:
            output = data.get("output") or []
            video_url = output[0] if isinstance(output, list) and output else None
            return "succeeded", video_url, None, None
        if status in self.FAILED_STATES:
            return "failed", None, None, data.get("failure") or data.get("error")
        return "pending", None, None, None
