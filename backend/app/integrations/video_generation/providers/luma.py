"""Luma AI (Dream Machine) video generation provider implementation."""

from typing import Any

from ..types import GenerationSettings
from .base import AsyncJobProvider, JobState


class LumaProvider(AsyncJobProvider):
    """Luma Dream Machine provider."""

    provider_name = "LumaAI"
    display_name = "Luma AI"
    api_key_env = "LUMA_API_KEY"
    BASE_URL = "https://api.lumalabs.ai/dream-machine/v1"
    MODEL = "ray-2"
    MAX_DURATION = 9

    def _create_url(self) -> str:
        return f"{self.BASE_URL}/generations"

    def _status_url(self, job_id: str) -> str:
        return f"{self.BASE_URL}/generations/{job_id}"

    def _build_payload(self, prompt: str, settings: GenerationSettings) -> dict[str, Any]:
        return {
            "prompt": prompt,
            "model": self.MODEL,
            "aspect_ratio": settings.aspect_ratio,
            "duration": f"{settings.clamp_duration(self.MAX_DURATION)}s",
            "loop": False,
        }

    def _parse_status(self, data: dict[str, Any]) -> tuple[JobState, str | None, str | None, str | None]:
        state = str(data.get("state", "")).lower()
        if state == "completed":
            assets = data.get("assets") or {}
            return "succeeded", assets.get("video"), assets.get("thumbnail"), None
        if state == "failed":
            return "failed", None, None, data.get("failure_reason")
        return "pending", None, None, None
