"""Pika Labs video generation provider implementation."""

from typing import Any

from ..types import GenerationSettings
from .base import AsyncJobProvider, JobState


class PikaProvider(AsyncJobProvider):
    """Pika Labs provider."""

    provider_name = "PikaLabs"
    display_name = "Pika Labs"
    api_key_env = "PIKA_API_KEY"
    BASE_URL = "https://api.pika.art/v1"
    MAX_DURATION = 10
    FRAME_RATE = 24

    def _create_url(self) -> str:
        return f"{self.BASE_URL}/generate"

    def _status_url(self, job_id: str) -> str:
        return f"{self.BASE_URL}/videos/{job_id}"

    def _build_payload(self, prompt: str, settings: GenerationSettings) -> dict[str, Any]:
        return {
            "promptText": prompt,
            "style": settings.style,
            "duration": settings.clamp_duration(self.MAX_DURATION),
            "options": {
                "aspectRatio": settings.aspect_ratio,
                "frameRate": self.FRAME_RATE,
            },
        }

    def _extract_job_id(self, data: dict[str, Any]) -> str | None:
        job_id = data.get("id") or data.get("job_id")
        return str(job_id) if job_id else None

    def _parse_status(self, data: dict[str, Any]) -> tuple[JobState, str | None, str | None, str | None]:
        status = str(data.get("status", "")).lower()
        if status in ("finished", "completed"):
            return "succeeded", data.get("videoUrl"), data.get("thumbnailUrl"), None
        if status in ("failed", "error"):
            return "failed", None, None, data.get("error")
        return "pending", None, None, None
