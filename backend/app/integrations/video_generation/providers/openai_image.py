"""OpenAI image generation used as a last-resort static substitute for video."""

from typing import Any

from ..exceptions import ProviderRequestError
from ..types import AssetKind, GeneratedAsset, GenerationSettings
from .base import VideoProvider, truncate


class OpenAIImageProvider(VideoProvider):
    """Single synchronous image generation call, no polling."""

    provider_name = "OpenAI-image-fallback"
    display_name = "OpenAI DALL-E"
    api_key_env = "OPENAI_API_KEY"
    BASE_URL = "https://api.openai.com/v1"
    MODEL = "dall-e-3"
    REQUEST_TIMEOUT = 120.0

    SIZE_MAP = {
        "9:16": "1024x1792",
        "16:9": "1792x1024",
    }

    def _build_payload(self, prompt: str, settings: GenerationSettings) -> dict[str, Any]:
        return {
            "model": self.MODEL,
            "prompt": f"{settings.style} style video frame: {prompt}",
            "n": 1,
            "size": self.SIZE_MAP[settings.aspect_ratio],
        }

    async def submit(self, prompt: str, settings: GenerationSettings) -> GeneratedAsset:
        async with self._http() as client:
            response = await client.post(
                f"{self.BASE_URL}/images/generations",
                headers=self._get_headers(),
                json=self._build_payload(prompt, settings),
            )
        self._raise_for_response(response)

        try:
            data = response.json()
        except ValueError:
            raise ProviderRequestError(
                self.provider_name, response.status_code, f"invalid JSON: {truncate(response.text)}"
            )

        images = data.get("data") if isinstance(data, dict) else None
        image_url = images[0].get("url") if images else None
        if not image_url:
            raise ProviderRequestError(
                self.provider_name,
                response.status_code,
                f"response did not include an image url: {truncate(response.text)}",
            )

        return GeneratedAsset(
            url=image_url,
            thumbnail_url=image_url,
            kind=AssetKind.STATIC_IMAGE,
            provider=self.provider_name,
            platform=self.display_name,
        )
