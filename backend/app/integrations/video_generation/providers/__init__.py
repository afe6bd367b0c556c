"""Video generation provider implementations."""

from .base import AsyncJobProvider, VideoProvider, derive_thumbnail_url
from .luma import LumaProvider
from .openai_image import OpenAIImageProvider
from .pika import PikaProvider
from .runway import RunwayProvider

__all__ = [
    "VideoProvider",
    "AsyncJobProvider",
    "RunwayProvider",
    "LumaProvider",
    "PikaProvider",
    "OpenAIImageProvider",
    "derive_thumbnail_url",
]
