"""Video generation module: providers, demo fallback and the orchestrator tying them together."""

from .exceptions import (
    InvalidPromptError,
    ProviderJobFailedError,
    ProviderNotConfiguredError,
    ProviderRequestError,
    ScriptGenerationError,
    VideoGenerationError,
    VideoGenerationTimeoutError,
)
from .fallback import DemoCategory, FallbackSelector
from .orchestrator import GenerationOrchestrator, build_providers
from .providers import (
    AsyncJobProvider,
    LumaProvider,
    OpenAIImageProvider,
    PikaProvider,
    RunwayProvider,
    VideoProvider,
    derive_thumbnail_url,
)
from .types import (
    AssetKind,
    GeneratedAsset,
    GenerateVideoResponse,
    GenerationRequest,
    GenerationSettings,
    OrchestrationResult,
    ProviderAttempt,
)

__all__ = [
    # Orchestration
    "GenerationOrchestrator",
    "build_providers",
    "FallbackSelector",
    "DemoCategory",
    # Providers
    "VideoProvider",
    "AsyncJobProvider",
    "RunwayProvider",
    "LumaProvider",
    "PikaProvider",
    "OpenAIImageProvider",
    "derive_thumbnail_url",
    # Types
    "AssetKind",
    "GenerationSettings",
    "GenerationRequest",
    "GeneratedAsset",
    "ProviderAttempt",
    "OrchestrationResult",
    "GenerateVideoResponse",
    # Exceptions
    "VideoGenerationError",
    "InvalidPromptError",
    "ProviderNotConfiguredError",
    "ProviderRequestError",
    "ProviderJobFailedError",
    "VideoGenerationTimeoutError",
    "ScriptGenerationError",
]
