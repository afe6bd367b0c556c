"""Integrations module for external generation APIs."""

from .script_generation import (
    GeneratedScript,
    PromptAnalysis,
    ScriptGenerator,
    ScriptSettings,
    analyze_prompt,
    build_contextual_script,
    build_fallback_script,
)
from .video_generation import (
    # Orchestration
    GenerationOrchestrator,
    build_providers,
    FallbackSelector,
    # Providers
    VideoProvider,
    RunwayProvider,
    LumaProvider,
    PikaProvider,
    OpenAIImageProvider,
    # Types
    GenerationSettings,
    GenerationRequest,
    GeneratedAsset,
    OrchestrationResult,
    GenerateVideoResponse,
    # Exceptions
    VideoGenerationError,
    InvalidPromptError,
)

__all__ = [
    # Orchestration
    "GenerationOrchestrator",
    "build_providers",
    "FallbackSelector",
    # Providers
    "VideoProvider",
    "RunwayProvider",
    "LumaProvider",
    "PikaProvider",
    "OpenAIImageProvider",
    # Types
    "GenerationSettings",
    "GenerationRequest",
    "GeneratedAsset",
    "OrchestrationResult",
    "GenerateVideoResponse",
    # Exceptions
    "VideoGenerationError",
    "InvalidPromptError",
    # Scripts
    "ScriptGenerator",
    "ScriptSettings",
    "GeneratedScript",
    "PromptAnalysis",
    "analyze_prompt",
    "build_contextual_script",
    "build_fallback_script",
]
