"""Pydantic models for script generation."""

from typing import Optional

from pydantic import BaseModel, Field

from ..video_generation.types import GenerationSettings


class ScriptSettings(GenerationSettings):
    """Generation settings plus the copywriting knobs used by the script writer."""

    audience: str = Field("general", description="Target audience")
    cta: str = Field("engagement", description="Call-to-action kind")
    hook_style: str = Field("question", description="Opening hook style")


class GeneratedScript(BaseModel):
    """A finished script and where it came from."""

    script: str
    platform: Optional[str] = Field(None, description="Service that wrote the script (None for the template)")
    is_fallback: bool = False
    message: Optional[str] = None


class PromptAnalysis(BaseModel):
    """Keyword buckets pulled out of a free-text prompt."""

    original_prompt: str
    visual_elements: list[str] = Field(default_factory=list)
    actions: list[str] = Field(default_factory=list)
    settings: list[str] = Field(default_factory=list)
    moods: list[str] = Field(default_factory=list)
    scene_description: str = ""
