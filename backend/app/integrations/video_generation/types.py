"""Pydantic models for video generation inputs and outputs."""

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


VERTICAL_PLATFORMS = frozenset({"tiktok", "instagram"})


class GenerationSettings(BaseModel):
    """Creative settings sent alongside a prompt.

    Defaults mirror the dashboard's default form values. Unknown keys are kept
    so callers can pass provider-specific extras through untouched.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    platform: str = Field("tiktok", description="Target platform (tiktok, instagram, youtube, ...)")
    duration: int = Field(30, description="Requested video length in seconds")
    style: str = Field("cinematic", description="Visual style")
    quality: str = Field("hd", description="Quality preset (hd, 4k, standard)")
    language: str = Field("english", description="Narration language")
    voice: str = Field("alloy", description="Narration voice")
    pov_style: str = Field("first-person", alias="povStyle", description="Point of view")
    industry: str = Field("general", description="Industry vertical")
    tone: str = Field("engaging", description="Tone of voice")

    @property
    def aspect_ratio(self) -> Literal["9:16", "16:9"]:
        """Vertical for short-form feeds, horizontal otherwise."""
        return "9:16" if self.platform.lower() in VERTICAL_PLATFORMS else "16:9"

    def clamp_duration(self, maximum: int) -> int:
        """Clamp the requested duration into a provider's supported range."""
        return max(1, min(self.duration, maximum))


class GenerationRequest(BaseModel):
    """A single generate-video call."""

    model_config = ConfigDict(frozen=True)

    prompt: str = Field("", description="Text description of the desired video")
    settings: GenerationSettings = Field(default_factory=GenerationSettings)


class AssetKind(str, Enum):
    """What kind of artifact a provider produced."""

    VIDEO = "video"
    STATIC_IMAGE = "static_image"


class GeneratedAsset(BaseModel):
    """The one artifact returned from an orchestration run."""

    url: str = Field(..., description="Location of the produced artifact")
    thumbnail_url: str = Field(..., description="Preview image location")
    kind: AssetKind = Field(AssetKind.VIDEO, description="Video or static image substitute")
    provider: Optional[str] = Field(None, description="Machine name of the producing provider")
    platform: Optional[str] = Field(None, description="Display name of the producing provider")
    job_id: Optional[str] = Field(None, description="Provider job/task identifier")
    is_demo: bool = Field(False, description="True for canned fallback assets")
    description: Optional[str] = Field(None, description="Human description (demo assets)")


class ProviderAttempt(BaseModel):
    """Record of one provider attempt within a run."""

    provider_name: str
    configured: bool = True
    outcome: Literal["success", "failure"]
    reason: Optional[str] = None
    asset: Optional[GeneratedAsset] = None


class OrchestrationResult(BaseModel):
    """Outcome of GenerationOrchestrator.run."""

    success: bool = True
    is_demo: bool
    asset: GeneratedAsset
    errors: list[str] = Field(default_factory=list, description="Per-provider failures, in attempt order")
    attempts: list[ProviderAttempt] = Field(default_factory=list)
    message: str = ""

    @property
    def all_providers_failed(self) -> bool:
        return self.is_demo and len(self.attempts) > 0


class GenerateVideoResponse(BaseModel):
    """Wire shape returned by the generate-video endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    video_url: Optional[str] = Field(None, alias="videoUrl")
    thumbnail_url: Optional[str] = Field(None, alias="thumbnailUrl")
    is_demo: bool = Field(False, alias="isDemo")
    is_static_image: bool = Field(False, alias="isStaticImage")
    platform: Optional[str] = None
    message: str = ""
    errors: list[str] = Field(default_factory=list)
    task_id: Optional[str] = Field(None, alias="taskId")
    error: Optional[str] = None

    @classmethod
    def from_result(cls, result: OrchestrationResult) -> "GenerateVideoResponse":
        asset = result.asset
        return cls(
            success=result.success,
            video_url=asset.url,
            thumbnail_url=asset.thumbnail_url,
            is_demo=result.is_demo,
            is_static_image=asset.kind == AssetKind.STATIC_IMAGE,
            platform=asset.platform,
            message=result.message,
            errors=list(result.errors),
            task_id=asset.job_id,
        )
