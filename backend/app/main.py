"""FastAPI entrypoint exposing the generate-video and generate-script endpoints."""

from __future__ import annotations

from dotenv import load_dotenv

load_dotenv()

import logging
from typing import Any

from fastapi import Depends, FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from starlette.responses import JSONResponse

from .config import Settings, get_settings
from .integrations.script_generation import (
    ScriptGenerator,
    ScriptSettings,
    analyze_prompt,
    build_contextual_script,
)
from .integrations.video_generation import (
    GenerateVideoResponse,
    GenerationOrchestrator,
    GenerationRequest,
    InvalidPromptError,
    ScriptGenerationError,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="Video Generation API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)


class GenerateScriptBody(BaseModel):
    prompt: str = ""
    settings: ScriptSettings = Field(default_factory=ScriptSettings)


def get_orchestrator(settings: Settings = Depends(get_settings)) -> GenerationOrchestrator:
    """Dependency building an orchestrator from whichever providers are configured."""
    return GenerationOrchestrator.from_config(settings)


def get_script_generator(settings: Settings = Depends(get_settings)) -> ScriptGenerator:
    return ScriptGenerator(api_key=settings.openai_api_key, model=settings.openai_script_model)


def _prompt_required() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "error": "Prompt is required"},
    )


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@app.post("/generate-video", response_model=GenerateVideoResponse)
async def generate_video(
    body: GenerationRequest,
    orchestrator: GenerationOrchestrator = Depends(get_orchestrator),
) -> Any:
    """Generate a video, degrading to a demo asset instead of failing.

    Provider failures never produce an error status: the response is always
    200 with ``isDemo`` and ``errors`` telling the client what happened. Only
    an empty prompt is rejected.
    """
    logger.info("[GENERATE] prompt=%r platform=%s", body.prompt[:80], body.settings.platform)
    try:
        result = await orchestrator.run(body.prompt, body.settings)
    except InvalidPromptError:
        return _prompt_required()
    except Exception as exc:
        logger.exception("[GENERATE] orchestration failed, serving demo video")
        asset = orchestrator.fallback.error_asset()
        message = str(exc) or exc.__class__.__name__
        return GenerateVideoResponse(
            success=True,
            video_url=asset.url,
            thumbnail_url=asset.thumbnail_url,
            is_demo=True,
            message=f"Demo video provided due to error: {message}",
            errors=[message],
            error=message,
        )

    return GenerateVideoResponse.from_result(result)


@app.post("/generate-script")
async def generate_script(
    body: GenerateScriptBody,
    generator: ScriptGenerator = Depends(get_script_generator),
) -> Any:
    """Write a short-form script, falling back to the template without an OpenAI key."""
    try:
        result = await generator.generate(body.prompt, body.settings)
    except InvalidPromptError:
        return _prompt_required()
    except ScriptGenerationError as exc:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": exc.message},
        )

    payload: dict[str, Any] = {"success": True, "script": result.script}
    if result.is_fallback:
        payload["message"] = result.message
    else:
        payload["platform"] = result.platform
        payload["settings"] = body.settings.model_dump(by_alias=True)
    return payload


@app.post("/analyze-prompt")
async def analyze(body: GenerationRequest) -> Any:
    """Keyword breakdown of the prompt plus the preview script shown before generating."""
    if not body.prompt.strip():
        return _prompt_required()
    analysis = analyze_prompt(body.prompt)
    return {
        "success": True,
        "analysis": analysis.model_dump(),
        "script": build_contextual_script(analysis, body.settings),
    }
