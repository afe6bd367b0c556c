"""Tries generation providers in priority order and always returns one asset."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Sequence

import httpx

from .exceptions import InvalidPromptError, VideoGenerationError
from .fallback import FallbackSelector
from .providers import (
    LumaProvider,
    OpenAIImageProvider,
    PikaProvider,
    RunwayProvider,
    VideoProvider,
)
from .types import (
    AssetKind,
    GeneratedAsset,
    GenerationSettings,
    OrchestrationResult,
    ProviderAttempt,
)

if TYPE_CHECKING:
    from app.config import Settings

logger = logging.getLogger(__name__)


def build_providers(
    config: Settings,
    client: httpx.AsyncClient | None = None,
) -> list[VideoProvider]:
    """
    Build the configured providers in fixed priority order.

    Order is Runway, Luma, Pika, then the OpenAI image fallback. Providers
    without a key are left out entirely.

    Args:
        config: Application settings holding keys and poll knobs
        client: Optional shared httpx client passed to every provider

    Returns:
        Ordered list of ready-to-use providers (possibly empty)
    """
    poll_options = {
        "max_attempts": config.poll_max_attempts,
        "poll_interval": config.poll_interval,
    }
    providers: list[VideoProvider] = []
    if config.runway_api_key:
        providers.append(RunwayProvider(api_key=config.runway_api_key, client=client, **poll_options))
    if config.luma_api_key:
        providers.append(LumaProvider(api_key=config.luma_api_key, client=client, **poll_options))
    if config.pika_api_key:
        providers.append(PikaProvider(api_key=config.pika_api_key, client=client, **poll_options))
    if config.openai_api_key:
        providers.append(OpenAIImageProvider(api_key=config.openai_api_key, client=client))
    return providers


class GenerationOrchestrator:
    """
    Runs one generation request across an ordered list of providers.

    The first provider to succeed wins and later providers are never called.
    When every provider fails, or none is configured, a demo asset picked from
    the prompt is returned instead. Provider failures are collected in
    attempt order and never raised.
    """

    def __init__(
        self,
        providers: Sequence[VideoProvider],
        fallback: FallbackSelector | None = None,
        run_timeout: float | None = None,
    ):
        """
        Args:
            providers: Providers to try, highest priority first
            fallback: Demo asset selector. Uses the default keyword table if not provided.
            run_timeout: Optional global deadline in seconds across all attempts
        """
        self.providers = list(providers)
        self.fallback = fallback or FallbackSelector()
        self.run_timeout = run_timeout

    @classmethod
    def from_config(
        cls,
        config: Settings,
        client: httpx.AsyncClient | None = None,
    ) -> GenerationOrchestrator:
        return cls(build_providers(config, client=client), run_timeout=config.run_timeout)

    async def _attempt(self, provider: VideoProvider, prompt: str, settings: GenerationSettings,
                       timeout: float | None) -> GeneratedAsset:
        if timeout is None:
            return await provider.submit(prompt, settings)
        return await asyncio.wait_for(provider.submit(prompt, settings), timeout=timeout)

    async def run(self, prompt: str, settings: GenerationSettings | None = None) -> OrchestrationResult:
        """
        Generate one asset for the prompt.

        Args:
            prompt: Creative prompt; must contain non-whitespace text
            settings: Generation settings. Uses defaults if not provided.

        Returns:
            OrchestrationResult with exactly one asset

        Raises:
            InvalidPromptError: If the prompt is empty or whitespace only
        """
        if not prompt or not prompt.strip():
            raise InvalidPromptError()
        if settings is None:
            settings = GenerationSettings()

        errors: list[str] = []
        attempts: list[ProviderAttempt] = []
        deadline = time.monotonic() + self.run_timeout if self.run_timeout is not None else None

        for index, provider in enumerate(self.providers):
            remaining = None
            if deadline is not None:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    skipped = [p.provider_name for p in self.providers[index:]]
                    logger.warning("[ORCHESTRATOR] run deadline reached, skipping %s", ", ".join(skipped))
                    break

            logger.info("[ORCHESTRATOR] trying %s", provider.provider_name)
            deadline_hit = False
            try:
                asset = await self._attempt(provider, prompt, settings, remaining)
            except asyncio.TimeoutError:
                reason = "timed out (run deadline exceeded)"
                deadline_hit = True
                logger.warning("[ORCHESTRATOR] %s cut short by run deadline", provider.provider_name)
            except VideoGenerationError as exc:
                reason = str(exc)
                logger.warning("[ORCHESTRATOR] %s failed: %s", provider.provider_name, reason)
            except httpx.HTTPError as exc:
                reason = f"network error: {exc.__class__.__name__}: {exc}"
                logger.warning("[ORCHESTRATOR] %s failed: %s", provider.provider_name, reason)
            except Exception as exc:
                reason = f"unexpected error: {exc.__class__.__name__}: {exc}"
                logger.exception("[ORCHESTRATOR] %s raised unexpectedly", provider.provider_name)
            else:
                attempts.append(ProviderAttempt(provider_name=provider.provider_name, outcome="success", asset=asset))
                logger.info("[ORCHESTRATOR] %s succeeded after %d failed attempts", provider.provider_name, len(errors))
                return OrchestrationResult(
                    success=True,
                    is_demo=False,
                    asset=asset,
                    errors=errors,
                    attempts=attempts,
                    message=self._success_message(asset),
                )

            errors.append(f"{provider.provider_name}: {reason}")
            attempts.append(ProviderAttempt(provider_name=provider.provider_name, outcome="failure", reason=reason))
            if deadline_hit:
                skipped = [p.provider_name for p in self.providers[index + 1:]]
                if skipped:
                    logger.warning("[ORCHESTRATOR] run deadline reached, skipping %s", ", ".join(skipped))
                break

        asset = self.fallback.pick(prompt)
        if attempts:
            message = f"Demo video provided because all {len(attempts)} configured providers failed."
            logger.warning("[ORCHESTRATOR] all providers failed, serving demo asset: %s", "; ".join(errors))
        else:
            message = (
                "Demo video generated based on your prompt. "
                "Configure a video provider API key for real AI video generation."
            )
            logger.info("[ORCHESTRATOR] no providers configured, serving demo asset")

        return OrchestrationResult(
            success=True,
            is_demo=True,
            asset=asset,
            errors=errors,
            attempts=attempts,
            message=message,
        )

    @staticmethod
    def _success_message(asset: GeneratedAsset) -> str:
        if asset.kind == AssetKind.STATIC_IMAGE:
            return f"Image generated with {asset.platform} as a static fallback"
        return f"Video generated with {asset.platform}"
