"""Abstract base classes for video generation providers."""

import asyncio
import logging
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Awaitable, Callable, Literal

import httpx

from ..exceptions import (
    ProviderJobFailedError,
    ProviderNotConfiguredError,
    ProviderRequestError,
    VideoGenerationTimeoutError,
)
from ..types import AssetKind, GeneratedAsset, GenerationSettings

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 120
DEFAULT_POLL_INTERVAL = 5.0
ERROR_BODY_LIMIT = 200

JobState = Literal["succeeded", "failed", "pending"]
ThumbnailStrategy = Callable[[str], str]
SleepFunc = Callable[[float], Awaitable[Any]]


def derive_thumbnail_url(video_url: str) -> str:
    """Best-effort thumbnail guess for providers that only return a video URL.

    Assumes the provider hosts a ``_thumb.jpg`` sibling next to the ``.mp4``.
    """
    return video_url.replace(".mp4", "_thumb.jpg")


def truncate(text: str, limit: int = ERROR_BODY_LIMIT) -> str:
    text = text.strip()
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


class VideoProvider(ABC):
    """Abstract base class for generation providers."""

    provider_name: str = "base"
    display_name: str = "Base"
    api_key_env: str | None = None
    REQUEST_TIMEOUT = 30.0

    def __init__(self, api_key: str | None = None, client: httpx.AsyncClient | None = None):
        """
        Initialize the provider.

        Args:
            api_key: Provider credential. Required; unconfigured providers are
                never built by the orchestrator.
            client: Optional shared httpx client. When omitted, each submit
                opens and closes its own client.
        """
        if not api_key:
            raise ProviderNotConfiguredError(self.provider_name, self.api_key_env)
        self.api_key = api_key
        self._client = client

    def _get_headers(self) -> dict[str, str]:
        """Get HTTP headers for API requests."""
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    @asynccontextmanager
    async def _http(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=self.REQUEST_TIMEOUT) as client:
            yield client

    def _raise_for_response(self, response: httpx.Response) -> None:
        if response.is_success:
            return
        raise ProviderRequestError(
            self.provider_name,
            response.status_code,
            truncate(response.text) or response.reason_phrase,
        )

    @abstractmethod
    async def submit(self, prompt: str, settings: GenerationSettings) -> GeneratedAsset:
        """
        Produce one asset for the prompt.

        Args:
            prompt: Non-empty creative prompt
            settings: Generation settings (platform, duration, style, ...)

        Returns:
            GeneratedAsset describing the finished artifact

        Raises:
            VideoGenerationError: Any failure; str(error) is the failure reason
        """
        ...


class AsyncJobProvider(VideoProvider):
    """Provider with a create-job call followed by status polling."""

    MAX_DURATION = 10

    def __init__(
        self,
        api_key: str | None = None,
        client: httpx.AsyncClient | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        sleep: SleepFunc | None = None,
        thumbnail_strategy: ThumbnailStrategy | None = None,
    ):
        super().__init__(api_key=api_key, client=client)
        self.max_attempts = max_attempts
        self.poll_interval = poll_interval
        self._sleep = sleep or asyncio.sleep
        self.thumbnail_strategy = thumbnail_strategy or derive_thumbnail_url

    @abstractmethod
    def _create_url(self) -> str: ...

    @abstractmethod
    def _status_url(self, job_id: str) -> str: ...

    @abstractmethod
    def _build_payload(self, prompt: str, settings: GenerationSettings) -> dict[str, Any]: ...

    def _extract_job_id(self, data: dict[str, Any]) -> str | None:
        job_id = data.get("id")
        return str(job_id) if job_id else None

    @abstractmethod
    def _parse_status(self, data: dict[str, Any]) -> tuple[JobState, str | None, str | None, str | None]:
        """Interpret a status payload.

        Returns:
            (state, video_url, thumbnail_url, failure_reason)
        """
        ...

    async def _create_job(self, client: httpx.AsyncClient, prompt: str, settings: GenerationSettings) -> str:
        payload = self._build_payload(prompt, settings)
        response = await client.post(self._create_url(), headers=self._get_headers(), json=payload)
        self._raise_for_response(response)

        try:
            data = response.json()
        except ValueError:
            raise ProviderRequestError(
                self.provider_name, response.status_code, f"invalid JSON: {truncate(response.text)}"
            )

        job_id = self._extract_job_id(data) if isinstance(data, dict) else None
        if not job_id:
            raise ProviderRequestError(
                self.provider_name,
                response.status_code,
                f"response did not include a job id: {truncate(response.text)}",
            )
        return job_id

    async def _wait_for_completion(self, client: httpx.AsyncClient, job_id: str) -> GeneratedAsset:
        for attempt in range(1, self.max_attempts + 1):
            await self._sleep(self.poll_interval)

            response = await client.get(self._status_url(job_id), headers=self._get_headers())
            if not response.is_success:
                logger.warning(
                    "[%s] status check %d for %s returned HTTP %d",
                    self.provider_name, attempt, job_id, response.status_code,
                )
                continue

            try:
                data = response.json()
            except ValueError:
                logger.warning("[%s] status check %d returned invalid JSON", self.provider_name, attempt)
                continue
            if not isinstance(data, dict):
                logger.warning("[%s] status check %d returned a non-object body", self.provider_name, attempt)
                continue

            state, video_url, thumbnail_url, reason = self._parse_status(data)
            if state == "succeeded":
                if not video_url:
                    raise ProviderJobFailedError(self.provider_name, job_id, "succeeded without an output URL")
                logger.info("[%s] job %s completed after %d checks", self.provider_name, job_id, attempt)
                return GeneratedAsset(
                    url=video_url,
                    thumbnail_url=thumbnail_url or self.thumbnail_strategy(video_url),
                    kind=AssetKind.VIDEO,
                    provider=self.provider_name,
                    platform=self.display_name,
                    job_id=job_id,
                )
            if state == "failed":
                raise ProviderJobFailedError(self.provider_name, job_id, reason)

        raise VideoGenerationTimeoutError(self.provider_name, job_id, self.max_attempts)

    async def submit(self, prompt: str, settings: GenerationSettings) -> GeneratedAsset:
        async with self._http() as client:
            job_id = await self._create_job(client, prompt, settings)
            logger.info("[%s] job %s submitted, polling every %ss", self.provider_name, job_id, self.poll_interval)
            return await self._wait_for_completion(client, job_id)
