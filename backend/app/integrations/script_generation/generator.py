"""Short-form video script writer backed by OpenAI chat completions."""

import logging
from inspect import cleandoc

from openai import AsyncOpenAI, OpenAIError

from ..video_generation.exceptions import InvalidPromptError, ScriptGenerationError
from .templates import build_fallback_script
from .types import GeneratedScript, ScriptSettings

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Generated using fallback method. Add OpenAI API key for enhanced AI scripts."
EMPTY_COMPLETION = "Failed to generate script"


def build_system_prompt(settings: ScriptSettings) -> str:
    return cleandoc(
        f"""
        You are a viral content script writer specializing in {settings.platform} videos.

        Create an engaging {settings.duration}-second script that:
        - Uses a {settings.hook_style} style hook to grab attention immediately
        - Maintains a {settings.tone} tone throughout
        - Targets {settings.audience} audience in the {settings.industry} industry
        - Written in {settings.language}
        - Ends with a {settings.cta} call-to-action
        - Optimized for {settings.platform} format and algorithm

        Structure the script with:
        1. HOOK (0-3s): Strong opening that stops scrolling
        2. BODY (middle): Main content with clear value
        3. CTA (last 3-5s): Clear call-to-action

        Make it conversational, engaging, and designed to go viral. Include timing cues in brackets like [0-3s], [4-15s], etc.
        """
    )


class ScriptGenerator:
    """Writes a script with OpenAI, or from the static template when no key is set."""

    MAX_TOKENS = 800
    TEMPERATURE = 0.8

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gpt-4o-mini",
        client: AsyncOpenAI | None = None,
    ):
        """
        Args:
            api_key: OpenAI API key. Without one (and without a client) the template is used.
            model: Chat completion model
            client: Optional preconfigured AsyncOpenAI client
        """
        self.model = model
        self._client = client
        if self._client is None and api_key:
            self._client = AsyncOpenAI(api_key=api_key)

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    async def generate(self, prompt: str, settings: ScriptSettings | None = None) -> GeneratedScript:
        """
        Write a script for the prompt.

        Raises:
            InvalidPromptError: If the prompt is empty or whitespace only
            ScriptGenerationError: If the OpenAI call fails
        """
        if not prompt or not prompt.strip():
            raise InvalidPromptError()
        if settings is None:
            settings = ScriptSettings()

        if self._client is None:
            logger.info("[SCRIPT] no OpenAI key configured, using template script")
            return GeneratedScript(
                script=build_fallback_script(prompt, settings),
                is_fallback=True,
                message=FALLBACK_MESSAGE,
            )

        try:
            completion = await self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": build_system_prompt(settings)},
                    {
                        "role": "user",
                        "content": f'Create a {settings.duration}-second {settings.platform} script about: "{prompt}"',
                    },
                ],
                max_tokens=self.MAX_TOKENS,
                temperature=self.TEMPERATURE,
            )
        except OpenAIError as exc:
            logger.warning("[SCRIPT] OpenAI request failed: %s", exc)
            raise ScriptGenerationError(str(exc)) from exc

        content = completion.choices[0].message.content if completion.choices else None
        return GeneratedScript(script=content or EMPTY_COMPLETION, platform="OpenAI")
