"""Keyword analysis of prompts and the contextual preview script built from it."""

import re

from ..video_generation.types import GenerationSettings
from .types import PromptAnalysis

WEATHER = {"rain", "sunny", "snow", "storm", "cloudy", "foggy"}
PEOPLE = {"man", "woman", "child", "person", "people", "walking", "running", "sitting"}
LOCATIONS = {"city", "street", "park", "beach", "forest", "mountain", "building", "house"}
ACTIONS = {"walking", "running", "dancing", "working", "playing", "eating", "drinking"}
MOODS = {"old", "modern", "vintage", "futuristic", "peaceful", "busy", "quiet", "chaotic"}

PLATFORM_ENDINGS = {
    "tiktok": "💫 Perfect for your FYP! #fyp #viral #cinematic",
    "instagram": "📸 Story-worthy content! #reels #instagram #aesthetic",
    "youtube": "🎥 Subscribe for more! #shorts #youtube #content",
}
DEFAULT_ENDING = "✨ Amazing content awaits!"


def analyze_prompt(prompt: str) -> PromptAnalysis:
    """Split the prompt on whitespace and sort exact word matches into buckets.

    Unlike the demo fallback, matching here is per word, so "rainy" is not "rain".
    """
    visual_elements: list[str] = []
    actions: list[str] = []
    settings: list[str] = []
    moods: list[str] = []

    for word in re.split(r"\s+", prompt.lower()):
        if word in WEATHER:
            visual_elements.append(f"{word} weather")
        if word in PEOPLE:
            visual_elements.append(word)
        if word in LOCATIONS:
            settings.append(word)
        if word in ACTIONS:
            actions.append(word)
        if word in MOODS:
            moods.append(word)

    scene_description = (
        f"Scene showing {', '.join(visual_elements)} with {', '.join(actions)} "
        f"in {', '.join(settings)} setting, {', '.join(moods)} atmosphere"
    )
    return PromptAnalysis(
        original_prompt=prompt,
        visual_elements=visual_elements,
        actions=actions,
        settings=settings,
        moods=moods,
        scene_description=scene_description,
    )


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


def build_contextual_script(analysis: PromptAnalysis, settings: GenerationSettings) -> str:
    script = f"🎬 {analysis.original_prompt}\n\n"

    if "rain weather" in analysis.visual_elements:
        script += "☔ When the rain starts falling, magic happens...\n\n"
    elif "walking" in analysis.actions:
        script += "🚶 Every step tells a story...\n\n"
    elif "city" in analysis.settings:
        script += "🏙️ In the heart of the city, life unfolds...\n\n"
    else:
        script += "✨ Transform your day with this amazing scene!\n\n"

    script += f"🎭 Style: {_capitalize(settings.style)}\n"
    script += f"📍 Setting: {_capitalize(', '.join(analysis.settings))}\n"
    script += f"🎬 Featuring: {', '.join(analysis.visual_elements)}\n\n"
    script += PLATFORM_ENDINGS.get(settings.platform, DEFAULT_ENDING)
    return script
