"""Script generation and prompt analysis."""

from .generator import ScriptGenerator, build_system_prompt
from .prompt_analysis import analyze_prompt, build_contextual_script
from .templates import build_fallback_script
from .types import GeneratedScript, PromptAnalysis, ScriptSettings

__all__ = [
    "ScriptGenerator",
    "ScriptSettings",
    "GeneratedScript",
    "PromptAnalysis",
    "analyze_prompt",
    "build_contextual_script",
    "build_fallback_script",
    "build_system_prompt",
]
