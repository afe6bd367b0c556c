"""Static script template used when no language model is configured."""

from .types import ScriptSettings

HOOKS = {
    "question": "❓ Ever wondered about {prompt}?",
    "statistic": "🔥 Did you know that 90% of people don't know about {prompt}?",
    "story": "📖 Let me tell you about {prompt}...",
    "problem": "⚠️ Are you struggling with {prompt}?",
    "controversy": "🚨 Unpopular opinion: {prompt}",
    "how-to": "✅ Here's exactly how to {prompt}",
}

CTAS = {
    "engagement": "💭 What's your experience with this? Let me know in the comments!",
    "follow": "🔔 Follow for more tips like this!",
    "website": "🔗 Link in bio for more details!",
    "product": "💎 Check out our solution - link in bio!",
    "subscribe": "👆 Subscribe for weekly content like this!",
    "download": "📱 Download the app using the link below!",
}

TONE_INTROS = {
    "engaging": "Get ready to be amazed! 🤩",
    "professional": "Here's what industry experts recommend:",
    "conversational": "So here's the thing...",
    "educational": "Let's break this down step by step:",
    "humorous": "Okay, this is actually pretty funny... 😅",
    "inspirational": "You have the power to change this! 💪",
}

# Scripts at least this long get the setup/main/value breakdown
LONG_FORM_SECONDS = 30


def build_fallback_script(prompt: str, settings: ScriptSettings) -> str:
    """Fill the hook/body/CTA template with timing cues for the requested duration."""
    duration = settings.duration
    hook = HOOKS.get(settings.hook_style, HOOKS["question"]).format(prompt=prompt)
    cta = CTAS.get(settings.cta, CTAS["engagement"])
    tone_intro = TONE_INTROS.get(settings.tone, "")

    parts = [f"🎬 {duration}s {settings.platform.upper()} SCRIPT\n\n"]
    parts.append(f"[0-3s] HOOK:\n{hook}\n\n")

    if duration >= LONG_FORM_SECONDS:
        parts.append(f"[4-8s] SETUP:\n{tone_intro}\n\n")
        parts.append(
            "[9-20s] MAIN CONTENT:\n"
            f"📌 Key Point 1: About {prompt}\n"
            "📌 Key Point 2: Why it matters\n"
            "📌 Key Point 3: How to implement\n\n"
        )
        parts.append(f"[21-{duration - 5}s] VALUE:\nThis changes everything because...\n\n")
    else:
        parts.append(f"[4-{duration - 5}s] MAIN CONTENT:\nHere's what you need to know about {prompt}...\n\n")

    parts.append(f"[{duration - 4}s-{duration}s] CTA:\n{cta}\n\n")
    parts.append("💡 PRO TIP: Adjust timing based on your speaking pace!\n")
    parts.append(f"🎯 Platform: {settings.platform} | Tone: {settings.tone} | Audience: {settings.audience}")
    return "".join(parts)
