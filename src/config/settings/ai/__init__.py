"""Settings do provedor de completions (OpenAI ou Groq)."""

from __future__ import annotations

from config.settings.ai.openai import (
    DEFAULT_MODEL,
    DEFAULT_SYSTEM_PROMPT,
    OpenAISettings,
    get_openai_settings,
)

__all__ = [
    "DEFAULT_MODEL",
    "DEFAULT_SYSTEM_PROMPT",
    "OpenAISettings",
    "get_openai_settings",
]
