"""Agregador de settings do sheetflow-bot.

Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

from config.settings.ai import OpenAISettings, get_openai_settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.google_sheets import (
    GoogleSheetsSettings,
    get_google_sheets_settings,
)

__all__ = [
    "BaseSettings",
    "Environment",
    "GoogleSheetsSettings",
    "OpenAISettings",
    "get_base_settings",
    "get_google_sheets_settings",
    "get_openai_settings",
]
