"""Agregador de settings de AI/LLM.

Re-exporta todas as settings de IA para uso externo.
"""

from __future__ import annotations

from config.settings.ai.openai import (
    OPENAI_CHAT_COMPLETIONS_URL,
    OpenAISettings,
    get_openai_settings,
)

__all__ = [
    "OPENAI_CHAT_COMPLETIONS_URL",
    "OpenAISettings",
    "get_openai_settings",
]
