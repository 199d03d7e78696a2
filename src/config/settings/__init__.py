"""Settings do serviço, uma dataclass congelada por grupo.

Cada grupo lê o ambiente uma vez (`get_*_settings` cacheado) e expõe
`validate()`; o bootstrap agrega os erros no startup.

Grupos:
- base: ambiente, nome do serviço, nível/formato de log
- idempotency: TTL e capacidade dos guards
- slack: assinatura, Web API, response_url, retry
- context: janelas de histórico e fuso horário
- ai: OpenAI (extrator de campos)
- notion: base de destino das tarefas
"""

from __future__ import annotations

from config.settings.ai import (
    OPENAI_CHAT_COMPLETIONS_URL,
    OpenAISettings,
    get_openai_settings,
)
from config.settings.base import (
    SERVICE_NAME,
    BaseSettings,
    Environment,
    IdempotencySettings,
    LogFormat,
    get_base_settings,
    get_idempotency_settings,
)
from config.settings.context import ContextSettings, get_context_settings
from config.settings.notion import (
    NOTION_API_BASE_URL,
    NOTION_API_VERSION,
    NotionSettings,
    get_notion_settings,
)
from config.settings.slack import (
    SLACK_API_BASE_URL,
    SLACK_SIGNATURE_VERSION,
    SlackSettings,
    get_slack_settings,
)

__all__ = [
    "NOTION_API_BASE_URL",
    "NOTION_API_VERSION",
    "OPENAI_CHAT_COMPLETIONS_URL",
    "SERVICE_NAME",
    "SLACK_API_BASE_URL",
    "SLACK_SIGNATURE_VERSION",
    "BaseSettings",
    "ContextSettings",
    "Environment",
    "IdempotencySettings",
    "LogFormat",
    "NotionSettings",
    "OpenAISettings",
    "SlackSettings",
    "get_base_settings",
    "get_context_settings",
    "get_idempotency_settings",
    "get_notion_settings",
    "get_openai_settings",
    "get_slack_settings",
]
