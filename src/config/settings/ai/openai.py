"""Settings do extrator de campos via OpenAI chat completions."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

OPENAI_CHAT_COMPLETIONS_URL: str = "https://api.openai.com/v1/chat/completions"

_TRUTHY = ("true", "1", "yes")


@dataclass(frozen=True)
class OpenAISettings:
    """Configurações do OpenAITaskParser.

    Sem chave (ou com enabled=False) o bootstrap escolhe o parser
    determinístico e a readiness reporta "degraded", não "failed".

    Attributes:
        api_key: OPENAI_API_KEY
        model: modelo de chat completions
        api_url: endpoint (sobrescrevível para proxies/testes)
        temperature: 0 mantém a extração estável entre tentativas
        timeout_seconds: timeout por tentativa no RetryingTransport
        max_retries: tentativas extras em 429/5xx/falha de rede
        enabled: OPENAI_ENABLED
    """

    api_key: str = ""
    model: str = "gpt-4o-mini"
    api_url: str = OPENAI_CHAT_COMPLETIONS_URL
    temperature: float = 0.0
    timeout_seconds: float = 30.0
    max_retries: int = 1
    enabled: bool = True

    @property
    def is_usable(self) -> bool:
        return self.enabled and bool(self.api_key)

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.enabled and not self.api_key:
            errors.append("OPENAI_API_KEY não configurado mas OPENAI_ENABLED=true")
        if not 0.0 <= self.temperature <= 2.0:
            errors.append("OPENAI_TEMPERATURE deve estar entre 0 e 2")
        if self.timeout_seconds <= 0:
            errors.append("OPENAI_TIMEOUT_SECONDS deve ser > 0")
        if self.max_retries < 0:
            errors.append("OPENAI_MAX_RETRIES deve ser >= 0")
        return errors


def _load_openai_from_env() -> OpenAISettings:
    return OpenAISettings(
        api_key=os.getenv("OPENAI_API_KEY", ""),
        model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
        api_url=os.getenv("OPENAI_API_URL", OPENAI_CHAT_COMPLETIONS_URL),
        temperature=float(os.getenv("OPENAI_TEMPERATURE", "0")),
        timeout_seconds=float(os.getenv("OPENAI_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("OPENAI_MAX_RETRIES", "1")),
        enabled=os.getenv("OPENAI_ENABLED", "true").lower() in _TRUTHY,
    )


@lru_cache(maxsize=1)
def get_openai_settings() -> OpenAISettings:
    """Retorna instância cacheada de OpenAISettings."""
    return _load_openai_from_env()
