"""Settings específicas do Slack.

Credenciais, limites de transporte e guardas do webhook Slack.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

SLACK_API_BASE_URL: str = "https://slack.com/api"
SLACK_SIGNATURE_VERSION: str = "v0"
DEFAULT_RESPONSE_URL_HOSTS: tuple[str, ...] = ("hooks.slack.com",)


@dataclass(frozen=True)
class SlackSettings:
    """Configurações do canal Slack.

    Attributes:
        signing_secret: Secret para validação HMAC dos requests
        bot_token: Token do bot (Bearer) para a Web API
        api_base_url: URL base da Web API
        request_timeout_seconds: Timeout por tentativa nas chamadas à API
        read_max_retries: Tentativas extras para chamadas GET
        retry_base_delay_seconds: Base do backoff exponencial
        replay_tolerance_seconds: Janela de tolerância do timestamp assinado
        response_url_hosts: Padrões de host aceitos para response_url
        max_concurrent_tasks: Limite de processamentos destacados simultâneos
    """

    # Credenciais
    signing_secret: str = ""
    bot_token: str = ""

    # API
    api_base_url: str = SLACK_API_BASE_URL

    # Timeouts e retries
    request_timeout_seconds: float = 8.0
    read_max_retries: int = 2
    retry_base_delay_seconds: float = 0.25

    # Segurança
    replay_tolerance_seconds: int = 300
    response_url_hosts: tuple[str, ...] = field(default=DEFAULT_RESPONSE_URL_HOSTS)

    # Processamento destacado
    max_concurrent_tasks: int = 100

    def method_url(self, method: str) -> str:
        """Retorna URL completa de um método da Web API (ex.: chat.postMessage)."""
        return f"{self.api_base_url.rstrip('/')}/{method}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Slack.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.signing_secret:
            errors.append("SLACK_SIGNING_SECRET não configurado")

        if not self.bot_token:
            errors.append("SLACK_BOT_TOKEN não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("SLACK_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.read_max_retries < 0:
            errors.append("SLACK_READ_MAX_RETRIES deve ser >= 0")

        if self.replay_tolerance_seconds <= 0:
            errors.append("SLACK_REPLAY_TOLERANCE_SECONDS deve ser > 0")

        if not self.response_url_hosts:
            errors.append("SLACK_RESPONSE_URL_HOSTS não pode ser vazio")

        return errors


def _parse_hosts(raw: str) -> tuple[str, ...]:
    hosts = tuple(part.strip().lower() for part in raw.split(",") if part.strip())
    return hosts or DEFAULT_RESPONSE_URL_HOSTS


def _load_from_env() -> SlackSettings:
    """Carrega SlackSettings a partir de variáveis de ambiente."""
    return SlackSettings(
        signing_secret=os.getenv("SLACK_SIGNING_SECRET", ""),
        bot_token=os.getenv("SLACK_BOT_TOKEN", ""),
        api_base_url=os.getenv("SLACK_API_BASE_URL", SLACK_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("SLACK_REQUEST_TIMEOUT_SECONDS", "8")),
        read_max_retries=int(os.getenv("SLACK_READ_MAX_RETRIES", "2")),
        retry_base_delay_seconds=float(
            os.getenv("SLACK_RETRY_BASE_DELAY_SECONDS", "0.25")
        ),
        replay_tolerance_seconds=int(
            os.getenv("SLACK_REPLAY_TOLERANCE_SECONDS", "300")
        ),
        response_url_hosts=_parse_hosts(os.getenv("SLACK_RESPONSE_URL_HOSTS", "")),
        max_concurrent_tasks=int(os.getenv("SLACK_MAX_CONCURRENT_TASKS", "100")),
    )


@lru_cache(maxsize=1)
def get_slack_settings() -> SlackSettings:
    """Retorna instância cacheada de SlackSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
