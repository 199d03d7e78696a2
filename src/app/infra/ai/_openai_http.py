"""Helper para chamadas HTTP à API OpenAI (chat completions).

Implementação concreta de IO; passa pelo RetryingTransport.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.infra.http import RequestSpec, RetryPolicy
from utils.errors import TransportError

if TYPE_CHECKING:
    from app.infra.http import RetryingTransport
    from config.settings import OpenAISettings

logger = logging.getLogger(__name__)


def _build_payload(settings: OpenAISettings, system_prompt: str, user_prompt: str) -> dict[str, Any]:
    return {
        "model": settings.model,
        "temperature": settings.temperature,
        "response_format": {"type": "json_object"},
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ],
    }


async def call_openai_api(
    *,
    transport: RetryingTransport,
    settings: OpenAISettings,
    system_prompt: str,
    user_prompt: str,
    point_name: str,
) -> str | None:
    """Executa chamada à API OpenAI.

    Args:
        transport: Transporte com retry compartilhado
        settings: Configurações do OpenAI
        system_prompt: Prompt de sistema
        user_prompt: Prompt do usuário
        point_name: Nome do ponto LLM (para logs)

    Returns:
        Conteúdo da resposta ou None em caso de erro
    """
    if not settings.api_key:
        logger.error("openai_api_key_missing", extra={"point": point_name})
        return None

    spec = RequestSpec(
        method="POST",
        headers={
            "Authorization": f"Bearer {settings.api_key}",
            "Content-Type": "application/json",
        },
        json=_build_payload(settings, system_prompt, user_prompt),
    )
    policy = RetryPolicy(
        timeout_seconds=settings.timeout_seconds,
        max_retries=settings.max_retries,
    )

    try:
        response = await transport.execute(settings.api_url, spec, policy)
    except TransportError as exc:
        logger.warning(
            "openai_transport_error",
            extra={"point": point_name, "status_code": exc.status_code, "attempts": exc.attempts},
        )
        return None

    if response.status_code >= 400:
        logger.warning(
            "openai_http_error",
            extra={"point": point_name, "status_code": response.status_code},
        )
        return None

    try:
        data = response.json()
        content = data["choices"][0]["message"]["content"]
    except (ValueError, KeyError, IndexError, TypeError):
        logger.warning("openai_invalid_response", extra={"point": point_name})
        return None

    if not content:
        logger.warning("openai_empty_response", extra={"point": point_name})
        return None

    logger.debug(
        "openai_call_success",
        extra={
            "point": point_name,
            "model": settings.model,
            "tokens_used": (data.get("usage") or {}).get("total_tokens"),
        },
    )
    return content
