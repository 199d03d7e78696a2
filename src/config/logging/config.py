"""Configuração do root logger do serviço.

Um único StreamHandler com CorrelationIdFilter + SecretRedactionFilter.
httpx/httpcore logam cada requisição com a URL completa (response_url
inclusive) em INFO; ficam em WARNING.

Uso:
    from config.logging import configure_logging

    configure_logging(level="INFO", service_name="slack-task-bridge")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, SecretRedactionFilter
from config.logging.formatters import create_json_formatter, create_text_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

QUIET_LOGGERS = ("httpx", "httpcore")


def configure_logging(
    level: str = "INFO",
    service_name: str = "slack-task-bridge",
    correlation_id_getter: Callable[[], str] | None = None,
    *,
    json_output: bool = True,
) -> logging.Handler:
    """Substitui os handlers do root logger e devolve o handler instalado.

    Raises:
        ValueError: nível de log desconhecido.
    """
    level_name = level.upper()
    if level_name not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setFormatter(create_json_formatter() if json_output else create_text_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(SecretRedactionFilter())

    root = logging.getLogger()
    root.setLevel(level_name)
    root.handlers = [handler]

    quiet_level = max(logging.WARNING, root.level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)

    return handler


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """Registra o uso do caminho determinístico (sem texto do usuário)."""
    extra: dict[str, object] = {"component": component, "fallback_used": True}
    if reason:
        extra["reason"] = reason
    if elapsed_ms is not None:
        extra["elapsed_ms"] = round(elapsed_ms, 2)
    logger.info("fallback_applied", extra=extra)
