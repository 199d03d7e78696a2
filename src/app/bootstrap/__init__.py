"""Bootstrap: logging e validação de settings no startup.

As factories dos componentes ficam em `app.bootstrap.dependencies`.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_context_settings,
    get_idempotency_settings,
    get_notion_settings,
    get_openai_settings,
    get_slack_settings,
)

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Instala o handler raiz conforme LOG_LEVEL/LOG_FORMAT."""
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
        json_output=settings.log_format == "json",
    )


def collect_settings_errors() -> list[str]:
    """Erros de todos os grupos, prefixados pelo nome do grupo."""
    groups = {
        "base": get_base_settings(),
        "slack": get_slack_settings(),
        "context": get_context_settings(),
        "idempotency": get_idempotency_settings(),
        "openai": get_openai_settings(),
        "notion": get_notion_settings(),
    }
    return [f"{name}: {error}" for name, settings in groups.items() for error in settings.validate()]


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    staging/production não sobem com erro; development só alerta. Segredo
    de assinatura ou bot token ausentes continuam falhando fechado em
    tempo de request em qualquer ambiente.

    Raises:
        RuntimeError: ambiente estrito com settings inválidas.
    """
    base = get_base_settings()
    errors = collect_settings_errors()

    if not errors:
        logger.info("settings_validated", extra={"environment": base.environment})
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.strict_validation:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
