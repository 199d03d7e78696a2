"""Logging estruturado do serviço.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="slack-task-bridge")
    logger = get_logger(__name__)
    logger.info("slack_event_received", extra={"event_type": "app_mention"})
"""

from config.logging.config import QUIET_LOGGERS, configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter, SecretRedactionFilter, redact_secrets
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
    create_text_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "QUIET_LOGGERS",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "SecretRedactionFilter",
    "configure_logging",
    "create_json_formatter",
    "create_text_formatter",
    "get_logger",
    "log_fallback",
    "redact_secrets",
]
