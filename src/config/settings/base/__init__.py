"""Settings transversais: processo e idempotência."""

from __future__ import annotations

from config.settings.base.core import (
    SERVICE_NAME,
    BaseSettings,
    Environment,
    LogFormat,
    get_base_settings,
)
from config.settings.base.idempotency import (
    IdempotencySettings,
    get_idempotency_settings,
)

__all__ = [
    "SERVICE_NAME",
    "BaseSettings",
    "Environment",
    "IdempotencySettings",
    "LogFormat",
    "get_base_settings",
    "get_idempotency_settings",
]
