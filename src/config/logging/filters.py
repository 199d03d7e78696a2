"""Filters aplicados no handler raiz.

- CorrelationIdFilter: injeta `service` e `correlation_id` em todo record.
- SecretRedactionFilter: mascara tokens Slack, Bearer e caminhos de
  response_url que cheguem à mensagem ou ao campo `error` (ex.: str de
  exceções do httpx, que carregam a URL completa).
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

REDACTED = "[redacted]"

_SECRET_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"xox[abprs]-[A-Za-z0-9-]+"), REDACTED),
    (re.compile(r"(Bearer\s+)[^\s'\",]+", re.IGNORECASE), rf"\g<1>{REDACTED}"),
    (re.compile(r"(hooks\.slack\.com/)[^\s'\",]+"), rf"\g<1>{REDACTED}"),
    (re.compile(r"\bsk-[A-Za-z0-9_-]{8,}"), REDACTED),
    (re.compile(r"\bsecret_[A-Za-z0-9]{8,}"), REDACTED),
)

# Campos de `extra` que podem carregar texto de exceção
_REDACTED_EXTRA_FIELDS = ("error",)


def redact_secrets(text: str) -> str:
    for pattern, replacement in _SECRET_PATTERNS:
        text = pattern.sub(replacement, text)
    return text


class CorrelationIdFilter(logging.Filter):
    """Enriquece records com `service` e `correlation_id`.

    correlation_id passado via `extra` tem precedência sobre o do contexto.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._get_correlation_id()
        record.service = self._service_name
        return True


class SecretRedactionFilter(logging.Filter):
    """Mascara credenciais antes da formatação; nunca descarta o record."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_secrets(message)
        if redacted != message:
            record.msg = redacted
            record.args = None

        for field in _REDACTED_EXTRA_FIELDS:
            value = getattr(record, field, None)
            if isinstance(value, str):
                setattr(record, field, redact_secrets(value))
        return True
