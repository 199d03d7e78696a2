"""Settings da agregação de contexto conversacional."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


@dataclass(frozen=True)
class ContextSettings:
    """Janelas de histórico usadas para montar o contexto da tarefa.

    Attributes:
        window_size: Janela inicial para menções
        extended_window_size: Janela usada na única escalada permitida
        direct_message_window_size: Janela para mensagens diretas (sem escalada)
        display_timezone: Fuso usado para renderizar o horário das linhas
    """

    window_size: int = 20
    extended_window_size: int = 50
    direct_message_window_size: int = 10
    display_timezone: str = "UTC"

    def validate(self) -> list[str]:
        """Valida janelas e fuso horário.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.window_size <= 0:
            errors.append("CONTEXT_WINDOW_SIZE deve ser > 0")

        if self.extended_window_size < self.window_size:
            errors.append("CONTEXT_EXTENDED_WINDOW_SIZE deve ser >= CONTEXT_WINDOW_SIZE")

        if self.direct_message_window_size <= 0:
            errors.append("CONTEXT_DIRECT_MESSAGE_WINDOW_SIZE deve ser > 0")

        try:
            ZoneInfo(self.display_timezone)
        except (ZoneInfoNotFoundError, ValueError):
            errors.append(f"CONTEXT_DISPLAY_TIMEZONE inválido: {self.display_timezone}")

        return errors


def _load_context_from_env() -> ContextSettings:
    """Carrega ContextSettings de variáveis de ambiente."""
    return ContextSettings(
        window_size=int(os.getenv("CONTEXT_WINDOW_SIZE", "20")),
        extended_window_size=int(os.getenv("CONTEXT_EXTENDED_WINDOW_SIZE", "50")),
        direct_message_window_size=int(
            os.getenv("CONTEXT_DIRECT_MESSAGE_WINDOW_SIZE", "10")
        ),
        display_timezone=os.getenv("CONTEXT_DISPLAY_TIMEZONE", "UTC"),
    )


@lru_cache(maxsize=1)
def get_context_settings() -> ContextSettings:
    """Retorna instância cacheada de ContextSettings."""
    return _load_context_from_env()
