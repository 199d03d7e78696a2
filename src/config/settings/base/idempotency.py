"""Settings de idempotência.

Limites do guard em memória que suprime reprocessamento de eventos.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class IdempotencySettings:
    """Configurações dos guards de idempotência.

    Attributes:
        ttl_seconds: Tempo de vida de cada chave admitida
        max_size: Máximo de chaves retidas (despejo por ordem de inserção)
    """

    ttl_seconds: float = 600.0
    max_size: int = 10_000

    def validate(self) -> list[str]:
        """Valida configurações de idempotência.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.ttl_seconds <= 0:
            errors.append("IDEMPOTENCY_TTL_SECONDS deve ser > 0")

        if self.max_size <= 0:
            errors.append("IDEMPOTENCY_MAX_SIZE deve ser > 0")

        return errors


def _load_idempotency_from_env() -> IdempotencySettings:
    """Carrega IdempotencySettings de variáveis de ambiente."""
    return IdempotencySettings(
        ttl_seconds=float(os.getenv("IDEMPOTENCY_TTL_SECONDS", "600")),
        max_size=int(os.getenv("IDEMPOTENCY_MAX_SIZE", "10000")),
    )


@lru_cache(maxsize=1)
def get_idempotency_settings() -> IdempotencySettings:
    """Retorna instância cacheada de IdempotencySettings."""
    return _load_idempotency_from_env()
