"""Guard de idempotência em memória, limitado por TTL e capacidade.

Sem persistência: reinício do processo ou múltiplas instâncias readmitem
chaves já vistas. Limitação aceita, não bug.
"""

from __future__ import annotations

import logging
import time

from app.protocols.idempotency import IdempotencyGuardProtocol

logger = logging.getLogger(__name__)


class IdempotencyGuard(IdempotencyGuardProtocol):
    """Conjunto de chaves com expiração e despejo por ordem de inserção.

    O dict preserva a ordem de inserção; o primeiro item é sempre o mais
    antigo. Re-adicionar uma chave existente a move para o fim.

    Não é thread-safe; o event loop único dispensa lock.
    """

    def __init__(self, ttl_seconds: float = 600.0, max_size: int = 10_000) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        if max_size < 1:
            raise ValueError("max_size must be >= 1")
        self._ttl_seconds = ttl_seconds
        self._max_size = max_size
        self._entries: dict[str, float] = {}  # key -> expires_at

    def __len__(self) -> int:
        return len(self._entries)

    def _prune(self, now: float) -> None:
        expired = [key for key, expires_at in self._entries.items() if expires_at <= now]
        for key in expired:
            del self._entries[key]

    def has(self, key: str, now: float | None = None) -> bool:
        """True se a chave foi adicionada e ainda não expirou."""
        self._prune(time.time() if now is None else now)
        return key in self._entries

    def add(self, key: str, now: float | None = None) -> None:
        """Registra a chave com expires_at = now + ttl."""
        current = time.time() if now is None else now
        self._prune(current)
        self._entries.pop(key, None)

        if len(self._entries) >= self._max_size:
            oldest = next(iter(self._entries))
            del self._entries[oldest]
            logger.debug("idempotency_key_evicted", extra={"max_size": self._max_size})

        self._entries[key] = current + self._ttl_seconds
