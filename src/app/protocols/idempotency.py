"""Protocolo do guard de idempotência (eventos e comandos)."""

from __future__ import annotations

from abc import ABC, abstractmethod


class IdempotencyGuardProtocol(ABC):
    """Conjunto limitado de chaves com expiração.

    - has(key, now) -> bool: True se a chave foi vista e não expirou.
    - add(key, now) -> None: marca a chave até now + ttl.
    """

    @abstractmethod
    def has(self, key: str, now: float | None = None) -> bool:
        """Verifica se a chave está presente (entradas expiradas são removidas)."""

    @abstractmethod
    def add(self, key: str, now: float | None = None) -> None:
        """Registra a chave; pode despejar a entrada mais antiga."""
