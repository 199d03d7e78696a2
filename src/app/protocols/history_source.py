"""Protocolo das fontes de histórico usadas pelo agregador de contexto."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.conversation import Message


class HistorySourceProtocol(ABC):
    """Leitura paginada de histórico: thread e canal.

    Ambas podem levantar exceção em falha; quem agrega decide como degradar.
    """

    @abstractmethod
    async def fetch_thread(self, scope_id: str, thread_key: str, limit: int) -> list[Message]:
        """Busca até `limit` mensagens da thread."""

    @abstractmethod
    async def fetch_channel(self, scope_id: str, limit: int) -> list[Message]:
        """Busca até `limit` mensagens do canal."""
