"""Protocolo das chamadas de saída para a plataforma de mensagens."""

from __future__ import annotations

from abc import ABC, abstractmethod


class MessagingClientProtocol(ABC):
    """Notificações de saída usadas pelos fluxos destacados.

    Mutações não propagam exceção: falhas são logadas e retornam False.
    """

    @abstractmethod
    async def add_reaction(self, channel: str, timestamp: str, name: str) -> bool:
        """Adiciona reação (idempotente; "already_reacted" é sucesso)."""

    @abstractmethod
    async def remove_reaction(self, channel: str, timestamp: str, name: str) -> bool:
        """Remove reação (idempotente; "no_reaction" é sucesso)."""

    @abstractmethod
    async def post_message(self, channel: str, text: str, thread_ts: str | None = None) -> bool:
        """Publica mensagem no canal (sem retry)."""

    @abstractmethod
    async def post_response_url(self, response_url: str, text: str) -> bool:
        """Responde de forma efêmera via response_url já validada (sem retry)."""
