"""Protocolos do pipeline externo de criação de tarefas."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ai.models.task_extraction import TaskFields, TaskHints
    from app.domain.task import TaskRecord


class TaskParserProtocol(ABC):
    """parseTask(text, hints) -> TaskFields.

    Implementações não devem levantar exceção: falhas viram fallback.
    """

    @abstractmethod
    async def parse(self, text: str, hints: TaskHints) -> TaskFields:
        """Extrai campos de tarefa do texto de contexto."""


class RecordCreatorProtocol(ABC):
    """createRecord(fields) -> {id, url}."""

    @abstractmethod
    async def create(self, fields: TaskFields) -> TaskRecord:
        """Cria o registro no destino.

        Raises:
            DownstreamTaskError: destino rejeitou ou ficou indisponível
        """
