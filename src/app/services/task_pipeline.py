"""Pipeline externo de criação de tarefas: extrair campos e criar registro.

`extract` e `submit` ficam separados para que a escalada de contexto
refaça apenas a extração, sem criar registros duplicados.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ai.models.task_extraction import TaskHints
from app.domain.task import TaskOutcome
from app.observability import track_latency
from utils.errors import DownstreamTaskError

if TYPE_CHECKING:
    from ai.models.task_extraction import TaskFields
    from app.domain.task import TaskInput
    from app.protocols.task_pipeline import RecordCreatorProtocol, TaskParserProtocol

logger = logging.getLogger(__name__)

COMPONENT = "task_pipeline"


class TaskPipeline:
    """Orquestra parser e criador de registros (ambos via protocolo)."""

    def __init__(
        self,
        parser: TaskParserProtocol,
        creator: RecordCreatorProtocol,
        default_project: str = "",
    ) -> None:
        self._parser = parser
        self._creator = creator
        self._default_project = default_project

    async def extract(self, task_input: TaskInput) -> TaskFields:
        """Extrai campos de tarefa do texto de contexto."""
        hints = TaskHints(
            author_id=task_input.author_id,
            files=task_input.files,
            default_project=self._default_project,
        )
        with track_latency(COMPONENT, "extract"):
            return await self._parser.parse(task_input.text, hints)

    async def submit(self, fields: TaskFields) -> TaskOutcome:
        """Cria o registro e converte falha do destino em TaskOutcome.

        Exceções fora de DownstreamTaskError propagam para o fluxo chamador.
        """
        with track_latency(COMPONENT, "submit"):
            try:
                record = await self._creator.create(fields)
            except DownstreamTaskError as exc:
                logger.warning("task_create_failed", extra={"error_type": type(exc).__name__})
                return TaskOutcome.failed(str(exc))
        return TaskOutcome.succeeded(record)

    async def run(self, task_input: TaskInput) -> TaskOutcome:
        """extract + submit em sequência."""
        fields = await self.extract(task_input)
        return await self.submit(fields)
