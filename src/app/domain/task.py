"""Contratos de entrada e saída do pipeline de criação de tarefas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.conversation import FileRef

UNKNOWN_ERROR_MESSAGE = "Unknown error"


@dataclass(frozen=True, slots=True)
class TaskInput:
    """Entrada única do pipeline externo."""

    text: str
    author_id: str
    scope_id: str
    timestamp: str
    files: tuple[FileRef, ...] = ()


@dataclass(frozen=True, slots=True)
class TaskRecord:
    """Registro criado no destino."""

    id: str
    url: str = ""


@dataclass(frozen=True, slots=True)
class TaskOutcome:
    """Resultado marcado do pipeline: sucesso (id/url opcionais) ou falha."""

    success: bool
    task_id: str | None = None
    task_url: str | None = None
    message: str = ""

    @classmethod
    def succeeded(cls, record: TaskRecord) -> TaskOutcome:
        return cls(
            success=True,
            task_id=record.id or None,
            task_url=record.url or None,
            message=f"Task created successfully: {record.url}" if record.url else "",
        )

    @classmethod
    def failed(cls, message: str | None = None) -> TaskOutcome:
        """Falha com mensagem legível; nunca retorna mensagem vazia."""
        reason = (message or "").strip()
        return cls(success=False, message=reason or UNKNOWN_ERROR_MESSAGE)
