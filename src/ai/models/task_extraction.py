"""Contratos do extrator de campos de tarefa (LLM ou fallback)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domain.conversation import FileRef  # noqa: TC001 - usado em runtime pelo schema

TaskPriority = Literal[
    "Quick ⚡",
    "Immediate 🔥",
    "Prio: 1st 🚀",
    "2nd Prio",
    "3rd Prio",
    "Remember 💭",
]

DEFAULT_PRIORITY: TaskPriority = "3rd Prio"

# Nota que o extrator inclui na descrição quando o histórico parece incompleto.
NEED_MORE_CONTEXT_NOTE = "This conversation may reference earlier context not included here"


@dataclass(frozen=True, slots=True)
class TaskHints:
    """Dicas passadas ao extrator junto com o texto."""

    author_id: str
    files: tuple[FileRef, ...] = ()
    today: date = field(default_factory=date.today)
    default_project: str = ""


class TaskExtraction(BaseModel):
    """Saída estruturada esperada do LLM."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: str = Field(..., min_length=1)
    description: str = ""
    priority: TaskPriority = DEFAULT_PRIORITY
    due_date: str | None = Field(default=None, alias="dueDate")
    assignee: str | None = None
    project: str | None = None
    include_file_ids: list[str] = Field(default_factory=list, alias="includeFileIds")

    @field_validator("due_date")
    @classmethod
    def _validate_due_date(cls, value: str | None) -> str | None:
        if not value:
            return None
        date.fromisoformat(value)
        return value


class TaskFields(BaseModel):
    """Campos finais usados para criar o registro no destino."""

    model_config = ConfigDict(extra="ignore")

    title: str
    description: str = ""
    priority: TaskPriority = DEFAULT_PRIORITY
    due_date: str | None = None
    assignee: str = ""
    project: str | None = None
    files: list[FileRef] = Field(default_factory=list)
    fallback_used: bool = False

    @property
    def needs_more_context(self) -> bool:
        """True quando o extrator sinalizou explicitamente contexto insuficiente."""
        return NEED_MORE_CONTEXT_NOTE.lower() in self.description.lower()
