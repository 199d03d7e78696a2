"""Modelos de domínio da conversa Slack usada como contexto de tarefa.

Independentes do formato bruto da Web API; a conversão fica em
api/normalizers/slack.
"""

from __future__ import annotations

from dataclasses import dataclass, field

UNTITLED_FILE_NAME = "Untitled"
UNKNOWN_MIME_TYPE = "unknown type"


@dataclass(frozen=True, slots=True)
class FileRef:
    """Referência a um arquivo anexado a uma mensagem.

    A identidade é o `id` quando presente. Sem `id`, cai para o par
    (display_name, mime_type): heurística com perda, dois arquivos distintos
    com mesmo nome e tipo colapsam em um só.
    """

    display_name: str = UNTITLED_FILE_NAME
    mime_type: str = UNKNOWN_MIME_TYPE
    id: str | None = None

    @property
    def identity(self) -> tuple[str, ...]:
        if self.id:
            return ("id", self.id)
        return ("name", self.display_name, self.mime_type)

    def describe(self) -> str:
        """Descritor inline usado no texto de contexto."""
        return f"[File: {self.display_name} ({self.mime_type})]"

    def to_dict(self) -> dict[str, str | None]:
        return {"id": self.id, "name": self.display_name, "mimetype": self.mime_type}


@dataclass(frozen=True, slots=True)
class Message:
    """Mensagem de histórico (thread ou canal)."""

    timestamp_key: str
    author_id: str = ""
    text: str = ""
    is_from_automated_actor: bool = False
    thread_key: str | None = None
    attached_files: tuple[FileRef, ...] = ()

    @property
    def sort_key(self) -> float:
        """Timestamp como número real; inválido ordena como 0."""
        try:
            return float(self.timestamp_key)
        except (TypeError, ValueError):
            return 0.0


@dataclass(slots=True)
class ContextBundle:
    """Contexto montado para uma única requisição (nunca persistido)."""

    thread_lines: list[str] = field(default_factory=list)
    channel_lines: list[str] = field(default_factory=list)
    files: list[FileRef] = field(default_factory=list)

    @property
    def has_history(self) -> bool:
        return bool(self.thread_lines or self.channel_lines)


def dedupe_files(*groups: list[FileRef] | tuple[FileRef, ...]) -> list[FileRef]:
    """Une grupos de arquivos por identidade, mantendo a primeira ocorrência."""
    seen: set[tuple[str, ...]] = set()
    merged: list[FileRef] = []
    for group in groups:
        for file_ref in group:
            if file_ref.identity in seen:
                continue
            seen.add(file_ref.identity)
            merged.append(file_ref)
    return merged
