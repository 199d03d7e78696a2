"""Extrator de mensagens da Slack Web API.

Converte os dicts de `conversations.history`/`conversations.replies` e
de eventos para os modelos de domínio. Não faz validação de negócio.
"""

from __future__ import annotations

from typing import Any

from app.domain.conversation import (
    UNKNOWN_MIME_TYPE,
    UNTITLED_FILE_NAME,
    FileRef,
    Message,
)


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def extract_file(raw: dict[str, Any]) -> FileRef:
    """Converte um item de `files` em FileRef (nome e tipo com padrão)."""
    name = _str_or_none(raw.get("name")) or _str_or_none(raw.get("title"))
    return FileRef(
        display_name=name or UNTITLED_FILE_NAME,
        mime_type=_str_or_none(raw.get("mimetype")) or UNKNOWN_MIME_TYPE,
        id=_str_or_none(raw.get("id")),
    )


def extract_files(raw_files: Any) -> tuple[FileRef, ...]:
    if not isinstance(raw_files, list):
        return ()
    return tuple(extract_file(item) for item in raw_files if isinstance(item, dict))


def extract_message(raw: dict[str, Any]) -> Message:
    """Converte uma mensagem bruta.

    Mensagens com `bot_id` são marcadas como automatizadas (inclusive as
    do próprio bot), para o agregador descartá-las.
    """
    return Message(
        timestamp_key=str(raw.get("ts") or ""),
        author_id=_str_or_none(raw.get("user")) or "",
        text=raw.get("text") if isinstance(raw.get("text"), str) else "",
        is_from_automated_actor=bool(raw.get("bot_id")),
        thread_key=_str_or_none(raw.get("thread_ts")),
        attached_files=extract_files(raw.get("files")),
    )


def extract_messages(payload: dict[str, Any]) -> list[Message]:
    """Extrai a lista `messages` de uma resposta paginada."""
    raw_messages = payload.get("messages")
    if not isinstance(raw_messages, list):
        return []
    return [extract_message(item) for item in raw_messages if isinstance(item, dict)]
