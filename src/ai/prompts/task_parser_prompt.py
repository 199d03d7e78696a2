"""Prompt do extrator de campos de tarefa.

O texto de entrada já chega montado pelo agregador de contexto, com
seções rotuladas (histórico do canal, thread, mensagem atual).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ai.models.task_extraction import NEED_MORE_CONTEXT_NOTE

if TYPE_CHECKING:
    from ai.models.task_extraction import TaskHints

TASK_PARSER_SYSTEM = """You extract one actionable task from a Slack conversation.
Reply with a single JSON object and nothing else, using these keys:
title (string, required), description (string), priority (one of
"Quick ⚡", "Immediate 🔥", "Prio: 1st 🚀", "2nd Prio", "3rd Prio", "Remember 💭"),
dueDate (YYYY-MM-DD or null), assignee (Slack user id or null),
project (string or null), includeFileIds (array of file ids)."""

_HISTORY_GUIDE = """The input includes conversation history:
- "Channel conversation history": recent messages from the main channel
- "Thread conversation": messages from the thread where the bot was mentioned
- "Current message": the message that triggered the task
Prefer the thread for the action, use the channel for background, and look
for owners and deadlines in both."""

_GUIDELINES = f"""Guidelines:
- Title: clear and actionable, capturing the main request.
- Description: relevant context, constraints, people and systems mentioned.
- If the conversation seems to reference earlier context that is not present,
  add to the description: "Note: {NEED_MORE_CONTEXT_NOTE}."
- Priority: immediate/urgent/asap/fire/critical -> "Immediate 🔥";
  quick/fast/lightning -> "Quick ⚡"; high priority/important/prio 1 ->
  "Prio: 1st 🚀"; second/prio 2 -> "2nd Prio"; remember/don't forget ->
  "Remember 💭"; otherwise "3rd Prio".
- Assignee: only when explicitly mentioned (U12345 or <@U12345>).
- Due date: convert relative dates to YYYY-MM-DD.
- Files: include in includeFileIds only files needed to complete the task."""


def _has_history_sections(text: str) -> bool:
    return "conversation history" in text or "Thread conversation" in text


def format_task_parser_prompt(text: str, hints: TaskHints) -> str:
    """Monta o prompt de usuário para o extrator.

    Args:
        text: Texto de contexto (já agregado)
        hints: Autor, arquivos disponíveis, data de hoje e projeto padrão

    Returns:
        Prompt formatado
    """
    parts: list[str] = []
    if _has_history_sections(text):
        parts.append(_HISTORY_GUIDE)

    parts.append(f'Input: "{text}"')
    parts.append(f"Today's date: {hints.today.isoformat()}")

    if hints.files:
        available = "; ".join(
            f"ID: {file_ref.id or '-'}, Name: {file_ref.display_name}, Type: {file_ref.mime_type}"
            for file_ref in hints.files
        )
    else:
        available = "None"
    parts.append(f"Available files: {available}")

    if hints.default_project:
        parts.append(f'If the project is unclear, use "{hints.default_project}".')
    else:
        parts.append("If the project is unclear, leave project empty.")

    parts.append(_GUIDELINES)
    return "\n\n".join(parts)
