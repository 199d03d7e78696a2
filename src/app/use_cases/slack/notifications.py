"""Textos das notificações de saída dos fluxos de tarefa."""

from __future__ import annotations

PROCESSING_REACTION = "hourglass_flowing_sand"
SUCCESS_REACTION = "white_check_mark"
FAILURE_REACTION = "x"

PROCESSING_ACK_TEXT = "⏳ Processing your task... I'll notify you when it's ready!"
UNKNOWN_COMMAND_TEXT = "Unknown command"
DEFAULT_COMMAND_TEXT = "New task from Slack"

_GENERIC_ERROR = "An error occurred while creating the task."


def task_created_text(task_url: str | None, *, command: bool = False) -> str:
    """Confirmação de sucesso (slash command usa texto próprio)."""
    if not task_url:
        return "✅ Task created successfully!"
    if command:
        return f"✅ Task created successfully! View it here: {task_url}"
    return f"✅ Task created! View it here: {task_url}"


def task_failed_text(reason: str) -> str:
    return f"❌ Failed to create task: {reason}"


def task_error_text(exc: BaseException, *, command: bool = False) -> str:
    """Mensagem para exceção inesperada no fluxo destacado."""
    detail = str(exc).strip()
    if detail:
        return f"❌ Error: {detail}"
    fallback = f"{_GENERIC_ERROR} Please try again." if command else _GENERIC_ERROR
    return f"❌ Error: {fallback}"
