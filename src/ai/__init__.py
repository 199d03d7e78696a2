"""Módulo AI: extração de campos de tarefa a partir do contexto Slack.

O extrator LLM e o fallback determinístico produzem o mesmo contrato
(TaskFields); a escolha fica no bootstrap.
"""

from ai.models import (
    DEFAULT_PRIORITY,
    NEED_MORE_CONTEXT_NOTE,
    TaskExtraction,
    TaskFields,
    TaskHints,
)
from ai.rules import fallback_task_fields
from ai.utils import extract_json_from_response

__all__ = [
    "DEFAULT_PRIORITY",
    "NEED_MORE_CONTEXT_NOTE",
    "TaskExtraction",
    "TaskFields",
    "TaskHints",
    "extract_json_from_response",
    "fallback_task_fields",
]
