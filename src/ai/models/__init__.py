"""Modelos/DTOs para IA.

Contratos de entrada/saída do extrator de campos de tarefa.
"""

from ai.models.task_extraction import (
    DEFAULT_PRIORITY,
    NEED_MORE_CONTEXT_NOTE,
    TaskExtraction,
    TaskFields,
    TaskHints,
    TaskPriority,
)

__all__ = [
    "DEFAULT_PRIORITY",
    "NEED_MORE_CONTEXT_NOTE",
    "TaskExtraction",
    "TaskFields",
    "TaskHints",
    "TaskPriority",
]
