"""Fallback determinístico para quando o extrator LLM falha.

Garante campos previsíveis: primeira linha vira título, o restante
vira descrição, prioridade padrão e autor como responsável.
"""

from __future__ import annotations

from ai.models.task_extraction import DEFAULT_PRIORITY, TaskFields

DEFAULT_TASK_TITLE = "New Task from Slack"
MAX_TITLE_LENGTH = 200


def fallback_task_fields(
    text: str,
    author_id: str,
    default_project: str = "",
) -> TaskFields:
    """Extrai campos de tarefa sem IA.

    Usado quando:
    - extrator desabilitado ou sem credencial
    - timeout/erro HTTP do LLM
    - resposta não-JSON ou fora do schema

    Args:
        text: Texto de contexto
        author_id: Autor da mensagem (vira responsável)
        default_project: Projeto configurado como padrão

    Returns:
        TaskFields com fallback_used=True e sem arquivos selecionados
    """
    lines = (text or "").split("\n")
    title = lines[0].strip()[:MAX_TITLE_LENGTH] or DEFAULT_TASK_TITLE
    description = "\n".join(lines[1:]).strip()

    return TaskFields(
        title=title,
        description=description,
        priority=DEFAULT_PRIORITY,
        due_date=None,
        assignee=author_id,
        project=default_project or None,
        files=[],
        fallback_used=True,
    )
