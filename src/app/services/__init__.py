"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.context_aggregator import (
    ComposedContext,
    ContextWindow,
    ContextWindowPolicy,
    ConversationContextAggregator,
)
from app.services.task_pipeline import TaskPipeline

__all__ = [
    "ComposedContext",
    "ContextWindow",
    "ContextWindowPolicy",
    "ConversationContextAggregator",
    "TaskPipeline",
]
