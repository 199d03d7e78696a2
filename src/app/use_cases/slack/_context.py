"""Extração com escalada de janela de contexto (NORMAL -> EXTENDED)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from app.domain.task import TaskInput
from app.services.context_aggregator import ContextWindow

if TYPE_CHECKING:
    from ai.models.task_extraction import TaskFields
    from app.domain.conversation import FileRef
    from app.services.context_aggregator import (
        ComposedContext,
        ContextWindowPolicy,
        ConversationContextAggregator,
    )
    from app.services.task_pipeline import TaskPipeline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContextRequest:
    """Mensagem disparadora e onde buscar seu histórico."""

    text: str
    author_id: str
    scope_id: str
    timestamp_key: str
    thread_key: str | None = None
    files: tuple[FileRef, ...] = ()


@dataclass(frozen=True)
class ExtractionResult:
    fields: TaskFields
    context: ComposedContext

    @property
    def escalated(self) -> bool:
        return self.context.window is ContextWindow.EXTENDED


async def extract_with_escalation(
    request: ContextRequest,
    aggregator: ConversationContextAggregator,
    pipeline: TaskPipeline,
    policy: ContextWindowPolicy,
) -> ExtractionResult:
    """Agrega contexto, extrai campos e escala a janela no máximo uma vez.

    A escalada refaz a agregação inteira com a janela estendida e reemite
    apenas a extração; nenhum registro é criado aqui.
    """
    window: ContextWindow | None = ContextWindow.NORMAL
    while True:
        bundle = await aggregator.aggregate(
            request.scope_id,
            request.thread_key,
            request.timestamp_key,
            policy.size_for(window),
        )
        context = aggregator.compose_context(bundle, request.text, request.files, window)
        fields = await pipeline.extract(
            TaskInput(
                text=context.text,
                author_id=request.author_id,
                scope_id=request.scope_id,
                timestamp=datetime.now(UTC).isoformat(),
                files=context.files,
            )
        )

        next_window = policy.next_window(window, fields.needs_more_context)
        if next_window is None:
            return ExtractionResult(fields=fields, context=context)

        logger.info(
            "context_window_escalated",
            extra={"window_size": policy.size_for(next_window)},
        )
        window = next_window
