"""Fluxo destacado de menção ao bot (app_mention)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.observability import get_correlation_id, record_task_outcome
from app.use_cases.slack._context import ContextRequest, extract_with_escalation
from app.use_cases.slack.notifications import (
    FAILURE_REACTION,
    PROCESSING_REACTION,
    SUCCESS_REACTION,
    task_created_text,
    task_error_text,
    task_failed_text,
)

if TYPE_CHECKING:
    from app.domain.conversation import FileRef
    from app.protocols.messaging import MessagingClientProtocol
    from app.services.context_aggregator import (
        ContextWindowPolicy,
        ConversationContextAggregator,
    )
    from app.services.task_pipeline import TaskPipeline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppMentionInput:
    text: str
    user: str
    channel: str
    thread_ts: str
    ts: str
    files: tuple[FileRef, ...] = ()


class ProcessAppMentionUseCase:
    """Reação de progresso, contexto com escalada, criação e resposta na thread.

    Falhas viram notificação na thread; nada propaga para o runner.
    A reação de progresso, se adicionada, é sempre removida.
    """

    def __init__(
        self,
        messaging: MessagingClientProtocol,
        aggregator: ConversationContextAggregator,
        pipeline: TaskPipeline,
        window_policy: ContextWindowPolicy,
    ) -> None:
        self._messaging = messaging
        self._aggregator = aggregator
        self._pipeline = pipeline
        self._window_policy = window_policy

    async def execute(self, event: AppMentionInput) -> None:
        processing_reaction_added = False
        try:
            processing_reaction_added = await self._messaging.add_reaction(
                event.channel, event.ts, PROCESSING_REACTION
            )

            extraction = await extract_with_escalation(
                ContextRequest(
                    text=event.text,
                    author_id=event.user,
                    scope_id=event.channel,
                    timestamp_key=event.ts,
                    thread_key=event.thread_ts,
                    files=event.files,
                ),
                self._aggregator,
                self._pipeline,
                self._window_policy,
            )
            outcome = await self._pipeline.submit(extraction.fields)
            record_task_outcome(
                "app_mention",
                success=outcome.success,
                escalated=extraction.escalated,
                correlation_id=get_correlation_id() or None,
            )

            if outcome.success:
                await self._messaging.add_reaction(event.channel, event.ts, SUCCESS_REACTION)
                text = task_created_text(outcome.task_url)
            else:
                await self._messaging.add_reaction(event.channel, event.ts, FAILURE_REACTION)
                text = task_failed_text(outcome.message)
            await self._messaging.post_message(event.channel, text, event.thread_ts)

        except Exception as exc:
            logger.error("app_mention_failed", extra={"error_type": type(exc).__name__})
            await self._messaging.add_reaction(event.channel, event.ts, FAILURE_REACTION)
            await self._messaging.post_message(event.channel, task_error_text(exc), event.thread_ts)

        finally:
            if processing_reaction_added:
                await self._messaging.remove_reaction(event.channel, event.ts, PROCESSING_REACTION)
