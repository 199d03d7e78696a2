"""Fluxo destacado de mensagem direta ao bot."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.observability import get_correlation_id, record_task_outcome
from app.use_cases.slack._context import ContextRequest, extract_with_escalation
from app.use_cases.slack.notifications import (
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
class DirectMessageInput:
    text: str
    user: str
    channel: str
    ts: str
    files: tuple[FileRef, ...] = ()


class ProcessDirectMessageUseCase:
    """Histórico só do canal da DM, sem reações; resposta no próprio DM."""

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

    async def execute(self, message: DirectMessageInput) -> None:
        try:
            extraction = await extract_with_escalation(
                ContextRequest(
                    text=message.text,
                    author_id=message.user,
                    scope_id=message.channel,
                    timestamp_key=message.ts,
                    files=message.files,
                ),
                self._aggregator,
                self._pipeline,
                self._window_policy,
            )
            outcome = await self._pipeline.submit(extraction.fields)
            record_task_outcome(
                "direct_message",
                success=outcome.success,
                escalated=extraction.escalated,
                correlation_id=get_correlation_id() or None,
            )
            text = (
                task_created_text(outcome.task_url)
                if outcome.success
                else task_failed_text(outcome.message)
            )
            await self._messaging.post_message(message.channel, text)
        except Exception as exc:
            logger.error("direct_message_failed", extra={"error_type": type(exc).__name__})
            await self._messaging.post_message(message.channel, task_error_text(exc))
