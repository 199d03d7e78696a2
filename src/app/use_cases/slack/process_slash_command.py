"""Fluxo destacado do slash command /task."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from app.domain.task import TaskInput
from app.observability import get_correlation_id, record_task_outcome
from app.use_cases.slack.notifications import (
    DEFAULT_COMMAND_TEXT,
    task_created_text,
    task_error_text,
    task_failed_text,
)

if TYPE_CHECKING:
    from app.protocols.messaging import MessagingClientProtocol
    from app.services.task_pipeline import TaskPipeline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlashCommandInput:
    text: str
    user_id: str
    channel_id: str
    response_url: str


class ProcessSlashCommandUseCase:
    """Sem histórico: o texto do comando é o contexto inteiro.

    O resultado vai como mensagem efêmera para a response_url já validada.
    """

    def __init__(self, messaging: MessagingClientProtocol, pipeline: TaskPipeline) -> None:
        self._messaging = messaging
        self._pipeline = pipeline

    async def execute(self, command: SlashCommandInput) -> None:
        try:
            outcome = await self._pipeline.run(
                TaskInput(
                    text=command.text.strip() or DEFAULT_COMMAND_TEXT,
                    author_id=command.user_id,
                    scope_id=command.channel_id,
                    timestamp=datetime.now(UTC).isoformat(),
                )
            )
            record_task_outcome(
                "slash_command",
                success=outcome.success,
                correlation_id=get_correlation_id() or None,
            )
            text = (
                task_created_text(outcome.task_url, command=True)
                if outcome.success
                else task_failed_text(outcome.message)
            )
            await self._messaging.post_response_url(command.response_url, text)
        except Exception as exc:
            logger.error("slash_command_failed", extra={"error_type": type(exc).__name__})
            await self._messaging.post_response_url(
                command.response_url, task_error_text(exc, command=True)
            )
