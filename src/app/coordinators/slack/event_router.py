"""Roteamento de eventos e comandos Slack já autenticados e deduplicados.

Decide qual fluxo destacado roda para cada entrega e devolve a corrotina
para o chamador agendar; nenhum IO acontece aqui.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from api.normalizers.slack import extract_files
from app.use_cases.slack import (
    AppMentionInput,
    DirectMessageInput,
    SlashCommandInput,
)
from app.use_cases.slack.notifications import PROCESSING_ACK_TEXT, UNKNOWN_COMMAND_TEXT

if TYPE_CHECKING:
    from collections.abc import Coroutine

    from app.use_cases.slack import (
        ProcessAppMentionUseCase,
        ProcessDirectMessageUseCase,
        ProcessSlashCommandUseCase,
    )

logger = logging.getLogger(__name__)

TASK_COMMAND = "/task"
DIRECT_MESSAGE_CHANNEL_TYPE = "im"


@dataclass
class RoutedWork:
    """Fluxo escolhido: nome (para logs) e corrotina a agendar."""

    flow: str
    coroutine: Coroutine[Any, Any, None]


@dataclass
class CommandRoute:
    """Resposta imediata do comando e, se houver, o fluxo destacado."""

    body: dict[str, str]
    work: RoutedWork | None = None


def _ephemeral(text: str) -> dict[str, str]:
    return {"response_type": "ephemeral", "text": text}


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ""


class EventRouter:
    """Despacha `event_callback` e slash commands para os use cases."""

    def __init__(
        self,
        app_mention: ProcessAppMentionUseCase,
        direct_message: ProcessDirectMessageUseCase,
        slash_command: ProcessSlashCommandUseCase,
    ) -> None:
        self._app_mention = app_mention
        self._direct_message = direct_message
        self._slash_command = slash_command

    def route_event(self, envelope: dict[str, Any]) -> RoutedWork | None:
        """Escolhe o fluxo para um envelope `event_callback`.

        - app_mention: sempre (thread = thread_ts ou ts)
        - message em DM ("im") com texto, sem bot_id e sem subtype
        - demais: ignorados (None)
        """
        event = envelope.get("event")
        if not isinstance(event, dict):
            logger.info("slack_event_ignored", extra={"reason": "missing_event"})
            return None

        event_type = _str(event.get("type"))
        if event_type == "app_mention":
            ts = _str(event.get("ts"))
            mention = AppMentionInput(
                text=_str(event.get("text")),
                user=_str(event.get("user")),
                channel=_str(event.get("channel")),
                thread_ts=_str(event.get("thread_ts")) or ts,
                ts=ts,
                files=extract_files(event.get("files")),
            )
            return RoutedWork("app_mention", self._app_mention.execute(mention))

        if event_type == "message" and self._is_direct_message(event):
            message = DirectMessageInput(
                text=_str(event.get("text")),
                user=_str(event.get("user")),
                channel=_str(event.get("channel")),
                ts=_str(event.get("ts")),
                files=extract_files(event.get("files")),
            )
            return RoutedWork("direct_message", self._direct_message.execute(message))

        logger.info("slack_event_ignored", extra={"event_type": event_type or None})
        return None

    @staticmethod
    def _is_direct_message(event: dict[str, Any]) -> bool:
        return (
            event.get("channel_type") == DIRECT_MESSAGE_CHANNEL_TYPE
            and bool(_str(event.get("text")))
            and not event.get("bot_id")
            and not event.get("subtype")
        )

    @staticmethod
    def command_ack(form: dict[str, str]) -> dict[str, str]:
        """Resposta imediata do comando, sem agendar nada (usada em duplicados)."""
        if form.get("command", "") == TASK_COMMAND:
            return _ephemeral(PROCESSING_ACK_TEXT)
        return _ephemeral(UNKNOWN_COMMAND_TEXT)

    def route_command(self, form: dict[str, str]) -> CommandRoute:
        """Roteia slash command; response_url já deve estar validada."""
        if form.get("command", "") != TASK_COMMAND:
            logger.info("slack_command_unknown")
            return CommandRoute(body=self.command_ack(form))

        command_input = SlashCommandInput(
            text=form.get("text", ""),
            user_id=form.get("user_id", ""),
            channel_id=form.get("channel_id", ""),
            response_url=form.get("response_url", ""),
        )
        return CommandRoute(
            body=self.command_ack(form),
            work=RoutedWork("slash_command", self._slash_command.execute(command_input)),
        )
