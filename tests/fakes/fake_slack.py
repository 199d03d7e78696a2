"""Fakes in-memory do Slack e do pipeline de tarefas para testes deterministas."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from ai.models.task_extraction import TaskFields, TaskHints
from ai.rules.fallbacks import fallback_task_fields
from api.connectors.slack.signature import (
    SIGNATURE_HEADER,
    TIMESTAMP_HEADER,
    build_slack_signature,
)
from app.domain.conversation import Message
from app.domain.task import TaskRecord
from app.protocols.history_source import HistorySourceProtocol
from app.protocols.messaging import MessagingClientProtocol
from app.protocols.task_pipeline import RecordCreatorProtocol, TaskParserProtocol
from utils.errors import DownstreamTaskError

SIGNING_SECRET = "test-signing-secret"


def signed_headers(
    body: bytes,
    *,
    secret: str = SIGNING_SECRET,
    timestamp: str | None = None,
    content_type: str = "application/json",
) -> dict[str, str]:
    """Headers de uma entrega Slack assinada corretamente."""
    ts = timestamp or str(int(time.time()))
    return {
        "content-type": content_type,
        TIMESTAMP_HEADER: ts,
        SIGNATURE_HEADER: build_slack_signature(secret, ts, body),
    }


class FakeHistorySource(HistorySourceProtocol):
    """Histórico fixo por fonte; registra os limites pedidos."""

    def __init__(
        self,
        thread: list[Message] | None = None,
        channel: list[Message] | None = None,
        *,
        thread_error: Exception | None = None,
        channel_error: Exception | None = None,
    ) -> None:
        self.thread = thread or []
        self.channel = channel or []
        self.thread_error = thread_error
        self.channel_error = channel_error
        self.thread_calls: list[tuple[str, str, int]] = []
        self.channel_calls: list[tuple[str, int]] = []

    async def fetch_thread(self, scope_id: str, thread_key: str, limit: int) -> list[Message]:
        self.thread_calls.append((scope_id, thread_key, limit))
        if self.thread_error is not None:
            raise self.thread_error
        return list(self.thread[-limit:])

    async def fetch_channel(self, scope_id: str, limit: int) -> list[Message]:
        self.channel_calls.append((scope_id, limit))
        if self.channel_error is not None:
            raise self.channel_error
        return list(self.channel[-limit:])


@dataclass
class FakeMessagingClient(MessagingClientProtocol):
    """Registra toda saída para o Slack em listas."""

    reactions_added: list[tuple[str, str, str]] = field(default_factory=list)
    reactions_removed: list[tuple[str, str, str]] = field(default_factory=list)
    messages: list[tuple[str, str, str | None]] = field(default_factory=list)
    responses: list[tuple[str, str]] = field(default_factory=list)
    reaction_ok: bool = True

    async def add_reaction(self, channel: str, timestamp: str, name: str) -> bool:
        self.reactions_added.append((channel, timestamp, name))
        return self.reaction_ok

    async def remove_reaction(self, channel: str, timestamp: str, name: str) -> bool:
        self.reactions_removed.append((channel, timestamp, name))
        return True

    async def post_message(self, channel: str, text: str, thread_ts: str | None = None) -> bool:
        self.messages.append((channel, text, thread_ts))
        return True

    async def post_response_url(self, response_url: str, text: str) -> bool:
        self.responses.append((response_url, text))
        return True


class ScriptedTaskParser(TaskParserProtocol):
    """Devolve descrições roteirizadas em ordem; registra os textos recebidos."""

    def __init__(self, descriptions: list[str] | None = None) -> None:
        self._descriptions = list(descriptions or [])
        self.texts: list[str] = []
        self.hints: list[TaskHints] = []

    async def parse(self, text: str, hints: TaskHints) -> TaskFields:
        self.texts.append(text)
        self.hints.append(hints)
        fields = fallback_task_fields(text, hints.author_id, hints.default_project)
        if self._descriptions:
            fields = fields.model_copy(update={"description": self._descriptions.pop(0)})
        return fields.model_copy(update={"files": list(hints.files)})


class FakeRecordCreator(RecordCreatorProtocol):
    """Cria registros em memória ou falha com mensagem configurada."""

    def __init__(self, *, error: str | None = None, url: str = "https://notion.so/task-1") -> None:
        self._error = error
        self._url = url
        self.created: list[TaskFields] = []

    async def create(self, fields: TaskFields) -> TaskRecord:
        if self._error is not None:
            raise DownstreamTaskError(self._error)
        self.created.append(fields)
        return TaskRecord(id=f"task-{len(self.created)}", url=self._url)
