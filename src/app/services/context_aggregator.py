"""Agregação de contexto conversacional (thread + canal).

Busca as duas fontes de histórico, ordena por timestamp numérico, filtra
mensagens automatizadas e já representadas, deduplica arquivos e monta o
texto final entregue ao extrator de tarefas.

Falha em uma fonte degrada para lote vazio daquela fonte; a agregação
nunca aborta por erro de leitura.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from app.domain.conversation import ContextBundle, FileRef, Message, dedupe_files

if TYPE_CHECKING:
    from collections.abc import Awaitable, Sequence

    from app.protocols.history_source import HistorySourceProtocol

logger = logging.getLogger(__name__)

INVALID_TIME_DISPLAY = "00:00:00"
UNKNOWN_AUTHOR = "unknown"


class ContextWindow(Enum):
    """Estado da janela de histórico: normal ou estendida (única escalada)."""

    NORMAL = "normal"
    EXTENDED = "extended"


@dataclass(frozen=True)
class ContextWindowPolicy:
    """Tamanhos de janela e regra de escalada.

    A escalada só existe de NORMAL para EXTENDED, uma única vez, e apenas
    quando o tamanho estendido é maior que o inicial.
    """

    initial_size: int = 20
    extended_size: int = 50

    def size_for(self, window: ContextWindow) -> int:
        return self.extended_size if window is ContextWindow.EXTENDED else self.initial_size

    def next_window(self, current: ContextWindow, needs_more_context: bool) -> ContextWindow | None:
        """Próximo estado após a resposta do extrator; None encerra."""
        if (
            current is ContextWindow.NORMAL
            and needs_more_context
            and self.extended_size > self.initial_size
        ):
            return ContextWindow.EXTENDED
        return None


@dataclass(frozen=True)
class ComposedContext:
    """Texto final + conjunto de arquivos (histórico e mensagem atual)."""

    text: str
    files: tuple[FileRef, ...]
    window: ContextWindow


def _describe_files(files: Sequence[FileRef]) -> str:
    if not files:
        return ""
    return " " + ", ".join(file_ref.describe() for file_ref in files)


class ConversationContextAggregator:
    """Monta ContextBundle a partir das fontes de thread e canal."""

    def __init__(
        self,
        history_source: HistorySourceProtocol,
        display_timezone: str = "UTC",
    ) -> None:
        self._history_source = history_source
        self._timezone = ZoneInfo(display_timezone)

    # =========================================================================
    # Busca
    # =========================================================================

    async def aggregate(
        self,
        scope_id: str,
        thread_key: str | None,
        exclude_timestamp_key: str,
        window_size: int,
    ) -> ContextBundle:
        """Busca, ordena, filtra e renderiza o histórico.

        Com `thread_key`: até `window_size` mensagens da thread e, em
        paralelo, até `max(1, window_size // 2)` do canal (sem mensagens
        de thread). Sem `thread_key`: até `window_size` do canal.

        Args:
            scope_id: Canal
            thread_key: Thread da mensagem que disparou o fluxo (opcional)
            exclude_timestamp_key: Timestamp da própria mensagem disparadora
            window_size: Tamanho da janela

        Returns:
            ContextBundle com linhas por fonte e arquivos deduplicados
        """
        bundle = ContextBundle()
        if not scope_id:
            return bundle

        if thread_key:
            thread_batch, channel_batch = await asyncio.gather(
                self._safe_fetch(
                    "thread",
                    self._history_source.fetch_thread(scope_id, thread_key, window_size),
                ),
                self._safe_fetch(
                    "channel",
                    self._history_source.fetch_channel(scope_id, max(1, window_size // 2)),
                ),
            )
            thread_messages = self._select(thread_batch, exclude_timestamp_key=exclude_timestamp_key)
            channel_messages = self._select(channel_batch, drop_threaded=True)
        else:
            channel_batch = await self._safe_fetch(
                "channel",
                self._history_source.fetch_channel(scope_id, window_size),
            )
            thread_messages = []
            channel_messages = self._select(channel_batch, exclude_timestamp_key=exclude_timestamp_key)

        bundle.thread_lines = [self.render_line(message) for message in thread_messages]
        bundle.channel_lines = [self.render_line(message) for message in channel_messages]
        bundle.files = dedupe_files(
            *(message.attached_files for message in thread_messages),
            *(message.attached_files for message in channel_messages),
        )
        return bundle

    async def _safe_fetch(self, source: str, fetch: Awaitable[list[Message]]) -> list[Message]:
        try:
            return await fetch
        except Exception as exc:
            logger.warning(
                "context_source_degraded",
                extra={"source": source, "error_type": type(exc).__name__},
            )
            return []

    @staticmethod
    def _select(
        messages: Sequence[Message],
        *,
        exclude_timestamp_key: str | None = None,
        drop_threaded: bool = False,
    ) -> list[Message]:
        selected: list[Message] = []
        for message in sorted(messages, key=lambda item: item.sort_key):
            if message.is_from_automated_actor:
                continue
            if exclude_timestamp_key is not None and message.timestamp_key == exclude_timestamp_key:
                continue
            if drop_threaded and message.thread_key:
                continue
            selected.append(message)
        return selected

    # =========================================================================
    # Renderização
    # =========================================================================

    def format_time(self, timestamp_key: str) -> str:
        """HH:MM:SS no fuso configurado; timestamp inválido vira 00:00:00."""
        try:
            seconds = float(timestamp_key)
            moment = datetime.fromtimestamp(seconds, tz=UTC)
        except (TypeError, ValueError, OverflowError, OSError):
            return INVALID_TIME_DISPLAY
        return moment.astimezone(self._timezone).strftime("%H:%M:%S")

    def render_line(self, message: Message) -> str:
        author = message.author_id or UNKNOWN_AUTHOR
        return (
            f"[{self.format_time(message.timestamp_key)}] {author}: "
            f"{message.text}{_describe_files(message.attached_files)}"
        )

    @staticmethod
    def compose_context(
        bundle: ContextBundle,
        current_text: str,
        current_files: Sequence[FileRef] = (),
        window: ContextWindow = ContextWindow.NORMAL,
    ) -> ComposedContext:
        """Monta o texto final e funde os arquivos da mensagem atual.

        Sem histórico, o texto é só a mensagem atual. Com histórico, seções
        rotuladas (canal, thread, mensagem atual) separadas por linha em
        branco; seção vazia não gera cabeçalho.
        """
        files = tuple(dedupe_files(bundle.files, current_files))
        current = f"{current_text}{_describe_files(current_files)}"

        if not bundle.has_history:
            return ComposedContext(text=current, files=files, window=window)

        extended = window is ContextWindow.EXTENDED
        channel_label = "Extended channel conversation history" if extended else "Channel conversation history"
        thread_label = "Extended thread conversation" if extended else "Thread conversation"

        sections: list[str] = []
        if bundle.channel_lines:
            sections.append(
                f"{channel_label} ({len(bundle.channel_lines)} messages):\n"
                + "\n".join(bundle.channel_lines)
            )
        if bundle.thread_lines:
            sections.append(
                f"{thread_label} ({len(bundle.thread_lines)} messages):\n"
                + "\n".join(bundle.thread_lines)
            )
        sections.append(f"Current message: {current}")

        return ComposedContext(text="\n\n".join(sections), files=files, window=window)
