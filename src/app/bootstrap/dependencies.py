"""Factories de componentes: conecta implementações concretas aos protocolos.

Tudo é construído uma única vez no lifespan e passado por referência;
testes podem criar instâncias independentes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.slack import SlackHttpClient
from api.routes.slack.runtime_tasks import ProcessingTaskRunner
from app.coordinators.slack import EventRouter
from app.infra.ai import DeterministicTaskParser, OpenAITaskParser
from app.infra.http import RetryingTransport
from app.infra.notion import NotionRecordCreator
from app.infra.stores import IdempotencyGuard
from app.services import ContextWindowPolicy, ConversationContextAggregator, TaskPipeline
from app.use_cases.slack import (
    ProcessAppMentionUseCase,
    ProcessDirectMessageUseCase,
    ProcessSlashCommandUseCase,
)
from config.settings import (
    get_context_settings,
    get_idempotency_settings,
    get_notion_settings,
    get_openai_settings,
    get_slack_settings,
)

if TYPE_CHECKING:
    from app.protocols.task_pipeline import TaskParserProtocol
    from config.settings import OpenAISettings

logger = logging.getLogger(__name__)


@dataclass
class AppComponents:
    """Componentes compartilhados entre requests (guardados em app.state)."""

    transport: RetryingTransport
    slack_client: SlackHttpClient
    event_guard: IdempotencyGuard
    command_guard: IdempotencyGuard
    pipeline: TaskPipeline
    event_router: EventRouter
    task_runner: ProcessingTaskRunner

    async def aclose(self, drain_timeout_seconds: float = 30.0) -> None:
        """Aguarda os fluxos pendentes e fecha o cliente HTTP."""
        await self.task_runner.drain(timeout_seconds=drain_timeout_seconds)
        await self.transport.aclose()


def create_idempotency_guard() -> IdempotencyGuard:
    settings = get_idempotency_settings()
    return IdempotencyGuard(ttl_seconds=settings.ttl_seconds, max_size=settings.max_size)


def create_task_parser(transport: RetryingTransport, settings: OpenAISettings) -> TaskParserProtocol:
    """OpenAI quando habilitado e com credencial; senão parser determinístico."""
    if settings.is_usable:
        logger.info("task_parser_created", extra={"backend": "openai", "model": settings.model})
        return OpenAITaskParser(transport, settings)
    logger.info("task_parser_created", extra={"backend": "deterministic"})
    return DeterministicTaskParser()


def create_app_components(http_client: httpx.AsyncClient | None = None) -> AppComponents:
    """Monta o grafo de dependências do serviço.

    Args:
        http_client: Cliente HTTP a usar (testes injetam MockTransport)

    Returns:
        AppComponents pronto para ser anexado a app.state
    """
    slack_settings = get_slack_settings()
    context_settings = get_context_settings()
    notion_settings = get_notion_settings()

    transport = RetryingTransport(http_client)
    slack_client = SlackHttpClient(transport, slack_settings)
    aggregator = ConversationContextAggregator(
        slack_client,
        display_timezone=context_settings.display_timezone,
    )
    pipeline = TaskPipeline(
        parser=create_task_parser(transport, get_openai_settings()),
        creator=NotionRecordCreator(transport, notion_settings),
        default_project=notion_settings.default_project_name,
    )

    event_router = EventRouter(
        app_mention=ProcessAppMentionUseCase(
            slack_client,
            aggregator,
            pipeline,
            ContextWindowPolicy(
                initial_size=context_settings.window_size,
                extended_size=context_settings.extended_window_size,
            ),
        ),
        direct_message=ProcessDirectMessageUseCase(
            slack_client,
            aggregator,
            pipeline,
            ContextWindowPolicy(
                initial_size=context_settings.direct_message_window_size,
                extended_size=context_settings.direct_message_window_size,
            ),
        ),
        slash_command=ProcessSlashCommandUseCase(slack_client, pipeline),
    )

    return AppComponents(
        transport=transport,
        slack_client=slack_client,
        event_guard=create_idempotency_guard(),
        command_guard=create_idempotency_guard(),
        pipeline=pipeline,
        event_router=event_router,
        task_runner=ProcessingTaskRunner(slack_settings.max_concurrent_tasks),
    )


def attach_components(state: Any, components: AppComponents) -> None:
    """Expõe os componentes em `app.state` com os nomes lidos pelas rotas."""
    state.components = components
    state.event_guard = components.event_guard
    state.command_guard = components.command_guard
    state.event_router = components.event_router
    state.task_runner = components.task_runner
