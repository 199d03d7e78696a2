"""Extrator de campos de tarefa via OpenAI, com fallback determinístico.

Nunca levanta exceção para o chamador: qualquer falha (credencial ausente,
timeout, HTTP, JSON inválido, schema) cai em `fallback_task_fields`.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from pydantic import ValidationError

from ai.models.task_extraction import TaskExtraction, TaskFields
from ai.prompts.task_parser_prompt import TASK_PARSER_SYSTEM, format_task_parser_prompt
from ai.rules.fallbacks import fallback_task_fields
from ai.utils._json_extractor import extract_json_from_response
from app.infra.ai._openai_http import call_openai_api
from app.protocols.task_pipeline import TaskParserProtocol
from config.logging import log_fallback

if TYPE_CHECKING:
    from ai.models.task_extraction import TaskHints
    from app.infra.http import RetryingTransport
    from config.settings import OpenAISettings

logger = logging.getLogger(__name__)

POINT_NAME = "task_parser"


class DeterministicTaskParser(TaskParserProtocol):
    """Parser sem IA (primeira linha = título)."""

    async def parse(self, text: str, hints: TaskHints) -> TaskFields:
        return fallback_task_fields(text, hints.author_id, hints.default_project)


class OpenAITaskParser(TaskParserProtocol):
    """Parser LLM (chat completions + JSON validado com pydantic)."""

    def __init__(self, transport: RetryingTransport, settings: OpenAISettings) -> None:
        self._transport = transport
        self._settings = settings

    async def parse(self, text: str, hints: TaskHints) -> TaskFields:
        if not self._settings.is_usable:
            log_fallback(logger, POINT_NAME, reason="disabled")
            return fallback_task_fields(text, hints.author_id, hints.default_project)

        start = time.perf_counter()
        raw = await call_openai_api(
            transport=self._transport,
            settings=self._settings,
            system_prompt=TASK_PARSER_SYSTEM,
            user_prompt=format_task_parser_prompt(text, hints),
            point_name=POINT_NAME,
        )
        elapsed_ms = (time.perf_counter() - start) * 1000

        extraction = self._parse_response(raw)
        if extraction is None:
            log_fallback(logger, POINT_NAME, reason="invalid_response", elapsed_ms=elapsed_ms)
            return fallback_task_fields(text, hints.author_id, hints.default_project)

        return self._to_fields(extraction, hints)

    @staticmethod
    def _parse_response(raw: str | None) -> TaskExtraction | None:
        if raw is None:
            return None
        data = extract_json_from_response(raw)
        if data is None:
            return None
        try:
            return TaskExtraction.model_validate(data)
        except ValidationError as exc:
            logger.warning(
                "task_parser_schema_invalid",
                extra={"error_count": exc.error_count()},
            )
            return None

    @staticmethod
    def _to_fields(extraction: TaskExtraction, hints: TaskHints) -> TaskFields:
        """Completa responsável/projeto padrão e seleciona arquivos por id."""
        wanted = set(extraction.include_file_ids)
        files = [file_ref for file_ref in hints.files if file_ref.id and file_ref.id in wanted]
        return TaskFields(
            title=extraction.title.strip(),
            description=extraction.description,
            priority=extraction.priority,
            due_date=extraction.due_date,
            assignee=extraction.assignee or hints.author_id,
            project=extraction.project or hints.default_project or None,
            files=files,
        )
