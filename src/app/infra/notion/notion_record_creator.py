"""Criação de tarefas como páginas no Notion (POST /v1/pages).

Sem retry: criar página não é idempotente. Transferência binária de
arquivos fica fora; arquivos entram como lista de nomes no corpo da página.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from app.domain.task import TaskRecord
from app.infra.http import RequestSpec, RetryPolicy
from app.protocols.task_pipeline import RecordCreatorProtocol
from utils.errors import DownstreamTaskError, TransportError

if TYPE_CHECKING:
    from ai.models.task_extraction import TaskFields
    from app.infra.http import RetryingTransport
    from config.settings import NotionSettings

logger = logging.getLogger(__name__)

DEFAULT_STATUS = "Todo"
NOTION_USER_ID_PATTERN = re.compile(
    r"^[a-f0-9]{8}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{12}$",
    re.IGNORECASE,
)
MAX_RICH_TEXT_LENGTH = 2000


def _rich_text(content: str) -> list[dict[str, Any]]:
    return [{"type": "text", "text": {"content": content[:MAX_RICH_TEXT_LENGTH]}}]


def _paragraph(content: str) -> dict[str, Any]:
    return {"object": "block", "type": "paragraph", "paragraph": {"rich_text": _rich_text(content)}}


def build_page_properties(fields: TaskFields) -> dict[str, Any]:
    """Mapeia TaskFields para as propriedades da database de tarefas."""
    properties: dict[str, Any] = {
        "Name": {"title": _rich_text(fields.title)},
        "Status": {"status": {"name": DEFAULT_STATUS}},
        "Priorität": {"select": {"name": fields.priority}},
    }
    if fields.due_date:
        properties["Do Date"] = {"date": {"start": fields.due_date}}

    assignee = fields.assignee.strip()
    if assignee and NOTION_USER_ID_PATTERN.match(assignee):
        properties["Verantwortlich"] = {"people": [{"id": assignee}]}
    return properties


def build_page_children(fields: TaskFields) -> list[dict[str, Any]]:
    """Blocos do corpo: descrição, responsável não mapeado, projeto e arquivos."""
    children: list[dict[str, Any]] = []
    if fields.description:
        children.append(_paragraph(fields.description))

    assignee = fields.assignee.strip()
    if assignee and not NOTION_USER_ID_PATTERN.match(assignee):
        children.append(_paragraph(f"Assigned to: {assignee} (unmapped user)"))

    if fields.project:
        children.append(_paragraph(f"Project: {fields.project}"))

    if fields.files:
        children.append(
            {
                "object": "block",
                "type": "heading_3",
                "heading_3": {"rich_text": _rich_text("📎 Files from Slack")},
            }
        )
        for file_ref in fields.files:
            children.append(
                {
                    "object": "block",
                    "type": "bulleted_list_item",
                    "bulleted_list_item": {
                        "rich_text": _rich_text(f"{file_ref.display_name} ({file_ref.mime_type})")
                    },
                }
            )
    return children


class NotionRecordCreator(RecordCreatorProtocol):
    """createRecord(fields) -> TaskRecord(id, url)."""

    def __init__(self, transport: RetryingTransport, settings: NotionSettings) -> None:
        self._transport = transport
        self._settings = settings
        self._policy = RetryPolicy(
            timeout_seconds=settings.request_timeout_seconds,
            max_retries=0,
        )

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._settings.api_key}",
            "Notion-Version": self._settings.api_version,
            "Content-Type": "application/json",
        }

    async def create(self, fields: TaskFields) -> TaskRecord:
        """Cria a página.

        Raises:
            DownstreamTaskError: Config ausente, falha de transporte ou rejeição
        """
        if not self._settings.api_key or not self._settings.database_id:
            raise DownstreamTaskError("Notion is not configured")

        body = {
            "parent": {"database_id": self._settings.database_id},
            "properties": build_page_properties(fields),
            "children": build_page_children(fields),
        }
        spec = RequestSpec(method="POST", headers=self._headers(), json=body)

        try:
            response = await self._transport.execute(self._settings.pages_endpoint, spec, self._policy)
        except TransportError as exc:
            logger.warning(
                "notion_create_failed",
                extra={"error_type": type(exc).__name__, "status_code": exc.status_code},
            )
            raise DownstreamTaskError("Notion is unavailable") from exc

        data = self._read_json(response)
        if response.status_code >= 400:
            message = data.get("message") if isinstance(data.get("message"), str) else None
            logger.warning("notion_create_rejected", extra={"status_code": response.status_code})
            raise DownstreamTaskError(message or f"Notion rejected the task ({response.status_code})")

        page_id = data.get("id")
        if not isinstance(page_id, str) or not page_id:
            raise DownstreamTaskError("Notion response without page id")

        url = data.get("url") if isinstance(data.get("url"), str) else ""
        logger.info("notion_task_created", extra={"fallback_used": fields.fallback_used})
        return TaskRecord(id=page_id, url=url)

    @staticmethod
    def _read_json(response: Any) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}
