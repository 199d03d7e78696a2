"""Settings do Notion (destino das tarefas criadas)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

NOTION_API_BASE_URL: str = "https://api.notion.com/v1"
NOTION_API_VERSION: str = "2022-06-28"


@dataclass(frozen=True)
class NotionSettings:
    """Configurações do Notion.

    Attributes:
        api_key: Token de integração do Notion
        database_id: Database onde as tarefas são criadas
        default_project_name: Projeto usado quando o parser não identifica um
        api_base_url: URL base da API
        api_version: Header Notion-Version
        request_timeout_seconds: Timeout da criação de página
    """

    api_key: str = ""
    database_id: str = ""
    default_project_name: str = ""
    api_base_url: str = NOTION_API_BASE_URL
    api_version: str = NOTION_API_VERSION
    request_timeout_seconds: float = 15.0

    @property
    def pages_endpoint(self) -> str:
        """URL do endpoint de criação de páginas."""
        return f"{self.api_base_url.rstrip('/')}/pages"

    def validate(self) -> list[str]:
        """Valida configurações do Notion.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not self.api_key:
            errors.append("NOTION_API_KEY não configurado")

        if not self.database_id:
            errors.append("NOTION_DATABASE_ID não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("NOTION_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_notion_from_env() -> NotionSettings:
    """Carrega NotionSettings de variáveis de ambiente."""
    return NotionSettings(
        api_key=os.getenv("NOTION_API_KEY", ""),
        database_id=os.getenv("NOTION_DATABASE_ID", ""),
        default_project_name=os.getenv("NOTION_DEFAULT_PROJECT_NAME", "").strip(),
        api_base_url=os.getenv("NOTION_API_BASE_URL", NOTION_API_BASE_URL),
        api_version=os.getenv("NOTION_API_VERSION", NOTION_API_VERSION),
        request_timeout_seconds=float(os.getenv("NOTION_REQUEST_TIMEOUT_SECONDS", "15")),
    )


@lru_cache(maxsize=1)
def get_notion_settings() -> NotionSettings:
    """Retorna instância cacheada de NotionSettings."""
    return _load_notion_from_env()
