"""Endpoints de health check e banner do serviço."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import (
    SERVICE_NAME,
    get_notion_settings,
    get_openai_settings,
    get_slack_settings,
)

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência (por configuração)."""

    status: Literal["ok", "degraded", "failed"]
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "error": self.error}


@router.get("/")
async def root() -> dict[str, str]:
    """Banner do serviço."""
    return {"message": "Slack to Notion Task Bot API"}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness probe baseada em configuração.

    Slack e Notion são críticos; sem OpenAI o parser determinístico
    assume (degraded).
    """
    slack_check = _check_slack()
    notion_check = _check_notion()
    openai_check = _check_openai()

    ready = slack_check.status == "ok" and notion_check.status == "ok"
    if not ready:
        logger.warning(
            "readiness_not_ready",
            extra={"slack": slack_check.status, "notion": notion_check.status},
        )

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "slack": slack_check.as_dict(),
            "notion": notion_check.as_dict(),
            "openai": openai_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_slack() -> DependencyCheck:
    settings = get_slack_settings()
    if not settings.signing_secret:
        return DependencyCheck(status="failed", error="missing_signing_secret")
    if not settings.bot_token:
        return DependencyCheck(status="failed", error="missing_bot_token")
    return DependencyCheck(status="ok")


def _check_notion() -> DependencyCheck:
    settings = get_notion_settings()
    if not settings.api_key or not settings.database_id:
        return DependencyCheck(status="failed", error="not_configured")
    return DependencyCheck(status="ok")


def _check_openai() -> DependencyCheck:
    settings = get_openai_settings()
    if not settings.enabled:
        return DependencyCheck(status="degraded", error="disabled")
    if not settings.api_key:
        return DependencyCheck(status="degraded", error="not_configured")
    return DependencyCheck(status="ok")
