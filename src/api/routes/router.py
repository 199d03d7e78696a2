"""Agregador de rotas: registra os routers de health e do Slack.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.slack.router import router as slack_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks e banner (sem prefixo)
    api_router.include_router(health_router, tags=["health"])

    # Slack
    api_router.include_router(
        slack_router,
        prefix="/api/slack",
        tags=["slack"],
    )

    return api_router
