"""Aplicação ASGI da ponte Slack → tarefas.

    uvicorn app.app:app --host 0.0.0.0 --port 8080

ou `slack-task-bridge` (HOST/PORT do ambiente; reload só em development).
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.dependencies import attach_components, create_app_components
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Handler raiz instalado antes do primeiro log do processo
initialize_app()

logger = get_logger(__name__)

SHUTDOWN_DRAIN_TIMEOUT_SECONDS = 30.0


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup valida settings e monta os componentes; shutdown drena fluxos."""
    validate_runtime_settings()
    components = create_app_components()
    attach_components(app.state, components)
    logger.info("app_started", extra={"environment": get_base_settings().environment})

    yield

    pending = components.task_runner.active_count
    logger.info("app_shutting_down", extra={"pending_tasks": pending})
    await components.aclose(drain_timeout_seconds=SHUTDOWN_DRAIN_TIMEOUT_SECONDS)


def create_app() -> FastAPI:
    fastapi_app = FastAPI(
        title="Slack Task Bridge",
        description="Webhooks do Slack → tarefas no Notion",
        version="1.0.0",
        lifespan=lifespan,
        redoc_url=None,
    )
    fastapi_app.include_router(create_api_router())
    return fastapi_app


app = create_app()


def main() -> None:
    import uvicorn

    settings = get_base_settings()
    uvicorn.run(
        "app.app:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
        reload=settings.environment == "development",
        log_config=None,
    )


if __name__ == "__main__":
    main()
