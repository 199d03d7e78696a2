"""Router principal do Slack: agrega os endpoints do canal."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.slack.commands import router as commands_router
from api.routes.slack.events import router as events_router

router = APIRouter()

router.include_router(events_router)
router.include_router(commands_router)
