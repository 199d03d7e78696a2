"""Endpoint de slash commands do Slack.

POST /api/slack/commands (form-urlencoded):
1. Assinatura v0 + janela anti-replay (401)
2. response_url https com host permitido (400, antes de qualquer chamada)
3. Guard de idempotência por (timestamp, assinatura)
4. /task agenda o fluxo e responde efêmero; outros comandos: "Unknown command"
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from api.connectors.slack.event_id import compute_request_key
from api.connectors.slack.response_url import is_allowed_response_url
from api.connectors.slack.webhook import (
    InvalidFormError,
    InvalidSignatureError,
    parse_command_request,
)
from api.routes.slack.events import error_response
from app.observability import CORRELATION_HEADER, correlation_scope
from config.settings import get_slack_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/commands", response_model=None)
async def receive_command(request: Request) -> JSONResponse | dict[str, Any]:
    """Recebimento de slash commands."""
    with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
        settings = get_slack_settings()
        raw_body = await request.body()

        try:
            form, signed_request = parse_command_request(
                raw_body,
                dict(request.headers),
                settings.signing_secret or None,
                tolerance_seconds=settings.replay_tolerance_seconds,
            )
        except InvalidSignatureError as exc:
            logger.warning(
                "slack_signature_invalid",
                extra={"endpoint": "commands", "error": str(exc)},
            )
            return error_response(str(exc), status.HTTP_401_UNAUTHORIZED)
        except InvalidFormError:
            logger.warning("slack_form_invalid", extra={"endpoint": "commands"})
            return error_response("invalid_form", status.HTTP_400_BAD_REQUEST)

        if not is_allowed_response_url(form.get("response_url"), settings.response_url_hosts):
            logger.warning("slack_response_url_rejected", extra={"endpoint": "commands"})
            return error_response("invalid_response_url", status.HTTP_400_BAD_REQUEST)

        state = request.app.state
        key = compute_request_key(signed_request.timestamp_header, signed_request.signature_header)
        if state.command_guard.has(key):
            logger.info("slack_command_duplicate", extra={"correlation_id": correlation_id})
            return state.event_router.command_ack(form)
        state.command_guard.add(key)

        route = state.event_router.route_command(form)
        if route.work is not None:
            state.task_runner.schedule(
                flow=route.work.flow,
                correlation_id=correlation_id,
                coroutine=route.work.coroutine,
            )
        return route.body
