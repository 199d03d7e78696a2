"""Endpoint da Events API do Slack.

POST /api/slack/events:
1. Assinatura v0 + janela anti-replay (401 {"error": motivo})
2. JSON válido (400 {"error": "invalid_json"})
3. url_verification responde o challenge
4. event_callback passa pelo guard de idempotência e pelo EventRouter

Resposta 200 {"ok": true} sai antes do processamento, inclusive para
duplicados e eventos ignorados.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from api.connectors.slack.event_id import compute_event_key
from api.connectors.slack.webhook import (
    InvalidJsonError,
    InvalidSignatureError,
    build_challenge_response,
    is_url_verification,
    parse_event_request,
)
from app.observability import CORRELATION_HEADER, correlation_scope
from config.settings import get_slack_settings

logger = logging.getLogger(__name__)

router = APIRouter()

ACK_BODY: dict[str, Any] = {"ok": True}
EVENT_CALLBACK_TYPE = "event_callback"


def error_response(error: str, status_code: int) -> JSONResponse:
    return JSONResponse(content={"error": error}, status_code=status_code)


@router.post("/events", response_model=None)
async def receive_events(request: Request) -> JSONResponse | dict[str, Any]:
    """Recebimento de eventos da Events API."""
    with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
        settings = get_slack_settings()
        raw_body = await request.body()

        try:
            payload, signed_request = parse_event_request(
                raw_body,
                dict(request.headers),
                settings.signing_secret or None,
                tolerance_seconds=settings.replay_tolerance_seconds,
            )
        except InvalidSignatureError as exc:
            logger.warning(
                "slack_signature_invalid",
                extra={"endpoint": "events", "error": str(exc)},
            )
            return error_response(str(exc), status.HTTP_401_UNAUTHORIZED)
        except InvalidJsonError:
            logger.warning("slack_json_invalid", extra={"endpoint": "events"})
            return error_response("invalid_json", status.HTTP_400_BAD_REQUEST)

        if is_url_verification(payload):
            logger.info("slack_url_verification")
            return build_challenge_response(payload)

        if payload.get("type") != EVENT_CALLBACK_TYPE:
            logger.info("slack_envelope_ignored", extra={"envelope_type": payload.get("type")})
            return ACK_BODY

        state = request.app.state
        key = compute_event_key(
            payload,
            signed_request.timestamp_header,
            signed_request.signature_header,
        )
        if state.event_guard.has(key):
            logger.info("slack_event_duplicate", extra={"correlation_id": correlation_id})
            return ACK_BODY
        state.event_guard.add(key)

        work = state.event_router.route_event(payload)
        if work is not None:
            state.task_runner.schedule(
                flow=work.flow,
                correlation_id=correlation_id,
                coroutine=work.coroutine,
            )
        return ACK_BODY
