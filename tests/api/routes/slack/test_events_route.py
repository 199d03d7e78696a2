"""Testes do endpoint da Events API."""

from __future__ import annotations

import json
import time
from unittest.mock import MagicMock

import pytest

from api.routes.slack import events
from app.coordinators.slack import RoutedWork
from tests.api.routes.slack._helpers import SLACK_SETTINGS, build_request, build_state
from tests.fakes.fake_slack import signed_headers


async def _noop() -> None:
    return None


def _event_router() -> MagicMock:
    router = MagicMock()
    router.route_event.side_effect = lambda envelope: RoutedWork("app_mention", _noop())
    return router


@pytest.fixture(autouse=True)
def _settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(events, "get_slack_settings", lambda: SLACK_SETTINGS)


def _mention_body(event_id: str = "Ev1") -> bytes:
    return json.dumps(
        {
            "type": "event_callback",
            "event_id": event_id,
            "event": {"type": "app_mention", "channel": "C1", "ts": "1.0", "text": "hi"},
        }
    ).encode()


@pytest.mark.asyncio
async def test_missing_signature_returns_401() -> None:
    request = build_request(body=_mention_body(), state=build_state(_event_router()))
    response = await events.receive_events(request)

    assert response.status_code == 401
    assert json.loads(response.body) == {"error": "unauthorized"}


@pytest.mark.asyncio
async def test_bad_signature_returns_401() -> None:
    body = _mention_body()
    headers = signed_headers(body, secret="wrong")
    response = await events.receive_events(
        build_request(body=body, headers=headers, state=build_state(_event_router()))
    )

    assert response.status_code == 401
    assert json.loads(response.body) == {"error": "invalid signature"}


@pytest.mark.asyncio
async def test_stale_timestamp_returns_401() -> None:
    body = _mention_body()
    headers = signed_headers(body, timestamp="1000000000")
    response = await events.receive_events(
        build_request(body=body, headers=headers, state=build_state(_event_router()))
    )

    assert json.loads(response.body) == {"error": "request timeout"}


@pytest.mark.asyncio
async def test_invalid_json_returns_400() -> None:
    body = b"{broken"
    response = await events.receive_events(
        build_request(body=body, headers=signed_headers(body), state=build_state(_event_router()))
    )

    assert response.status_code == 400
    assert json.loads(response.body) == {"error": "invalid_json"}


@pytest.mark.asyncio
async def test_url_verification_echoes_challenge() -> None:
    body = json.dumps({"type": "url_verification", "challenge": "abc123"}).encode()
    response = await events.receive_events(
        build_request(body=body, headers=signed_headers(body), state=build_state(_event_router()))
    )

    assert response == {"challenge": "abc123"}


@pytest.mark.asyncio
async def test_event_callback_schedules_work() -> None:
    body = _mention_body()
    state = build_state(_event_router())
    response = await events.receive_events(
        build_request(body=body, headers=signed_headers(body), state=state)
    )

    assert response == {"ok": True}
    assert state.task_runner.scheduled == ["app_mention"]


@pytest.mark.asyncio
async def test_duplicate_event_is_acknowledged_without_work() -> None:
    """Mesmo event_id com nova assinatura (retry do Slack) não reprocessa."""
    state = build_state(_event_router())
    body = _mention_body("EvDup")

    first = await events.receive_events(
        build_request(body=body, headers=signed_headers(body), state=state)
    )
    second = await events.receive_events(
        build_request(
            body=body,
            headers=signed_headers(body, timestamp=str(int(time.time()) - 5)),
            state=state,
        )
    )

    assert first == second == {"ok": True}
    assert state.task_runner.scheduled == ["app_mention"]
    assert state.event_router.route_event.call_count == 1


@pytest.mark.asyncio
async def test_ignored_event_is_acknowledged() -> None:
    router = MagicMock()
    router.route_event.return_value = None
    state = build_state(router)
    body = json.dumps({"type": "event_callback", "event_id": "Ev2", "event": {"type": "reaction_added"}}).encode()

    response = await events.receive_events(
        build_request(body=body, headers=signed_headers(body), state=state)
    )

    assert response == {"ok": True}
    assert state.task_runner.scheduled == []


@pytest.mark.asyncio
async def test_other_envelope_types_are_acknowledged() -> None:
    state = build_state(_event_router())
    body = json.dumps({"type": "app_rate_limited"}).encode()

    response = await events.receive_events(
        build_request(body=body, headers=signed_headers(body), state=state)
    )

    assert response == {"ok": True}
    state.event_router.route_event.assert_not_called()
