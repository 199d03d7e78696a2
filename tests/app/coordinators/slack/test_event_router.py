"""Testes do EventRouter (escolha de fluxo, sem IO)."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from app.coordinators.slack import EventRouter
from app.use_cases.slack import AppMentionInput, DirectMessageInput, SlashCommandInput
from app.use_cases.slack.notifications import PROCESSING_ACK_TEXT, UNKNOWN_COMMAND_TEXT


async def _noop(*_: object) -> None:
    return None


def _router() -> tuple[EventRouter, MagicMock, MagicMock, MagicMock]:
    mention = MagicMock()
    direct = MagicMock()
    command = MagicMock()
    for use_case in (mention, direct, command):
        use_case.execute.side_effect = _noop
    return EventRouter(mention, direct, command), mention, direct, command


def _envelope(event: dict[str, object]) -> dict[str, object]:
    return {"type": "event_callback", "event_id": "Ev1", "event": event}


class TestRouteEvent:
    """Roteamento de event_callback."""

    @pytest.mark.asyncio
    async def test_app_mention_in_channel_uses_ts_as_thread(self) -> None:
        router, mention, _, _ = _router()
        work = router.route_event(
            _envelope(
                {
                    "type": "app_mention",
                    "text": "<@UBOT> track",
                    "user": "U1",
                    "channel": "C1",
                    "ts": "10.0",
                    "files": [{"id": "F1", "name": "a.txt", "mimetype": "text/plain"}],
                }
            )
        )

        assert work is not None
        assert work.flow == "app_mention"
        await work.coroutine
        mention_input: AppMentionInput = mention.execute.call_args[0][0]
        assert mention_input.thread_ts == "10.0"
        assert mention_input.files[0].id == "F1"

    @pytest.mark.asyncio
    async def test_app_mention_in_thread(self) -> None:
        router, mention, _, _ = _router()
        work = router.route_event(
            _envelope({"type": "app_mention", "channel": "C1", "ts": "10.0", "thread_ts": "5.0"})
        )
        assert work is not None
        await work.coroutine
        assert mention.execute.call_args[0][0].thread_ts == "5.0"

    @pytest.mark.asyncio
    async def test_direct_message(self) -> None:
        router, _, direct, _ = _router()
        work = router.route_event(
            _envelope({"type": "message", "channel_type": "im", "text": "todo", "channel": "D1", "ts": "1.0"})
        )
        assert work is not None
        assert work.flow == "direct_message"
        await work.coroutine
        message: DirectMessageInput = direct.execute.call_args[0][0]
        assert message.channel == "D1"

    @pytest.mark.parametrize(
        "event",
        [
            {"type": "message", "channel_type": "im", "text": "hi", "bot_id": "B1"},
            {"type": "message", "channel_type": "im", "text": "hi", "subtype": "message_changed"},
            {"type": "message", "channel_type": "im", "text": ""},
            {"type": "message", "channel_type": "channel", "text": "hi"},
            {"type": "reaction_added"},
        ],
    )
    def test_ignored_events(self, event: dict[str, object]) -> None:
        router, mention, direct, _ = _router()
        assert router.route_event(_envelope(event)) is None
        mention.execute.assert_not_called()
        direct.execute.assert_not_called()

    def test_missing_event(self) -> None:
        router, _, _, _ = _router()
        assert router.route_event({"type": "event_callback"}) is None


class TestRouteCommand:
    """Roteamento de slash commands."""

    @pytest.mark.asyncio
    async def test_task_command(self) -> None:
        router, _, _, command = _router()
        route = router.route_command(
            {
                "command": "/task",
                "text": "Fix login",
                "user_id": "U1",
                "channel_id": "C1",
                "response_url": "https://hooks.slack.com/x",
            }
        )

        assert route.body == {"response_type": "ephemeral", "text": PROCESSING_ACK_TEXT}
        assert route.work is not None
        await route.work.coroutine
        command_input: SlashCommandInput = command.execute.call_args[0][0]
        assert command_input.text == "Fix login"

    def test_unknown_command(self) -> None:
        router, _, _, command = _router()
        route = router.route_command({"command": "/other"})
        assert route.body == {"response_type": "ephemeral", "text": UNKNOWN_COMMAND_TEXT}
        assert route.work is None
        command.execute.assert_not_called()

    def test_command_ack_is_stable(self) -> None:
        assert EventRouter.command_ack({"command": "/task"})["text"] == PROCESSING_ACK_TEXT
