"""Testes dos endpoints de banner, health e readiness."""

from __future__ import annotations

import json

import pytest

from api.routes.health import router as health
from config.settings import NotionSettings, OpenAISettings, SlackSettings


def _configure(
    monkeypatch: pytest.MonkeyPatch,
    *,
    slack: SlackSettings,
    notion: NotionSettings,
    openai: OpenAISettings,
) -> None:
    monkeypatch.setattr(health, "get_slack_settings", lambda: slack)
    monkeypatch.setattr(health, "get_notion_settings", lambda: notion)
    monkeypatch.setattr(health, "get_openai_settings", lambda: openai)


@pytest.mark.asyncio
async def test_root_banner() -> None:
    assert await health.root() == {"message": "Slack to Notion Task Bot API"}


@pytest.mark.asyncio
async def test_health_check() -> None:
    response = await health.health_check()
    assert response.status == "healthy"
    assert response.service == "slack-task-bridge"


@pytest.mark.asyncio
async def test_readiness_not_ready_without_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    _configure(monkeypatch, slack=SlackSettings(), notion=NotionSettings(), openai=OpenAISettings())

    response = await health.readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["slack"] == {"status": "failed", "error": "missing_signing_secret"}
    assert payload["checks"]["notion"]["status"] == "failed"
    assert payload["checks"]["openai"]["status"] == "degraded"


@pytest.mark.asyncio
async def test_readiness_ready_with_degraded_openai(monkeypatch: pytest.MonkeyPatch) -> None:
    _configure(
        monkeypatch,
        slack=SlackSettings(signing_secret="s", bot_token="xoxb"),
        notion=NotionSettings(api_key="k", database_id="db"),
        openai=OpenAISettings(enabled=False),
    )

    response = await health.readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["openai"] == {"status": "degraded", "error": "disabled"}
