"""Configuração do pytest para o slack_task_bridge."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from config.settings import (
    get_base_settings,
    get_context_settings,
    get_idempotency_settings,
    get_notion_settings,
    get_openai_settings,
    get_slack_settings,
)

_CACHED_SETTINGS = (
    get_base_settings,
    get_context_settings,
    get_idempotency_settings,
    get_notion_settings,
    get_openai_settings,
    get_slack_settings,
)


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Settings são cacheadas por processo; cada teste lê o próprio ambiente."""
    for cached in _CACHED_SETTINGS:
        cached.cache_clear()
    yield
    for cached in _CACHED_SETTINGS:
        cached.cache_clear()
