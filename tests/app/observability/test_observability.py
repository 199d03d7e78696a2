"""Testes de correlation_id e métricas via log."""

from __future__ import annotations

import asyncio
import logging

import pytest

from app.observability import (
    correlation_scope,
    get_correlation_id,
    record_latency,
    record_task_outcome,
    track_latency,
)


class TestCorrelationScope:
    """Escopo do correlation_id por request."""

    def test_uses_given_id_and_restores(self) -> None:
        assert get_correlation_id() == ""
        with correlation_scope("abc-123") as correlation_id:
            assert correlation_id == "abc-123"
            assert get_correlation_id() == "abc-123"
        assert get_correlation_id() == ""

    def test_generates_id_when_missing(self) -> None:
        with correlation_scope(None) as correlation_id:
            assert len(correlation_id) == 32
        with correlation_scope("") as other:
            assert other and other != correlation_id

    def test_nested_scopes_restore_outer(self) -> None:
        with correlation_scope("outer"):
            with correlation_scope("inner"):
                assert get_correlation_id() == "inner"
            assert get_correlation_id() == "outer"

    @pytest.mark.asyncio
    async def test_scheduled_task_inherits_id(self) -> None:
        async def read_id() -> str:
            await asyncio.sleep(0)
            return get_correlation_id()

        with correlation_scope("req-1"):
            task = asyncio.create_task(read_id())
        assert await task == "req-1"


class TestMetrics:
    """Métricas emitidas como logs estruturados."""

    def test_task_outcome_log(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="app.observability.metrics"):
            record_task_outcome("app_mention", success=True, escalated=True, correlation_id="c1")

        record = next(r for r in caplog.records if r.getMessage() == "metric_task_outcome")
        assert record.flow == "app_mention"
        assert record.success is True
        assert record.escalated is True
        assert record.correlation_id == "c1"

    def test_latency_is_rounded(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="app.observability.metrics"):
            record_latency("task_pipeline", "extract", 12.3456)

        record = next(r for r in caplog.records if r.getMessage() == "metric_latency")
        assert record.component == "task_pipeline"
        assert record.latency_ms == 12.35

    def test_track_latency_logs_even_on_error(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="app.observability.metrics"):
            with correlation_scope("c2"), pytest.raises(RuntimeError):
                with track_latency("task_pipeline", "submit"):
                    raise RuntimeError("boom")

        record = next(r for r in caplog.records if r.getMessage() == "metric_latency")
        assert record.operation == "submit"
        assert record.correlation_id == "c2"
        assert record.latency_ms >= 0
