"""Métricas emitidas como logs estruturados (`metric_type` no extra).

Agregação fica a cargo do coletor de logs; nenhum texto de mensagem do
Slack entra nos campos.
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

from app.observability.correlation import get_correlation_id

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


@contextmanager
def track_latency(component: str, operation: str) -> Iterator[None]:
    """Registra a latência do bloco, inclusive quando ele levanta."""
    start = time.perf_counter()
    try:
        yield
    finally:
        record_latency(
            component,
            operation,
            (time.perf_counter() - start) * 1000,
            get_correlation_id() or None,
        )


def record_task_outcome(
    flow: str,
    *,
    success: bool,
    escalated: bool = False,
    correlation_id: str | None = None,
) -> None:
    """Desfecho de um fluxo (app_mention, direct_message, slash_command).

    `escalated` indica que a extração foi refeita com a janela estendida.
    """
    logger.info(
        "metric_task_outcome",
        extra={
            "metric_type": "task_outcome",
            "flow": flow,
            "success": success,
            "escalated": escalated,
            "correlation_id": correlation_id,
        },
    )
