"""Observabilidade: correlation_id por entrega e métricas via logs.

Uso:
    from app.observability import correlation_scope, get_correlation_id
    from app.observability import record_task_outcome, track_latency
"""

from app.observability.correlation import (
    CORRELATION_HEADER,
    correlation_scope,
    get_correlation_id,
    new_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import record_latency, record_task_outcome, track_latency

__all__ = [
    "CORRELATION_HEADER",
    "correlation_scope",
    "get_correlation_id",
    "new_correlation_id",
    "record_latency",
    "record_task_outcome",
    "reset_correlation_id",
    "set_correlation_id",
    "track_latency",
]
