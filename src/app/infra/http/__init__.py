"""Infra HTTP: transporte com retry/backoff para APIs externas."""

from app.infra.http.transport import (
    RequestSpec,
    RetryingTransport,
    RetryPolicy,
    is_retryable_status,
)

__all__ = [
    "RequestSpec",
    "RetryPolicy",
    "RetryingTransport",
    "is_retryable_status",
]
