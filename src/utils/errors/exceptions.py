"""Exceções compartilhadas entre camadas (transporte, Slack, pipeline)."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class TransportError(InfrastructureError):
    """Chamada HTTP falhou após esgotar as tentativas.

    Cobre timeout, erro de conexão e status retentável (429/5xx) esgotado.
    """

    def __init__(
        self,
        message: str,
        *,
        cause: BaseException | None = None,
        status_code: int | None = None,
        attempts: int = 0,
    ) -> None:
        super().__init__(message)
        self.cause = cause
        self.status_code = status_code
        self.attempts = attempts


class TransportCancelledError(TransportError):
    """Chamada abortada pelo sinal de cancelamento do chamador."""


class UpstreamRejectionError(RuntimeError):
    """API externa rejeitou a requisição (4xx não retentável)."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class SlackApiError(RuntimeError):
    """Slack respondeu com ok=false."""

    def __init__(self, method: str, error: str) -> None:
        super().__init__(f"{method}: {error}")
        self.method = method
        self.error = error


class DownstreamTaskError(RuntimeError):
    """Falha ao criar o registro da tarefa no destino."""
