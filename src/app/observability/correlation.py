"""correlation_id por entrega de webhook.

Guardado em ContextVar. `asyncio.create_task` copia o contexto corrente,
então o fluxo destacado agendado pela rota herda o id da entrega que o
originou e os logs do processamento assíncrono ficam ligados ao request.

Uso:
    from app.observability import correlation_scope, get_correlation_id

    with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
        ...
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

CORRELATION_HEADER = "x-correlation-id"

_correlation_id: ContextVar[str] = ContextVar("slack_correlation_id", default="")


def new_correlation_id() -> str:
    return uuid.uuid4().hex


def get_correlation_id() -> str:
    """correlation_id corrente ou string vazia fora de um request."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o id (gera um novo quando ausente) e devolve o token de reset."""
    return _correlation_id.set(correlation_id or new_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Escopo de um request: define o id na entrada e restaura na saída."""
    token = set_correlation_id(correlation_id)
    try:
        yield get_correlation_id()
    finally:
        reset_correlation_id(token)
