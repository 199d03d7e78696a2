"""Transporte HTTP com timeout por tentativa, retry limitado e backoff.

Usado por todo componente que fala com API externa (Slack, OpenAI, Notion).
Sem estado compartilhado entre chamadas além do httpx.AsyncClient.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from utils.errors import TransportCancelledError, TransportError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

RETRYABLE_STATUS = frozenset({429})


@dataclass(frozen=True)
class RetryPolicy:
    """Política de uma chamada lógica.

    Attributes:
        timeout_seconds: Timeout aplicado a cada tentativa isoladamente
        max_retries: Tentativas extras após a primeira
        base_delay_seconds: Atraso entre tentativa n e n+1 = base * 2**n
    """

    timeout_seconds: float = 10.0
    max_retries: int = 2
    base_delay_seconds: float = 0.25

    def delay_for(self, attempt: int) -> float:
        return self.base_delay_seconds * (2**attempt)

    def without_retries(self) -> RetryPolicy:
        return RetryPolicy(
            timeout_seconds=self.timeout_seconds,
            max_retries=0,
            base_delay_seconds=self.base_delay_seconds,
        )


@dataclass(frozen=True)
class RequestSpec:
    """Descrição de uma requisição (método, headers, query e corpo)."""

    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, Any] | None = None
    json: Any = None


def is_retryable_status(status_code: int) -> bool:
    """429 e 5xx são retentáveis; qualquer outro status volta ao chamador."""
    return status_code in RETRYABLE_STATUS or status_code >= 500


class RetryingTransport:
    """Executa requisições aplicando RetryPolicy.

    - Timeout por tentativa (não pela sequência toda); estourar conta como
      falha retentável.
    - Retry só em falha de transporte, 429 ou >=500. Demais status retornam
      na primeira tentativa.
    - `cancel_event` opcional compõe com o timeout: o que disparar primeiro
      aborta a tentativa em andamento. Cancelamento não é retentado.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._client = client or httpx.AsyncClient()
        self._owns_client = client is None
        self._sleep = sleep

    async def aclose(self) -> None:
        """Fecha o cliente HTTP se foi criado aqui."""
        if self._owns_client:
            await self._client.aclose()

    async def execute(
        self,
        target: str,
        request_spec: RequestSpec,
        policy: RetryPolicy,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> httpx.Response:
        """Executa a chamada lógica.

        Args:
            target: URL de destino
            request_spec: Método, headers, query e corpo JSON
            policy: Timeout, retries e backoff
            cancel_event: Sinal de cancelamento do chamador

        Returns:
            Response final (sucesso ou status não retentável)

        Raises:
            TransportError: Retries esgotados (causa e último status anexados)
            TransportCancelledError: cancel_event disparou
        """
        last_error: BaseException | None = None
        last_status: int | None = None
        attempts = policy.max_retries + 1

        for attempt in range(attempts):
            if cancel_event is not None and cancel_event.is_set():
                raise TransportCancelledError("http_request_cancelled", attempts=attempt)

            try:
                response = await self._attempt(target, request_spec, policy, cancel_event)
            except (httpx.TransportError, asyncio.TimeoutError) as exc:
                last_error, last_status = exc, None
                logger.warning(
                    "http_attempt_failed",
                    extra={
                        "method": request_spec.method,
                        "attempt": attempt + 1,
                        "error_type": type(exc).__name__,
                    },
                )
            else:
                if not is_retryable_status(response.status_code):
                    return response
                last_error, last_status = None, response.status_code
                await response.aclose()
                logger.warning(
                    "http_retryable_status",
                    extra={
                        "method": request_spec.method,
                        "attempt": attempt + 1,
                        "status_code": response.status_code,
                    },
                )

            if attempt < policy.max_retries:
                await self._backoff_sleep(policy.delay_for(attempt))

        raise TransportError(
            "http_retry_exhausted",
            cause=last_error,
            status_code=last_status,
            attempts=attempts,
        )

    async def _attempt(
        self,
        target: str,
        request_spec: RequestSpec,
        policy: RetryPolicy,
        cancel_event: asyncio.Event | None,
    ) -> httpx.Response:
        send = asyncio.wait_for(self._send(target, request_spec, policy), policy.timeout_seconds)
        if cancel_event is None:
            return await send

        request_task = asyncio.ensure_future(send)
        cancel_task = asyncio.ensure_future(cancel_event.wait())
        try:
            done, _ = await asyncio.wait(
                {request_task, cancel_task},
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            cancel_task.cancel()

        if request_task in done:
            return request_task.result()

        request_task.cancel()
        await asyncio.gather(request_task, return_exceptions=True)
        raise TransportCancelledError("http_request_cancelled")

    async def _send(
        self,
        target: str,
        request_spec: RequestSpec,
        policy: RetryPolicy,
    ) -> httpx.Response:
        return await self._client.request(
            request_spec.method,
            target,
            headers=request_spec.headers or None,
            params=request_spec.params,
            json=request_spec.json,
            timeout=policy.timeout_seconds,
        )

    async def _backoff_sleep(self, delay: float) -> None:
        logger.info("http_backoff", extra={"backoff_seconds": delay})
        await self._sleep(delay)
