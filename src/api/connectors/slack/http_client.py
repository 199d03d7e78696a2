"""Cliente da Slack Web API sobre o RetryingTransport.

- GET (histórico): retry conforme settings (padrão 2 tentativas extras)
- POST de mutação (chat.postMessage, response_url): sem retry
- Reações: idempotentes, com retry; "já aplicado"/"não encontrado" são sucesso
- Sem token: nenhuma chamada sai (fail closed)

Logs sem token, texto de mensagem ou URL de callback.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.slack.response_url import is_allowed_response_url
from api.normalizers.slack import extract_messages
from app.infra.http import RequestSpec, RetryPolicy
from app.protocols.history_source import HistorySourceProtocol
from app.protocols.messaging import MessagingClientProtocol
from utils.errors import SlackApiError, TransportError, UpstreamRejectionError

if TYPE_CHECKING:
    import httpx

    from app.domain.conversation import Message
    from app.infra.http import RetryingTransport
    from config.settings import SlackSettings

logger = logging.getLogger(__name__)

MISSING_TOKEN_ERROR = "missing_slack_token"
BENIGN_REACTION_ERRORS: dict[str, frozenset[str]] = {
    "reactions.add": frozenset({"already_reacted"}),
    "reactions.remove": frozenset({"no_reaction", "message_not_found"}),
}


class SlackHttpClient(HistorySourceProtocol, MessagingClientProtocol):
    """Adapter de borda para a Slack Web API."""

    def __init__(self, transport: RetryingTransport, settings: SlackSettings) -> None:
        self._transport = transport
        self._settings = settings
        self._read_policy = RetryPolicy(
            timeout_seconds=settings.request_timeout_seconds,
            max_retries=settings.read_max_retries,
            base_delay_seconds=settings.retry_base_delay_seconds,
        )
        self._write_policy = self._read_policy.without_retries()

    # ==========================================================
    # Chamadas base
    # ==========================================================

    def _auth_headers(self, method: str) -> dict[str, str]:
        token = self._settings.bot_token.strip()
        if not token:
            logger.warning("slack_token_missing", extra={"slack_method": method})
            raise SlackApiError(method, MISSING_TOKEN_ERROR)
        return {"Authorization": f"Bearer {token}"}

    async def call(
        self,
        method: str,
        *,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
        policy: RetryPolicy | None = None,
    ) -> dict[str, Any]:
        """Chama um método da Web API e retorna o JSON com ok=true.

        GET quando `body` é None; POST JSON caso contrário.

        Raises:
            SlackApiError: ok=false, resposta inválida ou token ausente
            UpstreamRejectionError: status HTTP não retentável fora de 2xx
            TransportError: retries esgotados
        """
        headers = self._auth_headers(method)
        if body is None:
            spec = RequestSpec(method="GET", headers=headers, params=params)
            effective_policy = policy or self._read_policy
        else:
            headers["Content-Type"] = "application/json; charset=utf-8"
            spec = RequestSpec(method="POST", headers=headers, json=body)
            effective_policy = policy or self._write_policy

        response = await self._transport.execute(
            self._settings.method_url(method), spec, effective_policy
        )
        return self._process_response(method, response)

    def _process_response(self, method: str, response: httpx.Response) -> dict[str, Any]:
        if response.status_code >= 400:
            logger.warning(
                "slack_http_rejected",
                extra={"slack_method": method, "status_code": response.status_code},
            )
            raise UpstreamRejectionError(f"{method}: http {response.status_code}", response.status_code)

        try:
            data = response.json()
        except ValueError as exc:
            raise SlackApiError(method, "invalid_response") from exc

        if not isinstance(data, dict):
            raise SlackApiError(method, "invalid_response")
        if not data.get("ok"):
            raise SlackApiError(method, str(data.get("error") or "unknown_error"))
        return data

    # ==========================================================
    # Histórico (HistorySourceProtocol)
    # ==========================================================

    async def fetch_thread(self, scope_id: str, thread_key: str, limit: int) -> list[Message]:
        data = await self.call(
            "conversations.replies",
            params={"channel": scope_id, "ts": thread_key, "limit": limit},
        )
        return extract_messages(data)

    async def fetch_channel(self, scope_id: str, limit: int) -> list[Message]:
        data = await self.call(
            "conversations.history",
            params={"channel": scope_id, "limit": limit},
        )
        return extract_messages(data)

    # ==========================================================
    # Mutações (MessagingClientProtocol)
    # ==========================================================

    async def _mutate(
        self,
        method: str,
        body: dict[str, Any],
        policy: RetryPolicy,
    ) -> bool:
        benign = BENIGN_REACTION_ERRORS.get(method, frozenset())
        try:
            await self.call(method, body=body, policy=policy)
        except SlackApiError as exc:
            if exc.error in benign:
                logger.debug("slack_benign_error", extra={"slack_method": method, "error": exc.error})
                return True
            logger.warning("slack_call_failed", extra={"slack_method": method, "error": exc.error})
            return False
        except (TransportError, UpstreamRejectionError) as exc:
            logger.warning(
                "slack_call_failed",
                extra={
                    "slack_method": method,
                    "error_type": type(exc).__name__,
                    "status_code": getattr(exc, "status_code", None),
                },
            )
            return False
        return True

    async def add_reaction(self, channel: str, timestamp: str, name: str) -> bool:
        return await self._mutate(
            "reactions.add",
            {"channel": channel, "timestamp": timestamp, "name": name},
            self._read_policy,
        )

    async def remove_reaction(self, channel: str, timestamp: str, name: str) -> bool:
        return await self._mutate(
            "reactions.remove",
            {"channel": channel, "timestamp": timestamp, "name": name},
            self._read_policy,
        )

    async def post_message(self, channel: str, text: str, thread_ts: str | None = None) -> bool:
        body: dict[str, Any] = {"channel": channel, "text": text}
        if thread_ts:
            body["thread_ts"] = thread_ts
        return await self._mutate("chat.postMessage", body, self._write_policy)

    async def post_response_url(self, response_url: str, text: str) -> bool:
        """POST efêmero para response_url, revalidando o host antes de enviar."""
        if not is_allowed_response_url(response_url, self._settings.response_url_hosts):
            logger.warning("slack_response_url_rejected")
            return False

        spec = RequestSpec(
            method="POST",
            headers={"Content-Type": "application/json; charset=utf-8"},
            json={"response_type": "ephemeral", "text": text},
        )
        try:
            response = await self._transport.execute(response_url, spec, self._write_policy)
        except TransportError as exc:
            logger.warning(
                "slack_response_url_failed",
                extra={"error_type": type(exc).__name__, "status_code": exc.status_code},
            )
            return False

        if response.status_code >= 400:
            logger.warning("slack_response_url_failed", extra={"status_code": response.status_code})
            return False
        return True
