"""Parse e validação inicial dos webhooks Slack (sem PII)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING
from urllib.parse import parse_qs

from ..signature import SignatureResult, SignedRequest, verify_slack_request

if TYPE_CHECKING:
    from collections.abc import Mapping


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidSignatureError(WebhookRequestError):
    """Assinatura inválida, ausente ou fora da janela anti-replay."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no payload de eventos."""


class InvalidFormError(WebhookRequestError):
    """Corpo de comando não é form-urlencoded utilizável."""


def authenticate_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
    *,
    tolerance_seconds: int,
    now: float | None = None,
) -> SignedRequest:
    """Valida a assinatura sobre o corpo bruto.

    Raises:
        InvalidSignatureError: Com o motivo curto da rejeição
    """
    signed_request = SignedRequest.from_headers(raw_body, headers)
    result: SignatureResult = verify_slack_request(
        signed_request,
        secret,
        now,
        tolerance_seconds=tolerance_seconds,
    )
    if not result.valid:
        raise InvalidSignatureError(result.error or "invalid signature")
    return signed_request


def parse_event_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
    *,
    tolerance_seconds: int,
    now: float | None = None,
) -> tuple[dict[str, object], SignedRequest]:
    """Valida assinatura e parseia o envelope JSON da Events API.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos
        secret: Signing secret
        tolerance_seconds: Janela anti-replay
        now: Epoch atual (testes)

    Raises:
        InvalidSignatureError: Se assinatura for inválida
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto

    Returns:
        (payload dict, SignedRequest)
    """
    signed_request = authenticate_request(
        raw_body, headers, secret, tolerance_seconds=tolerance_seconds, now=now
    )

    try:
        payload = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("invalid_json")

    return payload, signed_request


def parse_command_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
    *,
    tolerance_seconds: int,
    now: float | None = None,
) -> tuple[dict[str, str], SignedRequest]:
    """Valida assinatura e parseia o corpo form-urlencoded de slash command.

    Campos repetidos mantêm o primeiro valor.

    Raises:
        InvalidSignatureError: Se assinatura for inválida
        InvalidFormError: Se o corpo não puder ser decodificado
    """
    signed_request = authenticate_request(
        raw_body, headers, secret, tolerance_seconds=tolerance_seconds, now=now
    )

    try:
        decoded = raw_body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidFormError("invalid_form") from exc

    form = {key: values[0] for key, values in parse_qs(decoded, keep_blank_values=True).items()}
    return form, signed_request
