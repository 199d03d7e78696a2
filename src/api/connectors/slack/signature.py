"""Validação de assinatura Slack (v0, HMAC-SHA256) com janela anti-replay."""

from __future__ import annotations

import hashlib
import hmac
import math
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from config.settings.slack import SLACK_SIGNATURE_VERSION

if TYPE_CHECKING:
    from collections.abc import Mapping

SIGNATURE_HEADER = "x-slack-signature"
TIMESTAMP_HEADER = "x-slack-request-timestamp"
DEFAULT_REPLAY_TOLERANCE_SECONDS = 300

REASON_UNAUTHORIZED = "unauthorized"
REASON_INVALID_TIMESTAMP = "invalid timestamp"
REASON_REQUEST_TIMEOUT = "request timeout"
REASON_INVALID_SIGNATURE = "invalid signature"


@dataclass(frozen=True)
class SignedRequest:
    """Corpo bruto (bytes exatos recebidos) + headers de assinatura."""

    raw_body: bytes
    signature_header: str
    timestamp_header: str

    @classmethod
    def from_headers(cls, raw_body: bytes, headers: Mapping[str, str]) -> SignedRequest:
        return cls(
            raw_body=raw_body,
            signature_header=headers.get(SIGNATURE_HEADER, "") or "",
            timestamp_header=headers.get(TIMESTAMP_HEADER, "") or "",
        )


@dataclass(frozen=True)
class SignatureResult:
    """Resultado da validação de assinatura."""

    valid: bool
    error: str | None = None


def build_slack_signature(
    secret: str,
    timestamp: str,
    raw_body: bytes,
    version: str = SLACK_SIGNATURE_VERSION,
) -> str:
    """Calcula `{version}=hex(HMAC-SHA256(secret, "{version}:{timestamp}:{body}"))`."""
    basestring = f"{version}:{timestamp}:".encode() + raw_body
    digest = hmac.new(secret.encode(), basestring, hashlib.sha256).hexdigest()
    return f"{version}={digest}"


def _parse_timestamp(value: str) -> float | None:
    try:
        parsed = float(value.strip())
    except ValueError:
        return None
    return parsed if math.isfinite(parsed) else None


def _signatures_match(expected: str, supplied: str) -> bool:
    expected_bytes = expected.encode()
    supplied_bytes = supplied.encode()
    if len(expected_bytes) != len(supplied_bytes):
        return False
    return hmac.compare_digest(expected_bytes, supplied_bytes)


def verify_slack_request(
    signed_request: SignedRequest,
    secret: str | None,
    now: float | None = None,
    *,
    tolerance_seconds: int = DEFAULT_REPLAY_TOLERANCE_SECONDS,
    version: str = SLACK_SIGNATURE_VERSION,
) -> SignatureResult:
    """Valida assinatura e frescor do request, em passagem única.

    Ordem das verificações (a primeira falha decide o motivo):
    1. assinatura, timestamp ou secret ausentes -> "unauthorized"
    2. timestamp não numérico -> "invalid timestamp"
    3. fora da janela |now - ts| > tolerância -> "request timeout"
    4. prefixo de versão ausente ou HMAC divergente -> "invalid signature"

    Args:
        signed_request: Corpo bruto e headers recebidos
        secret: Signing secret configurado
        now: Epoch atual em segundos (padrão: time.time())
        tolerance_seconds: Janela anti-replay
        version: Versão do esquema de assinatura

    Returns:
        SignatureResult(valid=True) ou com o motivo da rejeição
    """
    signature = signed_request.signature_header
    timestamp = signed_request.timestamp_header
    if not signature or not timestamp or not secret:
        return SignatureResult(valid=False, error=REASON_UNAUTHORIZED)

    request_time = _parse_timestamp(timestamp)
    if request_time is None:
        return SignatureResult(valid=False, error=REASON_INVALID_TIMESTAMP)

    current = time.time() if now is None else now
    if abs(current - request_time) > tolerance_seconds:
        return SignatureResult(valid=False, error=REASON_REQUEST_TIMEOUT)

    if not signature.startswith(f"{version}="):
        return SignatureResult(valid=False, error=REASON_INVALID_SIGNATURE)

    expected = build_slack_signature(secret, timestamp, signed_request.raw_body, version)
    if not _signatures_match(expected, signature):
        return SignatureResult(valid=False, error=REASON_INVALID_SIGNATURE)

    return SignatureResult(valid=True)
