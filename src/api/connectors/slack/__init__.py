"""Conector Slack: adapter de borda para a Web API e webhooks.

Único ponto de IO com o Slack:
- Assinatura v0 e janela anti-replay
- Parsing de eventos e slash commands
- Cliente HTTP (histórico, reações, mensagens, response_url)
- Chaves de idempotência e validação de response_url
"""

from .event_id import compute_event_key, compute_request_key
from .http_client import SlackHttpClient
from .response_url import is_allowed_response_url
from .signature import (
    SignatureResult,
    SignedRequest,
    build_slack_signature,
    verify_slack_request,
)

__all__ = [
    "SignatureResult",
    "SignedRequest",
    "SlackHttpClient",
    "build_slack_signature",
    "compute_event_key",
    "compute_request_key",
    "is_allowed_response_url",
    "verify_slack_request",
]
