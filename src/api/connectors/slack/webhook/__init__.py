"""Webhook Slack: assinatura, parsing seguro e handshake."""

from ..signature import SignatureResult, SignedRequest, verify_slack_request
from .receive import (
    InvalidFormError,
    InvalidJsonError,
    InvalidSignatureError,
    WebhookRequestError,
    authenticate_request,
    parse_command_request,
    parse_event_request,
)
from .verify import build_challenge_response, is_url_verification

__all__ = [
    "InvalidFormError",
    "InvalidJsonError",
    "InvalidSignatureError",
    "SignatureResult",
    "SignedRequest",
    "WebhookRequestError",
    "authenticate_request",
    "build_challenge_response",
    "is_url_verification",
    "parse_command_request",
    "parse_event_request",
    "verify_slack_request",
]
