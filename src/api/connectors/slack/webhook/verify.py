"""Handshake `url_verification` da Events API."""

from __future__ import annotations

from typing import Any

URL_VERIFICATION_TYPE = "url_verification"


def is_url_verification(payload: dict[str, Any]) -> bool:
    return payload.get("type") == URL_VERIFICATION_TYPE


def build_challenge_response(payload: dict[str, Any]) -> dict[str, str]:
    """Ecoa o challenge recebido (string vazia se ausente)."""
    challenge = payload.get("challenge")
    return {"challenge": challenge if isinstance(challenge, str) else ""}
