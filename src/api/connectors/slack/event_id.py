"""Chaves de idempotência para eventos e comandos Slack."""

from __future__ import annotations

from typing import Any


def compute_request_key(timestamp: str, signature: str) -> str:
    """Chave composta para entregas sem identificador nativo."""
    return f"{timestamp}:{signature}"


def compute_event_key(payload: dict[str, Any], timestamp: str, signature: str) -> str:
    """Usa `event_id` do envelope; sem ele, cai para (timestamp, assinatura).

    Args:
        payload: Envelope `event_callback` já parseado
        timestamp: Header de timestamp da entrega
        signature: Header de assinatura da entrega

    Returns:
        Chave estável do evento
    """
    event_id = payload.get("event_id")
    if isinstance(event_id, str) and event_id:
        return event_id
    return compute_request_key(timestamp, signature)
