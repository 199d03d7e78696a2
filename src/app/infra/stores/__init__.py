"""Stores em memória do processo."""

from __future__ import annotations

from app.infra.stores.idempotency_guard import IdempotencyGuard

__all__ = ["IdempotencyGuard"]
