"""Testes do IdempotencyGuard em memória."""

from __future__ import annotations

import pytest

from app.infra.stores import IdempotencyGuard


class TestIdempotencyGuard:
    """Testes para TTL e capacidade."""

    def test_unknown_key(self) -> None:
        """Chave nunca vista não está presente."""
        guard = IdempotencyGuard()
        assert guard.has("Ev1", now=0.0) is False

    def test_added_key_is_present(self) -> None:
        """Chave adicionada fica presente até expirar."""
        guard = IdempotencyGuard(ttl_seconds=600)
        guard.add("Ev1", now=1000.0)
        assert guard.has("Ev1", now=1599.9) is True

    def test_key_expires_after_ttl(self) -> None:
        """No instante expires_at a chave já não conta."""
        guard = IdempotencyGuard(ttl_seconds=600)
        guard.add("Ev1", now=1000.0)
        assert guard.has("Ev1", now=1600.0) is False
        assert len(guard) == 0

    def test_capacity_evicts_oldest(self) -> None:
        """max_size+1 inserções despejam a primeira chave."""
        guard = IdempotencyGuard(ttl_seconds=600, max_size=3)
        for index, key in enumerate(["a", "b", "c", "d"]):
            guard.add(key, now=float(index))

        assert guard.has("a", now=10.0) is False
        assert all(guard.has(key, now=10.0) for key in ["b", "c", "d"])
        assert len(guard) == 3

    def test_re_adding_moves_key_to_newest(self) -> None:
        """Re-adicionar renova a chave e muda quem é o mais antigo."""
        guard = IdempotencyGuard(ttl_seconds=600, max_size=2)
        guard.add("a", now=0.0)
        guard.add("b", now=1.0)
        guard.add("a", now=2.0)
        guard.add("c", now=3.0)

        assert guard.has("a", now=4.0) is True
        assert guard.has("b", now=4.0) is False

    def test_expired_entries_free_capacity(self) -> None:
        """Entradas expiradas são removidas antes de despejar por capacidade."""
        guard = IdempotencyGuard(ttl_seconds=10, max_size=2)
        guard.add("old", now=0.0)
        guard.add("fresh", now=5.0)
        guard.add("new", now=10.0)

        assert guard.has("fresh", now=10.0) is True
        assert guard.has("new", now=10.0) is True

    @pytest.mark.parametrize(("ttl", "size"), [(0, 10), (-1, 10), (10, 0)])
    def test_invalid_arguments(self, ttl: float, size: int) -> None:
        with pytest.raises(ValueError):
            IdempotencyGuard(ttl_seconds=ttl, max_size=size)
