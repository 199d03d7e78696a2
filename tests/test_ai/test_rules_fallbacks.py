"""Testes para ai/rules/fallbacks.py.

Valida o fallback determinístico do extrator de tarefas.
"""

from __future__ import annotations

from ai.rules.fallbacks import DEFAULT_TASK_TITLE, fallback_task_fields


class TestFallbackTaskFields:
    """Testes para fallback_task_fields."""

    def test_first_line_becomes_title(self) -> None:
        fields = fallback_task_fields("Fix login\nUsers see 500\nsince Monday", "U1")
        assert fields.title == "Fix login"
        assert fields.description == "Users see 500\nsince Monday"

    def test_author_is_assignee(self) -> None:
        assert fallback_task_fields("x", "U42").assignee == "U42"

    def test_defaults(self) -> None:
        fields = fallback_task_fields("x", "U1")
        assert fields.priority == "3rd Prio"
        assert fields.due_date is None
        assert fields.files == []
        assert fields.fallback_used is True

    def test_empty_text_uses_default_title(self) -> None:
        assert fallback_task_fields("", "U1").title == DEFAULT_TASK_TITLE
        assert fallback_task_fields("   \nbody", "U1").title == DEFAULT_TASK_TITLE

    def test_default_project(self) -> None:
        assert fallback_task_fields("x", "U1", "Ops").project == "Ops"
        assert fallback_task_fields("x", "U1").project is None

    def test_long_title_is_truncated(self) -> None:
        assert len(fallback_task_fields("a" * 500, "U1").title) == 200
