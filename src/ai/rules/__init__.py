"""Regras determinísticas para IA."""

from ai.rules.fallbacks import DEFAULT_TASK_TITLE, fallback_task_fields

__all__ = ["DEFAULT_TASK_TITLE", "fallback_task_fields"]
