"""Infra AI: clientes concretos de LLM."""

from app.infra.ai.openai_task_parser import DeterministicTaskParser, OpenAITaskParser

__all__ = ["DeterministicTaskParser", "OpenAITaskParser"]
