"""Prompts do módulo AI.

Arquivos:
- task_parser_prompt.py: prompt do extrator de campos de tarefa
"""

from ai.prompts.task_parser_prompt import TASK_PARSER_SYSTEM, format_task_parser_prompt

__all__ = ["TASK_PARSER_SYSTEM", "format_task_parser_prompt"]
