"""Extrator de JSON de respostas de LLM.

Extrai o objeto JSON de respostas que podem vir em markdown ou com texto
ao redor.
"""

from __future__ import annotations

import json
from typing import Any


def _strip_code_fence(text: str) -> str:
    if text.startswith("```json"):
        text = text[7:]
    elif text.startswith("```"):
        text = text[3:]
    if text.endswith("```"):
        text = text[:-3]
    return text.strip()


def extract_json_from_response(response: str) -> dict[str, Any] | None:
    """Extrai um objeto JSON de resposta de LLM.

    Tenta o texto inteiro e, se falhar, o trecho entre a primeira `{` e a
    última `}` (aceita objetos aninhados).

    Args:
        response: Resposta bruta da LLM

    Returns:
        Dict extraído ou None se não encontrado
    """
    if not response or not isinstance(response, str):
        return None

    text = _strip_code_fence(response.strip())
    candidates = [text]
    start, end = text.find("{"), text.rfind("}")
    if 0 <= start < end:
        candidates.append(text[start : end + 1])

    for candidate in candidates:
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(data, dict):
            return data
    return None
