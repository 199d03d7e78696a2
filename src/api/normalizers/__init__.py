"""Normalizers: conversão de payloads externos para modelos internos.

Estrutura:
- slack/: mensagens e arquivos da Slack Web API
"""

from .slack import extract_message, extract_messages

__all__ = [
    "extract_message",
    "extract_messages",
]
