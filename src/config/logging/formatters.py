"""Formatters: JSON (python-json-logger) e texto para dev local.

Todo record sai com timestamp, level, logger, message, service e
correlation_id; campos de `extra` vão como chaves de primeiro nível.
"""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "service",
    "correlation_id",
)

FIELD_RENAME_MAP = {
    "asctime": "timestamp",
    "levelname": "level",
    "name": "logger",
}

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(service)s %(correlation_id)s %(name)s | %(message)s"


def create_json_formatter() -> JsonFormatter:
    """Uma linha JSON por record, sem escapar acentos e emojis das prioridades."""
    return JsonFormatter(
        " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
        json_ensure_ascii=False,
    )


def create_text_formatter() -> logging.Formatter:
    return logging.Formatter(TEXT_FORMAT)
