"""Protocolos e contratos do core da aplicação."""

from .history_source import HistorySourceProtocol
from .idempotency import IdempotencyGuardProtocol
from .messaging import MessagingClientProtocol
from .task_pipeline import RecordCreatorProtocol, TaskParserProtocol

__all__ = [
    "HistorySourceProtocol",
    "IdempotencyGuardProtocol",
    "MessagingClientProtocol",
    "RecordCreatorProtocol",
    "TaskParserProtocol",
]
