"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    DownstreamTaskError,
    InfrastructureError,
    SlackApiError,
    TransportCancelledError,
    TransportError,
    UpstreamRejectionError,
)

__all__ = [
    "DownstreamTaskError",
    "InfrastructureError",
    "SlackApiError",
    "TransportCancelledError",
    "TransportError",
    "UpstreamRejectionError",
]
