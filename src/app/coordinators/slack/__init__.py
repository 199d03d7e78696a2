"""Coordinator Slack: roteamento de entregas para os fluxos destacados."""

from .event_router import CommandRoute, EventRouter, RoutedWork

__all__ = ["CommandRoute", "EventRouter", "RoutedWork"]
