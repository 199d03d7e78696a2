"""Use cases dos fluxos Slack (menção, DM, slash command)."""

from .process_app_mention import AppMentionInput, ProcessAppMentionUseCase
from .process_direct_message import DirectMessageInput, ProcessDirectMessageUseCase
from .process_slash_command import ProcessSlashCommandUseCase, SlashCommandInput

__all__ = [
    "AppMentionInput",
    "DirectMessageInput",
    "ProcessAppMentionUseCase",
    "ProcessDirectMessageUseCase",
    "ProcessSlashCommandUseCase",
    "SlashCommandInput",
]
