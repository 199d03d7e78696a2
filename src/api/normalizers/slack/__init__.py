"""Normalizer Slack: payloads da Web API -> modelos de domínio."""

from .extractor import extract_file, extract_files, extract_message, extract_messages

__all__ = ["extract_file", "extract_files", "extract_message", "extract_messages"]
