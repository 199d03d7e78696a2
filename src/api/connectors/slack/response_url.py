"""Validação de response_url antes de qualquer POST (proteção SSRF)."""

from __future__ import annotations

from fnmatch import fnmatchcase
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

if TYPE_CHECKING:
    from collections.abc import Iterable


def is_allowed_response_url(url: str | None, allowed_hosts: Iterable[str]) -> bool:
    """True se a URL for https e o host casar com algum padrão permitido.

    Padrões aceitam curingas estilo fnmatch (ex.: "*.slack.com").
    Credenciais embutidas e portas diferentes de 443 são rejeitadas.
    """
    if not url:
        return False
    try:
        parts = urlsplit(url.strip())
        port = parts.port
    except ValueError:
        return False

    if parts.scheme.lower() != "https":
        return False
    if parts.username or parts.password:
        return False
    if port not in (None, 443):
        return False

    host = (parts.hostname or "").lower()
    if not host:
        return False
    return any(fnmatchcase(host, pattern.lower()) for pattern in allowed_hosts)
