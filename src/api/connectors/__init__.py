"""Connectors: adapters de borda para APIs externas.

Estrutura:
- slack/: assinatura, parsing de webhook, Web API e response_url
"""

__all__: list[str] = []
