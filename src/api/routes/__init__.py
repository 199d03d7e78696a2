"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (webhooks Slack, health)
- Validação inicial de request (assinatura, corpo)
- Delegação para connectors/coordinators
- Respostas HTTP apropriadas

Estrutura:
- routes/slack/: eventos, slash commands e runner de tasks destacadas
- routes/health/: liveness, readiness e banner

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
