"""API: camada de borda do Slack.

Responsabilidades:
- Receber webhooks (Events API e slash commands)
- Validar assinatura v0 e janela anti-replay
- Normalizar mensagens da Web API para modelos internos
- Chamar a Web API e o response_url

Subpastas:
- connectors/: adapters HTTP do Slack
- normalizers/: payloads do Slack → modelos internos
- routes/: endpoints HTTP (eventos, comandos, health)

NÃO PODE conter: orquestração de use cases, regras de contexto.
"""
