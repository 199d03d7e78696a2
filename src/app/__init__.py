"""App: orquestração, casos de uso e infraestrutura da ponte Slack → tarefas.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: roteamento de eventos e comandos para os fluxos
- use_cases/: fluxos de menção, DM e slash command
- services/: agregação de contexto e pipeline de tarefas
- infra/: transporte HTTP, guard de idempotência, OpenAI e Notion
- protocols/: contratos/interfaces
- domain/: modelos de conversa e de tarefa
- observability/: correlation_id e métricas via log

Padrão: app executa; api adapta; ai extrai; utils apoia.
"""
