"""API: camada de borda HTTP.

Responsabilidades:
- Receber submissões do formulário (gatilho ou reprocessamento)
- Validar payloads
- Delegar ao use case de emissão

Subpastas:
- routes/: endpoints HTTP (forms, health)

NÃO PODE conter: FSM, regras de emissão, acesso direto a infra.
"""
