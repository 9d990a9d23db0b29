"""App: coração do sistema: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (fluxo de emissão)
- services/: serviços de aplicação (identidade, expiração, nome, registro, notificação)
- domain/: modelos e erros de domínio
- infra/: implementações concretas de IO (Grafana API, planilha, SMTP, secrets)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs estruturados
- constants/: templates de e-mail

Padrão: app executa; api adapta; fsm governa.
"""
