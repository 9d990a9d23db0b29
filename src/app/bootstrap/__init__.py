"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_issue_token_use_case

    # Na inicialização do serviço
    initialize_app()

    use_case = get_issue_token_use_case()
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import DEFAULT_SERVICE_NAME, configure_logging
from config.settings import (
    get_base_settings,
    get_email_settings,
    get_issuer_settings,
    get_sheets_settings,
)

if TYPE_CHECKING:
    from app.use_cases import IssueTokenUseCase

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação.

    Deve ser chamada uma vez no início do serviço (ou do script).
    Configura logging estruturado JSON com correlation_id.
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=DEFAULT_SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def collect_settings_errors() -> list[str]:
    """Agrega erros de validação de todas as settings."""
    base = get_base_settings()
    issuer = get_issuer_settings()
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"issuer: {error}" for error in issuer.validate())
    errors.extend(f"sheets: {error}" for error in get_sheets_settings().validate(base))
    errors.extend(f"email: {error}" for error in get_email_settings().validate())

    if issuer.config_backend == "gcp" and not base.gcp_project:
        errors.append("issuer: ISSUER_CONFIG_BACKEND=gcp requer GCP_PROJECT")

    return errors


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Settings inválidas em ambiente estrito.
    """
    environment = get_base_settings().environment
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors = collect_settings_errors()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


@lru_cache(maxsize=1)
def get_issue_token_use_case() -> IssueTokenUseCase:
    """Obtém o use case de emissão (singleton).

    Sem estado mutável entre invocações: a Configuration é relida do
    config store a cada execute().
    """
    from app.bootstrap.dependencies import create_issue_token_use_case
    return create_issue_token_use_case()
