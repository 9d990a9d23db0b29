"""Settings específicas de Email.

Transporte SMTP usado para o e-mail de sucesso ao solicitante e o alerta
de falha ao administrador. Remetente e nome de exibição do e-mail de
sucesso vêm do config store (SUCCESS_EMAIL_FROM / SUCCESS_EMAIL_NAME).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class EmailSettings:
    """Configurações do transporte de e-mail.

    Attributes:
        smtp_host: Host do servidor SMTP
        smtp_port: Porta do servidor SMTP
        smtp_username: Usuário SMTP
        smtp_password: Senha SMTP
        smtp_use_tls: Usar STARTTLS
        default_from: Remetente padrão quando SUCCESS_EMAIL_FROM não existe
        request_timeout_seconds: Timeout de conexão SMTP
    """

    smtp_host: str = ""
    smtp_port: int = 587
    smtp_username: str = ""
    smtp_password: str = ""
    smtp_use_tls: bool = True
    default_from: str = ""
    request_timeout_seconds: float = 30.0

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Email."""
        errors: list[str] = []
        if not self.smtp_host:
            errors.append("EMAIL_SMTP_HOST não configurado")
        if not self.default_from:
            errors.append("EMAIL_DEFAULT_FROM não configurado")
        if self.request_timeout_seconds <= 0:
            errors.append("EMAIL_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _load_from_env() -> EmailSettings:
    """Carrega EmailSettings de variáveis de ambiente."""
    return EmailSettings(
        smtp_host=os.getenv("EMAIL_SMTP_HOST", ""),
        smtp_port=int(os.getenv("EMAIL_SMTP_PORT", "587")),
        smtp_username=os.getenv("EMAIL_SMTP_USERNAME", ""),
        smtp_password=os.getenv("EMAIL_SMTP_PASSWORD", ""),
        smtp_use_tls=os.getenv("EMAIL_SMTP_USE_TLS", "true").lower() in ("true", "1"),
        default_from=os.getenv("EMAIL_DEFAULT_FROM", ""),
        request_timeout_seconds=float(os.getenv("EMAIL_REQUEST_TIMEOUT_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_email_settings() -> EmailSettings:
    """Retorna instância cacheada de EmailSettings."""
    return _load_from_env()
