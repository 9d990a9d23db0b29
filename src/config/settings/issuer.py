"""Settings do fluxo de emissão de tokens Grafana Cloud.

Parâmetros de deployment do pipeline (endpoint, prazos padrão, nomes de
campos do formulário). Credenciais da API NÃO ficam aqui: são lidas por
invocação a partir do config store (ver app.domain.configuration).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

GRAFANA_CLOUD_API_ENDPOINT: str = "https://www.grafana.com/api/v1/tokens"

ConfigBackend = Literal["env", "gcp"]


@dataclass(frozen=True)
class IssuerSettings:
    """Configurações do emissor.

    Attributes:
        api_endpoint: URL do endpoint de emissão (sem query string)
        request_timeout_seconds: Timeout da chamada HTTP de emissão
        default_expiration_days: Prazo usado quando o texto do formulário
            não é reconhecido
        identity_field_name: Pergunta do formulário com o e-mail do solicitante
        expiration_field_name: Pergunta do formulário com o prazo desejado
        config_backend: Origem das chaves API_KEY etc. (env|gcp)
        config_prefix: Prefixo das chaves no config store
        name_timezone: Timezone do timestamp embutido no nome do token
    """

    api_endpoint: str = GRAFANA_CLOUD_API_ENDPOINT
    request_timeout_seconds: float = 30.0
    default_expiration_days: int = 30
    identity_field_name: str = "メールアドレス"
    expiration_field_name: str = "有効期限"
    config_backend: ConfigBackend = "env"
    config_prefix: str = "GRAFANA_CLOUD"
    name_timezone: str = "UTC"

    @property
    def zone(self) -> ZoneInfo:
        """ZoneInfo do timestamp de nomes de token."""
        return ZoneInfo(self.name_timezone)

    def validate(self) -> list[str]:
        """Valida configurações do emissor.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_endpoint.startswith(("https://", "http://")):
            errors.append(f"ISSUER_API_ENDPOINT inválido: {self.api_endpoint}")

        if self.request_timeout_seconds <= 0:
            errors.append("ISSUER_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.default_expiration_days <= 0:
            errors.append("ISSUER_DEFAULT_EXPIRATION_DAYS deve ser > 0")

        if self.config_backend not in ("env", "gcp"):
            errors.append(f"ISSUER_CONFIG_BACKEND inválido: {self.config_backend}")

        try:
            ZoneInfo(self.name_timezone)
        except (ZoneInfoNotFoundError, ValueError):
            errors.append(f"ISSUER_NAME_TIMEZONE inválido: {self.name_timezone}")

        return errors


def _load_from_env() -> IssuerSettings:
    """Carrega IssuerSettings de variáveis de ambiente."""
    backend = os.getenv("ISSUER_CONFIG_BACKEND", "env").lower()
    return IssuerSettings(
        api_endpoint=os.getenv("ISSUER_API_ENDPOINT", GRAFANA_CLOUD_API_ENDPOINT),
        request_timeout_seconds=float(os.getenv("ISSUER_REQUEST_TIMEOUT_SECONDS", "30")),
        default_expiration_days=int(os.getenv("ISSUER_DEFAULT_EXPIRATION_DAYS", "30")),
        identity_field_name=os.getenv("ISSUER_IDENTITY_FIELD", "メールアドレス"),
        expiration_field_name=os.getenv("ISSUER_EXPIRATION_FIELD", "有効期限"),
        config_backend="gcp" if backend == "gcp" else "env",
        config_prefix=os.getenv("ISSUER_CONFIG_PREFIX", "GRAFANA_CLOUD"),
        name_timezone=os.getenv("ISSUER_NAME_TIMEZONE", "UTC"),
    )


@lru_cache(maxsize=1)
def get_issuer_settings() -> IssuerSettings:
    """Retorna instância cacheada de IssuerSettings."""
    return _load_from_env()
