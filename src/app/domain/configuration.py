"""Configuration: valores lidos do config store uma vez por invocação.

Substitui o acesso global a propriedades: o valor imutável é carregado
no início do fluxo e passado explicitamente a cada componente.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from app.domain.errors import ConfigurationError

if TYPE_CHECKING:
    from app.protocols.config_store import ConfigStoreProtocol

logger = logging.getLogger(__name__)

KEY_API_KEY = "API_KEY"
KEY_ACCESS_POLICY_ID = "ACCESS_POLICY_ID"
KEY_REGION = "REGION"
KEY_SUCCESS_EMAIL_FROM = "SUCCESS_EMAIL_FROM"
KEY_SUCCESS_EMAIL_NAME = "SUCCESS_EMAIL_NAME"
KEY_ADMIN_EMAIL = "ADMIN_EMAIL"

REQUIRED_KEYS: tuple[str, ...] = (KEY_API_KEY, KEY_ACCESS_POLICY_ID, KEY_REGION)


@dataclass(frozen=True, slots=True)
class Configuration:
    """Configuração imutável de uma invocação.

    Attributes:
        api_key: Bearer token da API Grafana Cloud (nunca logado)
        access_policy_id: Access policy sob a qual o token é emitido
        region: Região da access policy (query param `region`)
        email_from: Remetente do e-mail de sucesso (opcional)
        email_name: Nome de exibição do remetente (opcional)
        admin_email: Destinatário dos alertas de falha (opcional)
    """

    api_key: str = field(repr=False)
    access_policy_id: str
    region: str
    email_from: str | None = None
    email_name: str | None = None
    admin_email: str | None = None


def _optional(store: ConfigStoreProtocol, key: str) -> str | None:
    value = store.get(key)
    if value is None:
        return None
    value = value.strip()
    return value or None


def load_configuration(store: ConfigStoreProtocol) -> Configuration:
    """Lê e valida a configuração a partir do config store.

    Args:
        store: Config store somente leitura.

    Returns:
        Configuration validada.

    Raises:
        ConfigurationError: Se API_KEY, ACCESS_POLICY_ID ou REGION estiverem
            ausentes ou vazios (todas as chaves faltantes são reportadas).
    """
    required = {key: _optional(store, key) for key in REQUIRED_KEYS}
    missing = [key for key, value in required.items() if value is None]
    if missing:
        logger.error("configuration_missing_keys", extra={"missing_keys": missing})
        raise ConfigurationError(missing)

    admin_email = _optional(store, KEY_ADMIN_EMAIL)
    if admin_email is None:
        logger.warning(
            "admin_email_not_configured",
            extra={"key": KEY_ADMIN_EMAIL, "effect": "failure_alerts_disabled"},
        )

    return Configuration(
        api_key=required[KEY_API_KEY] or "",
        access_policy_id=required[KEY_ACCESS_POLICY_ID] or "",
        region=required[KEY_REGION] or "",
        email_from=_optional(store, KEY_SUCCESS_EMAIL_FROM),
        email_name=_optional(store, KEY_SUCCESS_EMAIL_NAME),
        admin_email=admin_email,
    )
