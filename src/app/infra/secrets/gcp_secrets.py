"""GCP Secret Manager: config store sobre Google Cloud Secret Manager.

Provedor para staging/production. Cada chave lógica vira um secret:
prefix="GRAFANA_CLOUD", key="API_KEY" -> grafana-cloud-api-key.
Valores não são cacheados: cada invocação lê a versão corrente.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import TYPE_CHECKING

from google.api_core.exceptions import NotFound

if TYPE_CHECKING:
    from google.cloud.secretmanager import SecretManagerServiceClient

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _get_client() -> SecretManagerServiceClient:
    """Obtém cliente do Secret Manager (singleton via lru_cache)."""
    from google.cloud import secretmanager
    return secretmanager.SecretManagerServiceClient()


def secret_id_for(prefix: str, key: str) -> str:
    """Nome do secret para uma chave lógica."""
    raw = f"{prefix}_{key}" if prefix else key
    return raw.lower().replace("_", "-")


class GCPSecretProvider:
    """Config store somente leitura sobre GCP Secret Manager.

    Args:
        project_id: ID do projeto GCP (default: env GCP_PROJECT)
        prefix: Prefixo das chaves lógicas
        version: Versão do secret (default: latest)
        client: Cliente opcional (testes injetam um fake)
    """

    def __init__(
        self,
        project_id: str | None = None,
        prefix: str = "",
        version: str = "latest",
        client: SecretManagerServiceClient | None = None,
    ) -> None:
        self._project_id = project_id or os.getenv("GCP_PROJECT", "")
        self._prefix = prefix
        self._version = version
        self._client = client

    def _resource_name(self, secret_id: str) -> str:
        return f"projects/{self._project_id}/secrets/{secret_id}/versions/{self._version}"

    def get(self, key: str, default: str | None = None) -> str | None:
        """Obtém secret por chave lógica.

        Secret inexistente devolve `default`; demais erros do Secret
        Manager (permissão, rede) propagam.

        Raises:
            ValueError: Se o project_id não estiver definido
        """
        if not self._project_id:
            msg = "GCP_PROJECT não definido e project_id não fornecido"
            raise ValueError(msg)

        secret_id = secret_id_for(self._prefix, key)
        client = self._client or _get_client()
        try:
            response = client.access_secret_version(request={"name": self._resource_name(secret_id)})
        except NotFound:
            logger.debug("secret_not_found", extra={"config_key": key, "secret_id": secret_id})
            return default
        except Exception as e:
            logger.error(
                "secret_load_error",
                extra={"secret_id": secret_id, "error_type": type(e).__name__},
            )
            raise

        logger.debug("secret_loaded", extra={"secret_id": secret_id})
        return response.payload.data.decode("UTF-8")
