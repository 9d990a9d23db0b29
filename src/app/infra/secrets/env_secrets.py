"""Environment Secrets: config store via variáveis de ambiente.

Chaves lógicas (API_KEY, REGION, ...) são resolvidas com prefixo:
prefix="GRAFANA_CLOUD", key="API_KEY" -> GRAFANA_CLOUD_API_KEY.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


class EnvSecretProvider:
    """Config store somente leitura sobre variáveis de ambiente.

    Args:
        prefix: Prefixo das variáveis (default: "")
        environ: Mapping alternativo a os.environ (testes)
    """

    def __init__(self, prefix: str = "", environ: Mapping[str, str] | None = None) -> None:
        self._prefix = prefix.upper().rstrip("_") + "_" if prefix else ""
        self._environ = environ

    def env_key(self, key: str) -> str:
        """Converte nome lógico em variável de ambiente."""
        # api-key -> API_KEY
        env_key = key.upper().replace("-", "_")
        return f"{self._prefix}{env_key}"

    def get(self, key: str, default: str | None = None) -> str | None:
        """Obtém valor de variável de ambiente.

        Args:
            key: Nome lógico (ex.: API_KEY)
            default: Valor padrão

        Returns:
            Valor ou default
        """
        env_key = self.env_key(key)
        environ = self._environ if self._environ is not None else os.environ
        value = environ.get(env_key)
        if value is None:
            logger.debug("env_config_not_found", extra={"config_key": key, "env_key": env_key})
            return default
        return value
