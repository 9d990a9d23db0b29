"""Contrato do config store (leitura chave-valor).

Apenas o contrato de leitura importa para o fluxo; o armazenamento em si
(variáveis de ambiente, Secret Manager) fica em app/infra/secrets.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConfigStoreProtocol(Protocol):
    """Lookup somente leitura de chaves de configuração."""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Retorna o valor de `key` ou `default` se ausente."""
        ...
