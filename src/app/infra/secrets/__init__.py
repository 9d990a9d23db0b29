"""Secrets: config stores concretos.

Módulos disponíveis:
    - gcp_secrets: Integração com Google Cloud Secret Manager
    - env_secrets: Variáveis de ambiente (dev, testes, deploys simples)
"""

from __future__ import annotations

from app.infra.secrets.env_secrets import EnvSecretProvider
from app.infra.secrets.gcp_secrets import GCPSecretProvider, secret_id_for

__all__ = [
    "EnvSecretProvider",
    "GCPSecretProvider",
    "secret_id_for",
]
