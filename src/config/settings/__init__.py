"""Agregador de settings do emissor de tokens.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.email import EmailSettings, get_email_settings
from config.settings.issuer import (
    GRAFANA_CLOUD_API_ENDPOINT,
    ConfigBackend,
    IssuerSettings,
    get_issuer_settings,
)
from config.settings.sheets import (
    ColumnLayout,
    RowStoreBackend,
    SheetsSettings,
    get_sheets_settings,
)

__all__ = [
    # Constants
    "GRAFANA_CLOUD_API_ENDPOINT",
    # Base
    "BaseSettings",
    "ColumnLayout",
    "ConfigBackend",
    "EmailSettings",
    "Environment",
    "IssuerSettings",
    "RowStoreBackend",
    "SheetsSettings",
    "get_base_settings",
    "get_email_settings",
    "get_issuer_settings",
    "get_sheets_settings",
]
