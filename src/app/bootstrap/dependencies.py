"""Factories: criação de implementações concretas dos protocolos.

Centraliza a escolha de backends a partir das settings de ambiente.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.grafana import create_issuance_client
from app.infra.mail import SmtpMailer
from app.infra.secrets import EnvSecretProvider, GCPSecretProvider
from app.infra.stores import MemoryRowStore, SheetsRowStore
from app.use_cases import IssueTokenUseCase
from config.settings import (
    get_base_settings,
    get_email_settings,
    get_issuer_settings,
    get_sheets_settings,
)

if TYPE_CHECKING:
    from app.protocols.config_store import ConfigStoreProtocol
    from app.protocols.mailer import MailerProtocol
    from app.protocols.row_store import RowStoreProtocol

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Config Store Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_config_store() -> ConfigStoreProtocol:
    """Cria config store conforme ISSUER_CONFIG_BACKEND.

    - "env": EnvSecretProvider (variáveis {prefix}_API_KEY etc.)
    - "gcp": GCPSecretProvider (secrets {prefix}-api-key etc.)
    """
    issuer = get_issuer_settings()

    if issuer.config_backend == "gcp":
        store = GCPSecretProvider(
            project_id=get_base_settings().gcp_project,
            prefix=issuer.config_prefix,
        )
        logger.info("config_store_created", extra={"backend": "gcp"})
        return store

    logger.info("config_store_created", extra={"backend": "env"})
    return EnvSecretProvider(prefix=issuer.config_prefix)


# ──────────────────────────────────────────────────────────────────────────────
# Row Store Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_row_store() -> RowStoreProtocol:
    """Cria row store conforme SHEETS_BACKEND.

    - "sheets": SheetsRowStore (Google Sheets API v4)
    - "memory": MemoryRowStore (dev only)
    """
    sheets = get_sheets_settings()

    if sheets.backend == "memory":
        base = get_base_settings()
        if not base.is_development:
            logger.warning(
                "memory_store_in_non_dev",
                extra={"backend": "memory", "environment": base.environment},
            )
        logger.info("row_store_created", extra={"backend": "memory"})
        return MemoryRowStore(column_count=sheets.columns.required_capacity)

    store = SheetsRowStore(
        spreadsheet_id=sheets.spreadsheet_id,
        sheet_name=sheets.sheet_name,
        credentials_json=sheets.credentials_json,
    )
    logger.info("row_store_created", extra={"backend": "sheets"})
    return store


# ──────────────────────────────────────────────────────────────────────────────
# Mailer Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_mailer() -> MailerProtocol:
    """Cria transporte de e-mail (SMTP)."""
    return SmtpMailer(get_email_settings())


# ──────────────────────────────────────────────────────────────────────────────
# Use Case Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_issue_token_use_case() -> IssueTokenUseCase:
    """Monta o use case de emissão com as implementações do ambiente."""
    return IssueTokenUseCase(
        config_store=create_config_store(),
        row_store=create_row_store(),
        issuance_client=create_issuance_client(),
        mailer=create_mailer(),
        issuer_settings=get_issuer_settings(),
        columns=get_sheets_settings().columns,
    )
