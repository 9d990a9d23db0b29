"""Settings da planilha de respostas (row store).

Layout de colunas (1-based, A=1) onde o formulário grava as respostas e
onde o resultado do processamento é registrado. As posições são uma
decisão de deployment: ajustar conforme a planilha vinculada ao formulário.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

RowStoreBackend = Literal["sheets", "memory"]


@dataclass(frozen=True)
class ColumnLayout:
    """Posições fixas das colunas de uma linha de resposta.

    Attributes:
        email: Coluna com o e-mail coletado pelo formulário (B)
        expiration: Coluna com o prazo escolhido no formulário (C)
        status: Coluna de status do processamento (E)
        token_name: Coluna com o nome do token emitido (F)
        expires_at: Coluna com a expiração do token (G)
        error_details: Coluna com o detalhe de erro (H)
    """

    email: int = 2
    expiration: int = 3
    status: int = 5
    token_name: int = 6
    expires_at: int = 7
    error_details: int = 8

    @property
    def outcome_columns(self) -> tuple[int, int, int, int]:
        """Colunas escritas pelo registro de resultado, na ordem do contrato."""
        return (self.status, self.token_name, self.expires_at, self.error_details)

    @property
    def required_capacity(self) -> int:
        """Quantidade mínima de colunas para gravar o resultado completo."""
        return max(self.outcome_columns)

    def validate(self) -> list[str]:
        errors: list[str] = []
        positions = (self.email, self.expiration, *self.outcome_columns)
        if any(position < 1 for position in positions):
            errors.append("SHEETS_COLUMN_* deve ser >= 1")
        if len(set(self.outcome_columns)) != len(self.outcome_columns):
            errors.append("Colunas de resultado devem ser distintas")
        return errors


@dataclass(frozen=True)
class SheetsSettings:
    """Configurações do row store.

    Attributes:
        backend: sheets (Google Sheets) ou memory (dev/test)
        spreadsheet_id: ID da planilha vinculada ao formulário
        sheet_name: Nome da aba de respostas
        credentials_json: JSON da service account com acesso à planilha
        columns: Layout de colunas
    """

    backend: RowStoreBackend = "sheets"
    spreadsheet_id: str = ""
    sheet_name: str = "フォームの回答 1"
    credentials_json: str = ""
    columns: ColumnLayout = ColumnLayout()

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações do row store.

        Args:
            base: BaseSettings para verificar ambiente.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.backend not in ("sheets", "memory"):
            errors.append(f"SHEETS_BACKEND inválido: {self.backend}")

        if self.backend == "memory" and not base.is_development:
            errors.append("SHEETS_BACKEND=memory proibido em staging/production.")

        if self.backend == "sheets":
            if not self.spreadsheet_id:
                errors.append("SHEETS_SPREADSHEET_ID não configurado")
            if not self.credentials_json:
                errors.append("SHEETS_CREDENTIALS_JSON não configurado")
            if not self.sheet_name:
                errors.append("SHEETS_SHEET_NAME não pode ser vazio")

        errors.extend(self.columns.validate())
        return errors


def _int_env(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


def _load_from_env() -> SheetsSettings:
    """Carrega SheetsSettings de variáveis de ambiente."""
    backend = os.getenv("SHEETS_BACKEND", "sheets").lower()
    return SheetsSettings(
        backend="memory" if backend == "memory" else "sheets",
        spreadsheet_id=os.getenv("SHEETS_SPREADSHEET_ID", ""),
        sheet_name=os.getenv("SHEETS_SHEET_NAME", "フォームの回答 1"),
        credentials_json=os.getenv("SHEETS_CREDENTIALS_JSON", ""),
        columns=ColumnLayout(
            email=_int_env("SHEETS_COLUMN_EMAIL", 2),
            expiration=_int_env("SHEETS_COLUMN_EXPIRATION", 3),
            status=_int_env("SHEETS_COLUMN_STATUS", 5),
            token_name=_int_env("SHEETS_COLUMN_TOKEN_NAME", 6),
            expires_at=_int_env("SHEETS_COLUMN_EXPIRES_AT", 7),
            error_details=_int_env("SHEETS_COLUMN_ERROR_DETAILS", 8),
        ),
    )


@lru_cache(maxsize=1)
def get_sheets_settings() -> SheetsSettings:
    """Retorna instância cacheada de SheetsSettings."""
    return _load_from_env()
