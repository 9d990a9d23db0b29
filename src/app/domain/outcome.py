"""Resultado terminal gravado na linha da submissão.

Status e rótulos seguem o idioma da planilha de respostas.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

CAPACITY_SHORTFALL_MARKER = "(書き込み列不足)"
ERROR_DETAIL_PREFIX = "エラー: "


class OutcomeStatus(StrEnum):
    """Status terminal de uma linha."""

    SUCCESS = "成功"
    FAILURE = "失敗"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class RowOutcome:
    """Registro durável do que aconteceu com uma submissão.

    Exatamente um RowOutcome é gravado por evento, sobrescrevendo a linha.
    """

    status: OutcomeStatus
    credential_name: str = ""
    expires_at: str = ""
    error_detail: str = ""

    @classmethod
    def success(cls, credential_name: str, expires_at: str) -> RowOutcome:
        return cls(
            status=OutcomeStatus.SUCCESS,
            credential_name=credential_name,
            expires_at=expires_at,
        )

    @classmethod
    def failure(cls, message: str) -> RowOutcome:
        return cls(status=OutcomeStatus.FAILURE, error_detail=f"{ERROR_DETAIL_PREFIX}{message}")

    def as_fields(self) -> tuple[str, str, str, str]:
        """Valores na ordem (status, nome, expiração, detalhe de erro)."""
        return (str(self.status), self.credential_name, self.expires_at, self.error_detail)
