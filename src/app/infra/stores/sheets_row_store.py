"""Row store concreto sobre Google Sheets API v4.

A planilha é a vinculada ao formulário de solicitação; cada submissão
ocupa uma linha e o resultado é gravado em colunas fixas da mesma linha.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from app.observability import get_correlation_id
from app.protocols.row_store import RowStoreError, RowStoreProtocol

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

_COMPONENT = "sheets_row_store"
_SHEETS_SCOPE = "https://www.googleapis.com/auth/spreadsheets"


def column_letter(column: int) -> str:
    """Converte índice 1-based em letra de coluna A1 (1 → A, 27 → AA)."""
    if column < 1:
        raise ValueError(f"column deve ser >= 1, recebido: {column}")
    letters = ""
    while column:
        column, remainder = divmod(column - 1, 26)
        letters = chr(ord("A") + remainder) + letters
    return letters


def quote_sheet_name(sheet_name: str) -> str:
    """Nome da aba entre aspas simples, com aspas internas duplicadas."""
    escaped = sheet_name.replace("'", "''")
    return f"'{escaped}'"


def a1_cell(sheet_name: str, row: int, column: int) -> str:
    """Referência A1 de uma célula, com nome da aba escapado."""
    return f"{quote_sheet_name(sheet_name)}!{column_letter(column)}{row}"


class SheetsRowStore(RowStoreProtocol):
    """Implementação do row store usando a API v4 do Google Sheets."""

    __slots__ = ("_service", "_sheet_name", "_spreadsheet_id")

    def __init__(
        self,
        *,
        spreadsheet_id: str,
        sheet_name: str,
        credentials_json: str = "",
        service: Any | None = None,
    ) -> None:
        self._spreadsheet_id = spreadsheet_id
        self._sheet_name = sheet_name
        if service is None:
            credentials = service_account.Credentials.from_service_account_info(
                json.loads(credentials_json),
                scopes=[_SHEETS_SCOPE],
            )
            service = build("sheets", "v4", credentials=credentials, cache_discovery=False)
        self._service = service

    @property
    def location(self) -> str:
        return f"{self._spreadsheet_id} ({self._sheet_name})"

    def column_capacity(self) -> int:
        try:
            response = (
                self._service.spreadsheets()
                .get(
                    spreadsheetId=self._spreadsheet_id,
                    ranges=[quote_sheet_name(self._sheet_name)],
                    fields="sheets(properties(title,gridProperties(columnCount)))",
                )
                .execute()
            )
        except HttpError as exc:
            self._log_error(action="column_capacity", exc=exc)
            raise RowStoreError("column_capacity_failed") from exc

        for sheet in response.get("sheets", []):
            properties = sheet.get("properties", {})
            if properties.get("title") == self._sheet_name:
                return int(properties.get("gridProperties", {}).get("columnCount", 0))
        raise RowStoreError(f"sheet_not_found: {self._sheet_name}")

    def read_cell(self, row: int, column: int) -> str:
        try:
            response = (
                self._service.spreadsheets()
                .values()
                .get(spreadsheetId=self._spreadsheet_id, range=a1_cell(self._sheet_name, row, column))
                .execute()
            )
        except HttpError as exc:
            self._log_error(action="read_cell", exc=exc)
            raise RowStoreError("read_cell_failed") from exc

        values = response.get("values") or [[]]
        first_row = values[0] or [""]
        return str(first_row[0])

    def write_cells(self, row: int, values: Mapping[int, str]) -> None:
        data = [
            {"range": a1_cell(self._sheet_name, row, column), "values": [[value]]}
            for column, value in sorted(values.items())
        ]
        body = {"valueInputOption": "RAW", "data": data}
        try:
            (
                self._service.spreadsheets()
                .values()
                .batchUpdate(spreadsheetId=self._spreadsheet_id, body=body)
                .execute()
            )
        except HttpError as exc:
            self._log_error(action="write_cells", exc=exc)
            raise RowStoreError("write_cells_failed") from exc

    def _log_error(self, *, action: str, exc: HttpError) -> None:
        logger.error(
            "sheets_http_error",
            extra={
                "component": _COMPONENT,
                "action": action,
                "status_code": getattr(getattr(exc, "resp", None), "status", None),
                "error_type": type(exc).__name__,
                "correlation_id": get_correlation_id(),
            },
        )
