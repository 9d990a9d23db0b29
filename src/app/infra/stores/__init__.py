"""Stores: implementações concretas do row store.

Módulos disponíveis:
    - sheets_row_store: Planilha de respostas via Google Sheets API v4
    - memory_row_store: Row store em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.memory_row_store import MemoryRowStore
from app.infra.stores.sheets_row_store import (
    SheetsRowStore,
    a1_cell,
    column_letter,
    quote_sheet_name,
)

__all__ = [
    # Memory (dev/test)
    "MemoryRowStore",
    # Google Sheets
    "SheetsRowStore",
    "a1_cell",
    "column_letter",
    "quote_sheet_name",
]
