"""Row store em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.protocols.row_store import RowStoreError, RowStoreProtocol

if TYPE_CHECKING:
    from collections.abc import Mapping


class MemoryRowStore(RowStoreProtocol):
    """Planilha em memória com capacidade fixa de colunas.

    Args:
        column_count: Quantidade de colunas declaradas
        rows: Conteúdo inicial {linha: {coluna: valor}}
        location: Descrição exibida nos alertas
    """

    def __init__(
        self,
        column_count: int = 8,
        rows: Mapping[int, Mapping[int, str]] | None = None,
        location: str = "memory",
    ) -> None:
        self._column_count = column_count
        self._location = location
        self._rows: dict[int, dict[int, str]] = {
            row: dict(cells) for row, cells in (rows or {}).items()
        }

    @property
    def location(self) -> str:
        return self._location

    def column_capacity(self) -> int:
        return self._column_count

    def read_cell(self, row: int, column: int) -> str:
        return self._rows.get(row, {}).get(column, "")

    def write_cells(self, row: int, values: Mapping[int, str]) -> None:
        overflow = [column for column in values if column < 1 or column > self._column_count]
        if overflow:
            raise RowStoreError(f"columns_out_of_range: {sorted(overflow)}")
        self._rows.setdefault(row, {}).update(values)

    def row(self, row: int) -> dict[int, str]:
        """Cópia das células da linha (útil em testes)."""
        return dict(self._rows.get(row, {}))
