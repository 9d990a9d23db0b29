"""Contrato do row store (planilha de respostas).

Linhas e colunas são 1-based, como na planilha vinculada ao formulário.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping


@runtime_checkable
class RowStoreProtocol(Protocol):
    """Leitura e escrita posicional de células de uma linha."""

    @property
    def location(self) -> str:
        """Descrição legível do store (ex: planilha e aba) para alertas."""
        ...

    def column_capacity(self) -> int:
        """Quantidade de colunas declaradas no store."""
        ...

    def read_cell(self, row: int, column: int) -> str:
        """Lê o valor da célula; string vazia se não houver valor."""
        ...

    def write_cells(self, row: int, values: Mapping[int, str]) -> None:
        """Sobrescreve as células `coluna -> valor` da linha."""
        ...


class RowStoreError(Exception):
    """Erro de leitura/escrita no row store."""
