"""Registro do resultado terminal na linha da submissão.

Nunca propaga exceções: uma falha secundária de escrita não pode mascarar
o erro real do processamento.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.outcome import CAPACITY_SHORTFALL_MARKER

if TYPE_CHECKING:
    from app.domain.outcome import RowOutcome
    from app.protocols.row_store import RowStoreProtocol
    from config.settings.sheets import ColumnLayout

logger = logging.getLogger(__name__)


class OutcomeRecorder:
    """Escreve os quatro campos de resultado, sobrescrevendo a linha."""

    def __init__(self, row_store: RowStoreProtocol, columns: ColumnLayout) -> None:
        self._row_store = row_store
        self._columns = columns

    def record(self, row: int, outcome: RowOutcome) -> None:
        """Grava status, nome do token, expiração e detalhe de erro.

        Idempotente: a mesma chamada repetida deixa a linha no mesmo estado.
        Se o store tiver menos colunas que o necessário, grava apenas o
        status com o marcador de colunas insuficientes.
        """
        try:
            capacity = self._row_store.column_capacity()
            if capacity >= self._columns.required_capacity:
                values = dict(zip(self._columns.outcome_columns, outcome.as_fields(), strict=True))
                self._row_store.write_cells(row, values)
                logger.info("row_outcome_recorded", extra={"row": row, "status": str(outcome.status)})
                return

            logger.error(
                "row_store_capacity_shortfall",
                extra={
                    "row": row,
                    "capacity": capacity,
                    "required": self._columns.required_capacity,
                },
            )
            if capacity >= self._columns.status:
                self._row_store.write_cells(
                    row,
                    {self._columns.status: f"{outcome.status} {CAPACITY_SHORTFALL_MARKER}"},
                )
        except Exception:
            logger.exception(
                "row_outcome_record_failed",
                extra={"row": row, "status": str(outcome.status)},
            )
