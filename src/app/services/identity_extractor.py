"""Extração do e-mail do solicitante a partir do evento de submissão.

Fontes em ordem fixa de prioridade:
1. Accessor do e-mail coletado pelo formulário
2. Resposta da pergunta de e-mail (named values)
3. Leitura direta da coluna de e-mail na linha do row store

Cada fonte é uma função pura `evento -> candidato | None`. Candidatos
vazios são ignorados; o primeiro candidato não vazio é o escolhido e
precisa passar na checagem estrutural de e-mail. Sem candidato, ou com
candidato inválido, IdentityError é levantado antes de qualquer chamada
externa.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from app.domain.errors import IdentityError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from app.domain.submission import SubmissionEvent
    from app.protocols.row_store import RowStoreProtocol

    IdentitySource = Callable[[SubmissionEvent], str | None]

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(value: object) -> bool:
    """Checagem estrutural `local@domínio.tld`, sem espaços."""
    return isinstance(value, str) and EMAIL_PATTERN.fullmatch(value) is not None


def from_response_accessor(event: SubmissionEvent) -> str | None:
    """Fonte 1: accessor do e-mail do respondente."""
    if event.respondent_email is None:
        return None
    return event.respondent_email()


def from_named_values(field_name: str) -> IdentitySource:
    """Fonte 2: primeira resposta da pergunta `field_name`."""

    def _source(event: SubmissionEvent) -> str | None:
        return event.named_value(field_name)

    return _source


def from_row_store(row_store: RowStoreProtocol, column: int) -> IdentitySource:
    """Fonte 3: célula de e-mail na linha do evento (se a coluna existir)."""

    def _source(event: SubmissionEvent) -> str | None:
        if row_store.column_capacity() < column:
            return None
        return row_store.read_cell(event.row, column)

    return _source


class IdentityExtractor:
    """Resolve o RequesterIdentity testando as fontes em ordem."""

    def __init__(self, sources: Sequence[tuple[str, IdentitySource]]) -> None:
        self._sources = tuple(sources)

    @classmethod
    def default(
        cls,
        row_store: RowStoreProtocol,
        *,
        field_name: str,
        email_column: int,
    ) -> IdentityExtractor:
        """Cadeia padrão: accessor → named values → row store."""
        return cls(
            [
                ("response_accessor", from_response_accessor),
                ("named_values", from_named_values(field_name)),
                ("row_store", from_row_store(row_store, email_column)),
            ]
        )

    def extract(self, event: SubmissionEvent) -> str:
        """Retorna o primeiro candidato não vazio, validado como e-mail.

        Fontes seguintes não são consultadas depois do primeiro candidato.

        Raises:
            IdentityError: Nenhum candidato, ou o primeiro candidato não
                é um e-mail válido (carregado para o alerta ao admin).
        """
        for source_name, source in self._sources:
            candidate = self._read_candidate(source_name, source, event)
            if not candidate:
                continue
            if not is_valid_email(candidate):
                logger.error(
                    "identity_candidate_invalid",
                    extra={"source": source_name, "row": event.row},
                )
                raise IdentityError(candidate=candidate)
            logger.info(
                "identity_resolved",
                extra={"source": source_name, "row": event.row},
            )
            return candidate

        logger.error("identity_not_resolved", extra={"row": event.row})
        raise IdentityError(candidate=None)

    @staticmethod
    def _read_candidate(
        source_name: str,
        source: IdentitySource,
        event: SubmissionEvent,
    ) -> str | None:
        try:
            value = source(event)
        except Exception as exc:
            logger.warning(
                "identity_source_failed",
                extra={
                    "source": source_name,
                    "row": event.row,
                    "error_type": type(exc).__name__,
                },
            )
            return None
        if value is None:
            return None
        return str(value)
