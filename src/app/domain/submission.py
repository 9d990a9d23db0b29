"""Evento de submissão de formulário (uma unidade de trabalho).

O evento chega em formatos variados conforme o mecanismo de entrega:
um accessor do e-mail do respondente, um mapeamento de respostas por
pergunta, ou apenas o número da linha gravada na planilha. Todos os
formatos são campos tipados do mesmo evento; o extrator de identidade
decide a prioridade.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field

RespondentEmailAccessor = Callable[[], str | None]


@dataclass(frozen=True, slots=True)
class SubmissionEvent:
    """Evento somente leitura fornecido pelo host.

    Attributes:
        row: Linha (1-based) onde a resposta foi gravada no row store
        respondent_email: Accessor do e-mail coletado pelo formulário
        named_values: Respostas por pergunta (nome -> valores em ordem)
    """

    row: int
    respondent_email: RespondentEmailAccessor | None = None
    named_values: Mapping[str, Sequence[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.row < 1:
            raise ValueError(f"row deve ser >= 1, recebido: {self.row}")

    def named_value(self, name: str) -> str | None:
        """Retorna o primeiro valor da pergunta `name`, se houver."""
        values = self.named_values.get(name)
        if not values:
            return None
        return values[0]
