"""Filters de logging para injeção de contexto e redação.

Campos injetados:
- correlation_id: ID de rastreamento da submissão processada
- service: Nome do serviço (ex: grafana_token_issuer)

Campos redigidos:
- Qualquer atributo `extra` cujo nome sugira segredo (api_key, secret, token...)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

REDACTED_PLACEHOLDER = "***"

_SENSITIVE_KEYWORDS = (
    "api_key",
    "apikey",
    "authorization",
    "password",
    "secret",
    "token_key",
)

# Atributos padrão do LogRecord nunca são redigidos
_STANDARD_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime"}


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


def is_sensitive_key(key: str) -> bool:
    """Retorna True se o nome do campo sugere conteúdo secreto."""
    lowered = key.lower()
    return any(keyword in lowered for keyword in _SENSITIVE_KEYWORDS)


def redact_value(key: str, value: Any) -> Any:
    """Redige `value` quando `key` é sensível, recursivamente em mappings."""
    if is_sensitive_key(key):
        return REDACTED_PLACEHOLDER
    if isinstance(value, dict):
        return {nested: redact_value(str(nested), item) for nested, item in value.items()}
    return value


class SecretRedactionFilter(logging.Filter):
    """Mascara campos `extra` sensíveis antes da formatação.

    Nunca filtra records; apenas substitui valores.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in list(record.__dict__.items()):
            if key in _STANDARD_RECORD_ATTRS:
                continue
            redacted = redact_value(key, value)
            if redacted is not value:
                setattr(record, key, redacted)
        return True
