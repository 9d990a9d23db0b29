"""Resolução do prazo de validade pedido no formulário.

Converte texto livre (ex: "90日") em um instante UTC absoluto, truncado
para 00:00:00 do dia. Nunca falha: qualquer entrada não reconhecida cai
no prazo padrão, com log de fallback.
"""

from __future__ import annotations

import logging
import re
from datetime import UTC, datetime, timedelta

from config.logging import log_fallback

logger = logging.getLogger(__name__)

_COMPONENT = "expiration_resolver"

DAY_UNIT = "日"
_DAYS_PATTERN = re.compile(rf"(-?[0-9]+){DAY_UNIT}")

ISO_UTC_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def parse_expiration_days(text: object) -> tuple[int | None, str | None]:
    """Extrai a quantidade de dias do texto.

    Returns:
        (dias, None) quando reconhecido, ou (None, motivo do fallback).
    """
    if not isinstance(text, str) or not text.strip():
        return None, "empty_text"

    match = _DAYS_PATTERN.search(text)
    if match is None:
        return None, "format_not_recognized"

    try:
        days = int(match.group(1))
    except ValueError:
        # sequência de dígitos acima do limite de conversão do int
        return None, "days_out_of_range"
    if days <= 0:
        return None, "non_positive_days"
    return days, None


def resolve_expiration(text: object, default_days: int, now: datetime) -> str:
    """Resolve o texto de prazo para um instante ISO-8601 UTC.

    Args:
        text: Valor bruto do formulário/planilha.
        default_days: Prazo usado quando o texto não é reconhecido.
        now: Instante de referência (injetado pelo caller).

    Returns:
        String `YYYY-MM-DDT00:00:00Z` de `now + dias`.
    """
    days, reason = parse_expiration_days(text)
    if days is None:
        log_fallback(logger, _COMPONENT, reason=reason, default_days=default_days)
        days = default_days
    else:
        logger.debug("expiration_days_parsed", extra={"days": days})

    reference = now if now.tzinfo is not None else now.replace(tzinfo=UTC)
    try:
        target = reference.astimezone(UTC) + timedelta(days=days)
    except OverflowError:
        log_fallback(logger, _COMPONENT, reason="days_out_of_range", default_days=default_days)
        target = reference.astimezone(UTC) + timedelta(days=default_days)

    day_start = target.replace(hour=0, minute=0, second=0, microsecond=0)
    return day_start.strftime(ISO_UTC_FORMAT)
