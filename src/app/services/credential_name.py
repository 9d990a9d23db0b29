"""Geração do nome do token a partir do e-mail do solicitante."""

from __future__ import annotations

import re
from datetime import datetime

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9._-]")

TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"
NAME_PATTERN = re.compile(r"^[a-zA-Z0-9._-]+-\d{14}$")


def sanitize_local_part(identity: str) -> str:
    """Parte local do e-mail com caracteres fora de [a-zA-Z0-9._-] trocados por `_`."""
    local_part = identity.split("@", 1)[0]
    return _UNSAFE_CHARS.sub("_", local_part) or "_"


def generate_credential_name(identity: str, now: datetime) -> str:
    """Gera `<parte-local-sanitizada>-<yyyyMMddHHmmss>`.

    Resolução de segundos: duas gerações para a mesma identidade no
    mesmo segundo produzem o mesmo nome.

    Args:
        identity: E-mail validado do solicitante.
        now: Instante de geração, já no timezone desejado.
    """
    return f"{sanitize_local_part(identity)}-{now.strftime(TIMESTAMP_FORMAT)}"
