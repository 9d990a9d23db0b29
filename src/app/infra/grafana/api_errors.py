"""Helpers de parsing de respostas da API de tokens Grafana Cloud."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from app.domain.credential import IssuedCredential
from app.domain.errors import ResponseParseError

if TYPE_CHECKING:
    from app.domain.credential import CredentialRequest

EMPTY_BODY_DETAIL = "<empty response body>"


def extract_error_detail(body: str) -> str:
    """Extrai mensagem legível de uma resposta de erro.

    Ordem: campo `message`, campo `error`, corpo bruto.
    Corpos não-JSON (texto, HTML) são devolvidos como estão.
    """
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, ValueError):
        return body or EMPTY_BODY_DETAIL

    if isinstance(data, dict):
        for key in ("message", "error"):
            value = data.get(key)
            if value:
                return value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)
    return body or EMPTY_BODY_DETAIL


def parse_issued_credential(body: str, request: CredentialRequest) -> IssuedCredential:
    """Converte o corpo de uma resposta 2xx em IssuedCredential.

    `name` e `expiresAt` ausentes caem nos valores pedidos; a chave do
    token é obrigatória.

    Raises:
        ResponseParseError: JSON inválido, payload não-objeto ou sem chave.
    """
    try:
        data: Any = json.loads(body)
    except (json.JSONDecodeError, ValueError) as exc:
        raise ResponseParseError("invalid_json") from exc

    if not isinstance(data, dict):
        raise ResponseParseError("unexpected_payload")

    merged = {key: value for key, value in data.items() if value is not None}
    merged.setdefault("name", request.name)
    if "expiresAt" not in merged and "expires_at" not in merged:
        merged["expiresAt"] = request.expires_at

    try:
        return IssuedCredential.model_validate(merged)
    except ValidationError as exc:
        fields = sorted({str(error["loc"][0]) for error in exc.errors() if error.get("loc")})
        raise ResponseParseError(f"invalid_fields: {', '.join(fields)}") from exc
