"""Modelos de domínio do token (access policy token) Grafana Cloud."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


@dataclass(frozen=True, slots=True)
class CredentialRequest:
    """Pedido de emissão montado pelo fluxo. Imutável após construção."""

    name: str
    expires_at: str
    access_policy_id: str

    def to_payload(self) -> dict[str, Any]:
        """Corpo JSON esperado pela API de emissão."""
        return {
            "name": self.name,
            "expiresAt": self.expires_at,
            "accessPolicyId": self.access_policy_id,
        }


class IssuedCredential(BaseModel):
    """Token retornado pela API.

    `secret_value` existe apenas em memória e no e-mail de sucesso;
    fica fora de repr para não vazar em logs ou tracebacks.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str = Field(..., min_length=1, description="Nome do token emitido.")
    secret_value: str = Field(
        ...,
        min_length=1,
        repr=False,
        validation_alias=AliasChoices("key", "token", "secret", "secret_value"),
        description="Chave do token (exibida uma única vez).",
    )
    expires_at: str = Field(
        ...,
        validation_alias=AliasChoices("expiresAt", "expires_at"),
        description="Expiração informada pela API (ISO-8601).",
    )
