"""Contrato do cliente da API de emissão de tokens."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.configuration import Configuration
    from app.domain.credential import CredentialRequest, IssuedCredential


class IssuanceClientProtocol(Protocol):
    """Emite um token em uma única tentativa.

    Raises:
        TransportError: Falha de rede antes de qualquer resposta.
        ApiError: Resposta não-2xx.
        ResponseParseError: Resposta 2xx inválida.
    """

    def issue(
        self,
        config: Configuration,
        request: CredentialRequest,
    ) -> IssuedCredential: ...
