"""Contrato de envio de e-mail.

Só o contrato de envio importa para o fluxo; transporte fica em app/infra/mail.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class OutgoingEmail:
    """Mensagem de texto simples a enviar."""

    to: str
    subject: str
    body: str
    sender_address: str | None = None
    sender_name: str | None = None


@runtime_checkable
class MailerProtocol(Protocol):
    """Envia uma mensagem; levanta exceção se o transporte falhar."""

    def send(self, message: OutgoingEmail) -> None: ...


class MailDeliveryError(Exception):
    """Erro de entrega no transporte de e-mail."""
