"""Protocolos e contratos do core da aplicação."""

from .config_store import ConfigStoreProtocol
from .issuance_client import IssuanceClientProtocol
from .mailer import MailDeliveryError, MailerProtocol, OutgoingEmail
from .row_store import RowStoreError, RowStoreProtocol

__all__ = [
    "ConfigStoreProtocol",
    "IssuanceClientProtocol",
    "MailDeliveryError",
    "MailerProtocol",
    "OutgoingEmail",
    "RowStoreError",
    "RowStoreProtocol",
]
