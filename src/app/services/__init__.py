"""Serviços de aplicação.

Unidades reutilizáveis do fluxo de emissão (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.credential_name import generate_credential_name
from app.services.expiration_resolver import resolve_expiration
from app.services.identity_extractor import IdentityExtractor
from app.services.notifier import Notifier
from app.services.outcome_recorder import OutcomeRecorder

__all__ = [
    "IdentityExtractor",
    "Notifier",
    "OutcomeRecorder",
    "generate_credential_name",
    "resolve_expiration",
]
