"""Notificações por e-mail do fluxo de emissão.

- Sucesso: um único e-mail ao solicitante com nome, chave e expiração do
  token. Falha de envio levanta NotificationError.
- Falha: alerta ao administrador. Nunca levanta; erros são apenas logados.
"""

from __future__ import annotations

import logging
import traceback
from typing import TYPE_CHECKING

from app.constants.email_templates import (
    FAILURE_BODY,
    FAILURE_SUBJECT,
    SECRET_DISCLOSURE_NOTICE,
    SUCCESS_BODY,
    SUCCESS_SUBJECT,
    UNKNOWN_REQUESTER,
)
from app.domain.errors import NotificationError
from app.protocols.mailer import OutgoingEmail

if TYPE_CHECKING:
    from datetime import datetime

    from app.domain.configuration import Configuration
    from app.domain.credential import IssuedCredential
    from app.protocols.mailer import MailerProtocol

logger = logging.getLogger(__name__)

ALERT_TIME_FORMAT = "%Y/%m/%d %H:%M:%S %Z"


def _email_domain(address: str) -> str:
    return address.rsplit("@", 1)[-1]


class Notifier:
    """Monta e envia os e-mails de sucesso e de alerta."""

    def __init__(self, mailer: MailerProtocol) -> None:
        self._mailer = mailer

    def notify_success(
        self,
        identity: str,
        credential: IssuedCredential,
        config: Configuration,
    ) -> None:
        """Envia o token emitido ao solicitante.

        Raises:
            NotificationError: Se o transporte falhar.
        """
        body = SUCCESS_BODY.format(
            recipient_name=identity.split("@", 1)[0],
            token_name=credential.name,
            token_key=credential.secret_value,
            expires_at=credential.expires_at,
            disclosure=SECRET_DISCLOSURE_NOTICE,
        )
        message = OutgoingEmail(
            to=identity,
            subject=SUCCESS_SUBJECT,
            body=body,
            sender_address=config.email_from,
            sender_name=config.email_name,
        )
        try:
            self._mailer.send(message)
        except Exception as exc:
            logger.error(
                "success_email_failed",
                extra={
                    "recipient_domain": _email_domain(identity),
                    "error_type": type(exc).__name__,
                },
            )
            raise NotificationError(exc) from exc

        logger.info(
            "success_email_sent",
            extra={"recipient_domain": _email_domain(identity), "credential_name": credential.name},
        )

    def notify_failure(
        self,
        admin_address: str | None,
        error: BaseException,
        identity: str | None,
        row: int,
        *,
        occurred_at: datetime,
        location: str = "",
    ) -> bool:
        """Alerta o administrador sobre uma falha de processamento.

        Returns:
            True se o alerta foi enviado; False se não configurado ou
            se o envio falhou (falha apenas logada).
        """
        if not admin_address:
            logger.info("admin_alert_skipped", extra={"reason": "admin_email_not_configured", "row": row})
            return False

        body = FAILURE_BODY.format(
            occurred_at=occurred_at.strftime(ALERT_TIME_FORMAT),
            location=location or UNKNOWN_REQUESTER,
            row=row,
            requester=identity or UNKNOWN_REQUESTER,
            error_message=str(error),
            stack_trace="".join(traceback.format_exception(error)).rstrip(),
        )
        message = OutgoingEmail(to=admin_address, subject=FAILURE_SUBJECT, body=body)
        try:
            self._mailer.send(message)
        except Exception as exc:
            logger.error(
                "admin_alert_failed",
                extra={"row": row, "error_type": type(exc).__name__},
            )
            return False

        logger.info("admin_alert_sent", extra={"row": row})
        return True
