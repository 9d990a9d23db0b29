"""Transporte SMTP do MailerProtocol.

Envia texto simples UTF-8. O remetente de cada mensagem pode sobrescrever
o remetente padrão (SUCCESS_EMAIL_FROM / SUCCESS_EMAIL_NAME); o envelope
SMTP usa sempre o mesmo endereço do cabeçalho From.
"""

from __future__ import annotations

import logging
import smtplib
from email.mime.text import MIMEText
from email.utils import formataddr, make_msgid
from typing import TYPE_CHECKING

from app.protocols.mailer import MailDeliveryError

if TYPE_CHECKING:
    from app.protocols.mailer import OutgoingEmail
    from config.settings import EmailSettings

logger = logging.getLogger(__name__)


class SmtpMailer:
    """Implementa MailerProtocol sobre smtplib.

    Args:
        settings: EmailSettings com host, porta, credenciais e remetente padrão
    """

    def __init__(self, settings: EmailSettings) -> None:
        self._settings = settings

    def build_message(self, message: OutgoingEmail) -> MIMEText:
        """Monta a mensagem MIME com cabeçalhos codificados."""
        sender = message.sender_address or self._settings.default_from
        mime = MIMEText(message.body, "plain", "utf-8")
        mime["Subject"] = message.subject
        mime["From"] = formataddr((message.sender_name, sender)) if message.sender_name else sender
        mime["To"] = message.to
        mime["Message-ID"] = make_msgid()
        return mime

    def send(self, message: OutgoingEmail) -> None:
        """Envia a mensagem.

        Raises:
            MailDeliveryError: Falha de conexão, autenticação ou recusa.
        """
        settings = self._settings
        sender = message.sender_address or settings.default_from
        mime = self.build_message(message)
        try:
            with smtplib.SMTP(
                settings.smtp_host,
                settings.smtp_port,
                timeout=settings.request_timeout_seconds,
            ) as server:
                if settings.smtp_use_tls:
                    server.starttls()
                if settings.smtp_username:
                    server.login(settings.smtp_username, settings.smtp_password)
                server.sendmail(sender, [message.to], mime.as_string())
        except (smtplib.SMTPException, OSError) as exc:
            logger.error(
                "smtp_send_failed",
                extra={
                    "smtp_host": settings.smtp_host,
                    "recipient_domain": message.to.rsplit("@", 1)[-1],
                    "error_type": type(exc).__name__,
                },
            )
            raise MailDeliveryError(f"{type(exc).__name__}: {exc}") from exc

        logger.debug(
            "smtp_message_sent",
            extra={"smtp_host": settings.smtp_host, "recipient_domain": message.to.rsplit("@", 1)[-1]},
        )
