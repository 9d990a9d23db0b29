"""Mail: transportes concretos de e-mail."""

from app.infra.mail.smtp_mailer import SmtpMailer

__all__ = ["SmtpMailer"]
