"""Outgoing email delivery for inquiry notifications."""

import logging
from email.message import EmailMessage
import aiosmtplib

from flyeasy.app.config import Settings
from flyeasy.app.models import OutboundMessage, SendResult

logger = logging.getLogger(__name__)


class EmailSendError(Exception):
    """Exception raised when an email cannot be sent."""
    pass


class MailSender:
    """Anything that can deliver an OutboundMessage."""

    async def send(self, message: OutboundMessage) -> SendResult:
        raise NotImplementedError


def build_email(message: OutboundMessage) -> EmailMessage:
    """
    Convert an OutboundMessage into a MIME message with an HTML part.

    Raises:
        EmailSendError: If the sender or recipient is missing
    """
    if not message.from_ or not message.to:
        raise EmailSendError("Sender and recipient addresses are required")

    msg = EmailMessage()
    msg["From"] = message.from_
    msg["To"] = message.to
    msg["Subject"] = message.subject
    msg.set_content("This inquiry is best viewed in an HTML-capable mail client.")
    msg.add_alternative(message.html, subtype="html")
    return msg


class SmtpMailSender(MailSender):
    """Sends mail through the SMTP server described by Settings."""

    def __init__(self, settings: Settings):
        self.settings = settings

    async def send(self, message: OutboundMessage) -> SendResult:
        settings = self.settings
        try:
            msg = build_email(message)
            await aiosmtplib.send(
                msg,
                hostname=settings.smtp_host,
                port=settings.smtp_port,
                username=settings.email_user if settings.email_pass else None,
                password=settings.email_pass if settings.email_pass else None,
                use_tls=settings.smtp_secure,
                start_tls=False if settings.smtp_secure else None,
                timeout=settings.smtp_timeout,
            )
        except Exception as e:
            logger.error(f"Error sending email to {message.to}: {e}")
            return SendResult.failure(str(e))

        logger.info(f"Email sent successfully to {message.to}: {message.subject}")
        return SendResult.success()
