"""Email rendering and delivery for inquiry notifications."""

from .inquiry import render_subject, render_detailed_body, render_simplified_body
from .outgoing import EmailSendError, MailSender, SmtpMailSender

__all__ = [
    "render_subject",
    "render_detailed_body",
    "render_simplified_body",
    "EmailSendError",
    "MailSender",
    "SmtpMailSender",
]
