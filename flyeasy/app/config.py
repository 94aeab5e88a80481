"""Process-wide settings for the inquiry relay, read once at startup."""

import os
import logging
from typing import Dict, Any, Optional
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGIN = "https://flyeasywebsite.netlify.app"

# Well-known providers, so a deployment can set SMTP_SERVICE=gmail instead of
# spelling out host and port.
SMTP_SERVICES: Dict[str, Dict[str, Any]] = {
    "gmail": {"host": "smtp.gmail.com", "port": 465, "secure": True},
    "outlook": {"host": "smtp-mail.outlook.com", "port": 587, "secure": False},
    "yahoo": {"host": "smtp.mail.yahoo.com", "port": 465, "secure": True},
}


class Settings(BaseModel):
    """SMTP, recipient and HTTP boundary configuration."""
    email_user: str = ""
    email_pass: str = ""
    recipient_email: str = ""
    smtp_host: str = "localhost"
    smtp_port: int = 587
    smtp_secure: bool = False
    smtp_timeout: float = 30.0
    cors_origin: str = DEFAULT_CORS_ORIGIN
    port: int = 3000

    @property
    def sender(self) -> str:
        return self.email_user

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Settings":
        """Build settings from environment variables, after loading a .env file.

        Variables already set in the process environment win over the file.
        Without ``env_file`` the nearest .env from the working directory is used.
        """
        load_dotenv(env_file or find_dotenv(usecwd=True))
        service = os.getenv("SMTP_SERVICE", "").strip().lower()
        if service:
            if service not in SMTP_SERVICES:
                raise ValueError(f"Unknown SMTP_SERVICE: {service}")
            preset = SMTP_SERVICES[service]
            host, port, secure = preset["host"], preset["port"], preset["secure"]
        else:
            host = os.getenv("SMTP_HOST", "localhost")
            port = int(os.getenv("SMTP_PORT", "587"))
            secure = _parse_bool(os.getenv("SMTP_SECURE", "false"))

        settings = cls(
            email_user=os.getenv("EMAIL_USER", ""),
            email_pass=os.getenv("EMAIL_PASS", ""),
            recipient_email=os.getenv("RECIPIENT_EMAIL", ""),
            smtp_host=host,
            smtp_port=port,
            smtp_secure=secure,
            smtp_timeout=float(os.getenv("SMTP_TIMEOUT", "30")),
            cors_origin=os.getenv("CORS_ORIGIN", DEFAULT_CORS_ORIGIN),
            port=int(os.getenv("PORT", "3000")),
        )

        if not settings.email_user or not settings.recipient_email:
            logger.warning("EMAIL_USER or RECIPIENT_EMAIL is not set; inquiries will fail to send")
        return settings


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")
