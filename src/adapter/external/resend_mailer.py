"""Resend email adapter.

Implements the Mailer port with the Resend SDK.
Configured through RESEND_API_KEY and MAIL_FROM.
"""

import logging
import os

import resend

from domain.model.errors import MailDeliveryError
from port.mailer import EmailMessage

logger = logging.getLogger(__name__)

DEFAULT_SENDER = '"Repospector" <no-reply@repospector.app>'


class ResendMailer:
    def __init__(self, api_key: str | None = None, sender: str | None = None):
        self.api_key = api_key if api_key is not None else os.getenv("RESEND_API_KEY")
        self.sender = sender or os.getenv("MAIL_FROM", DEFAULT_SENDER)

    def send(self, message: EmailMessage) -> None:
        if not self.api_key:
            logger.error("RESEND_API_KEY not configured, cannot send email")
            raise MailDeliveryError("Mail transport not configured")

        resend.api_key = self.api_key
        try:
            response = resend.Emails.send({
                "from": self.sender,
                "to": [message.to],
                "subject": message.subject,
                "html": message.html,
            })
        except Exception as e:
            # The SDK raises its own errors as well as raw transport errors
            logger.error("Email sending failed", extra={"to": message.to, "error": str(e)[:200]})
            raise MailDeliveryError("Failed to send email") from e

        logger.info("Email sent", extra={"to": message.to, "emailId": (response or {}).get("id")})
