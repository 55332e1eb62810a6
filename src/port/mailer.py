"""Port definition for outbound email."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class EmailMessage:
    to: str
    subject: str
    html: str


class Mailer(Protocol):
    def send(self, message: EmailMessage) -> None:
        """Deliver one message.

        Raises:
            MailDeliveryError: the transport failed or is not configured
        """
        ...
