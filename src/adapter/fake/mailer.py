"""In-memory Mailer that records messages instead of sending them."""

from domain.model.errors import MailDeliveryError
from port.mailer import EmailMessage


class FakeMailer:
    def __init__(self, fail: bool = False):
        self.sent: list[EmailMessage] = []
        self.attempts = 0
        self.fail = fail

    def send(self, message: EmailMessage) -> None:
        self.attempts += 1
        if self.fail:
            raise MailDeliveryError("Fake mail transport is down")
        self.sent.append(message)
