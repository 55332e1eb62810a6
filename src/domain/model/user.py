from dataclasses import dataclass
from datetime import datetime


ROLE_USER = 'user'
ROLE_ADMIN = 'admin'


def normalize_email(email: str) -> str:
    """Emails are unique case-insensitively; store and look them up lowercase."""
    return email.strip().lower()


@dataclass
class User:
    """Domain model representing a user."""
    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime
    last_login: datetime | None = None
    password_hash: str | None = None
    role: str = ROLE_USER

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN
