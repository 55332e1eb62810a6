from typing import Protocol
from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access.

    Emails are passed already normalized (see domain.model.user.normalize_email).
    """
    def create(self, email: str, password_hash: str, name: str) -> User | None:
        """Create a new user. Return User or None if the email is taken."""
        ...

    def get_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        ...

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...

    def update_last_login(self, user_id: str) -> bool:
        """Update the last login timestamp for a user. Return True if successful."""
        ...

    def update_password(self, user_id: str, password_hash: str) -> bool:
        """Replace the password hash. Return False if the user does not exist."""
        ...
