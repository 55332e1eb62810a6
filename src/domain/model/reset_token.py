"""Password reset token domain model."""

import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from domain.model.timestamps import as_utc

RESET_TOKEN_TTL = timedelta(hours=1)
RESET_TOKEN_BYTES = 32


@dataclass(frozen=True)
class ResetToken:
    """Single-use secret authorizing one password change.

    Validity is implied by ``created_at``: the token may be consumed until
    ``created_at + RESET_TOKEN_TTL``. Expired tokens are not swept; they are
    rejected (and discarded) when someone tries to consume them.
    """
    token: str
    user_id: str
    created_at: datetime

    @staticmethod
    def issue(user_id: str, now: datetime | None = None) -> 'ResetToken':
        """Create a fresh 256-bit hex token for ``user_id``."""
        return ResetToken(
            token=secrets.token_hex(RESET_TOKEN_BYTES),
            user_id=user_id,
            created_at=now or datetime.now(timezone.utc),
        )

    @property
    def expires_at(self) -> datetime:
        return as_utc(self.created_at) + RESET_TOKEN_TTL

    def is_expired(self, now: datetime | None = None) -> bool:
        now = now or datetime.now(timezone.utc)
        return as_utc(now) >= self.expires_at
