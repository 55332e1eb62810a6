"""Port definition for ResetTokenRepository."""

from typing import Protocol

from domain.model.reset_token import ResetToken


class ResetTokenRepository(Protocol):
    def create(self, reset_token: ResetToken) -> None: ...

    def consume(self, token: str) -> ResetToken | None:
        """Atomically remove and return the token record.

        At most one caller ever receives a given record; everyone else gets None.
        Expiry is not checked here.
        """
        ...

    def delete(self, token: str) -> bool: ...

    def count_for_user(self, user_id: str) -> int: ...
