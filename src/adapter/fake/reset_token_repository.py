"""In-memory implementation of ResetTokenRepository for testing."""

import threading

from domain.model.reset_token import ResetToken


class FakeResetTokenRepository:
    def __init__(self):
        self.store: dict[str, ResetToken] = {}
        self._lock = threading.Lock()

    def create(self, reset_token: ResetToken) -> None:
        with self._lock:
            self.store[reset_token.token] = reset_token

    def consume(self, token: str) -> ResetToken | None:
        with self._lock:
            return self.store.pop(token, None)

    def delete(self, token: str) -> bool:
        with self._lock:
            return self.store.pop(token, None) is not None

    def count_for_user(self, user_id: str) -> int:
        return sum(1 for t in self.store.values() if t.user_id == user_id)
