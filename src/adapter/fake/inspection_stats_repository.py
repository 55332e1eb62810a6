"""In-memory implementation of InspectionStatsRepository for testing."""

from domain.model.inspection import InspectionStats


class FakeInspectionStatsRepository:
    def __init__(self):
        self.store: dict[str, InspectionStats] = {}
        self.fail_writes = False

    def increment(self, user_id: str, amount: int = 1) -> bool:
        if self.fail_writes:
            return False

        stats = self.store.get(user_id)
        if stats is None:
            if amount <= 0:
                return False
            stats = self.store[user_id] = InspectionStats(user_id=user_id)
        stats.total_inspections += amount
        return True

    def get(self, user_id: str) -> InspectionStats | None:
        return self.store.get(user_id)
