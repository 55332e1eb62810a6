"""Port definition for the per-user inspection counter."""

from typing import Protocol

from domain.model.inspection import InspectionStats


class InspectionStatsRepository(Protocol):
    def increment(self, user_id: str, amount: int = 1) -> bool:
        """Add ``amount`` (may be negative) to the user's total. Return True on success."""
        ...

    def get(self, user_id: str) -> InspectionStats | None: ...
