"""In-memory implementation of InspectionRepository for testing."""

import copy

from domain.model.inspection import Inspection


class FakeInspectionRepository:
    def __init__(self):
        self.store: dict[str, Inspection] = {}

    # ── write operations ─────────────────────────────────────

    def save(self, inspection: Inspection) -> None:
        self.store[inspection.id] = copy.deepcopy(inspection)

    def update_for_owner(self, inspection_id: str, user_id: str, changes: dict) -> Inspection | None:
        inspection = self._owned(inspection_id, user_id)
        if not inspection:
            return None

        inspection.apply_patch(changes)
        return copy.deepcopy(inspection)

    def delete_for_owner(self, inspection_id: str, user_id: str) -> Inspection | None:
        if not self._owned(inspection_id, user_id):
            return None
        return self.store.pop(inspection_id)

    # ── read operations ──────────────────────────────────────

    def get_for_owner(self, inspection_id: str, user_id: str) -> Inspection | None:
        inspection = self._owned(inspection_id, user_id)
        return copy.deepcopy(inspection) if inspection else None

    def find_by_owner(self, user_id: str) -> list[Inspection]:
        owned = [copy.deepcopy(i) for i in self.store.values() if i.is_owned_by(user_id)]
        owned.sort(key=lambda i: i.date, reverse=True)
        return owned

    def _owned(self, inspection_id: str, user_id: str) -> Inspection | None:
        inspection = self.store.get(inspection_id)
        if inspection and inspection.is_owned_by(user_id):
            return inspection
        return None
