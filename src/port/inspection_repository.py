"""Port definition for InspectionRepository.

Every single-record operation takes the owner id and matches on both
``id`` and ``user_id``. A record owned by someone else behaves exactly
like a missing one.
"""

from typing import Protocol

from domain.model.inspection import Inspection


class InspectionRepository(Protocol):
    def save(self, inspection: Inspection) -> None: ...

    def get_for_owner(self, inspection_id: str, user_id: str) -> Inspection | None: ...

    def update_for_owner(
        self,
        inspection_id: str,
        user_id: str,
        changes: dict,
    ) -> Inspection | None: ...

    def delete_for_owner(self, inspection_id: str, user_id: str) -> Inspection | None: ...

    def find_by_owner(self, user_id: str) -> list[Inspection]: ...
