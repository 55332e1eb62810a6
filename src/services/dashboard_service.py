"""Dashboard service: filtered inspection summaries and confirmed deletes."""

import logging
from dataclasses import dataclass
from datetime import datetime

from domain.model.dashboard import (
    DashboardFilters, DeleteConfirmation, InspectionSummary, apply_filters,
)
from domain.model.user import User
from port.inspection_repository import InspectionRepository
from port.inspection_stats_repository import InspectionStatsRepository
from services.inspection_service import delete_inspection, list_inspections

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardView:
    filters: DashboardFilters
    inspections: list[InspectionSummary]
    viewing_user_id: str
    is_foreign: bool = False  # an admin looking at another user's inspections
    pending_delete: str | None = None


def build_dashboard(
    caller: User,
    repo: InspectionRepository,
    filters: DashboardFilters,
    user_id: str | None = None,
    confirmation: DeleteConfirmation | None = None,
    now: datetime | None = None,
) -> DashboardView:
    """Fetch once, then filter and sort in memory.

    Raises:
        PermissionDeniedError: a non-admin asked for another user's dashboard
    """
    inspections = list_inspections(caller, repo, user_id=user_id)
    visible = apply_filters(inspections, filters, now=now)
    return DashboardView(
        filters=filters,
        inspections=[InspectionSummary.of(i) for i in visible],
        viewing_user_id=user_id or caller.id,
        is_foreign=bool(user_id) and user_id != caller.id,
        pending_delete=confirmation.candidate if confirmation else None,
    )


def confirm_delete(
    confirmation: DeleteConfirmation,
    caller: User,
    repo: InspectionRepository,
    stats: InspectionStatsRepository,
) -> tuple[str, DeleteConfirmation]:
    """Delete the marked inspection.

    Returns the deleted id and the cleared confirmation state.

    Raises:
        ValidationError: nothing is marked for deletion
        NotFoundError: the marked inspection is gone or not the caller's
    """
    inspection_id, cleared = confirmation.confirm()
    delete_inspection(inspection_id, caller.id, repo, stats)
    logger.info("Dashboard delete confirmed", extra={"inspectionId": inspection_id, "userId": caller.id})
    return inspection_id, cleared
