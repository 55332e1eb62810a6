"""Inspection service: owner-scoped inspection CRUD.

Pure business logic with no HTTP dependencies.

Every single-record operation is scoped by (inspection id, caller id). An
inspection owned by someone else raises the same NotFoundError as one that
does not exist.
"""

import logging

from domain.model.errors import NotFoundError, PermissionDeniedError
from domain.model.inspection import Inspection, InspectionDetails
from domain.model.user import User
from port.inspection_repository import InspectionRepository
from port.inspection_stats_repository import InspectionStatsRepository

logger = logging.getLogger(__name__)


def create_inspection(
    details: InspectionDetails,
    owner_id: str,
    repo: InspectionRepository,
    stats: InspectionStatsRepository,
) -> Inspection:
    inspection = Inspection.create(details, user_id=owner_id)
    repo.save(inspection)

    if not stats.increment(owner_id, 1):
        logger.warning("Inspection counter not incremented", extra={
            "userId": owner_id, "inspectionId": inspection.id,
        })

    logger.info("Inspection created", extra={"inspectionId": inspection.id, "userId": owner_id})
    return inspection


def list_inspections(
    caller: User,
    repo: InspectionRepository,
    user_id: str | None = None,
) -> list[Inspection]:
    """List the caller's inspections, or another user's for admins.

    Raises:
        PermissionDeniedError: a non-admin asked for someone else's list
    """
    target = user_id or caller.id
    if target != caller.id and not caller.is_admin:
        logger.warning("Non-admin requested foreign inspection list", extra={
            "userId": caller.id, "targetUserId": target,
        })
        raise PermissionDeniedError("Not authorized to view these inspections")
    return repo.find_by_owner(target)


def get_inspection(inspection_id: str, caller_id: str, repo: InspectionRepository) -> Inspection:
    """Raises NotFoundError when missing or owned by another user."""
    inspection = repo.get_for_owner(inspection_id, caller_id)
    if not inspection:
        raise NotFoundError("Inspection not found")
    return inspection


def update_inspection(
    inspection_id: str,
    caller_id: str,
    changes: dict,
    repo: InspectionRepository,
) -> Inspection:
    """Apply a partial update and return the updated inspection.

    Raises NotFoundError when missing or owned by another user.
    """
    inspection = repo.update_for_owner(inspection_id, caller_id, changes)
    if not inspection:
        raise NotFoundError("Inspection not found")

    logger.info("Inspection updated", extra={
        "inspectionId": inspection_id, "userId": caller_id, "fields": sorted(changes),
    })
    return inspection


def delete_inspection(
    inspection_id: str,
    caller_id: str,
    repo: InspectionRepository,
    stats: InspectionStatsRepository,
) -> Inspection:
    """Delete an inspection and decrement the owner's counter.

    The decrement is a separate, best-effort write. If it fails the delete
    still stands and the counter is left one too high.

    Raises NotFoundError when missing or owned by another user.
    """
    inspection = repo.delete_for_owner(inspection_id, caller_id)
    if not inspection:
        raise NotFoundError("Inspection not found")

    if not stats.increment(caller_id, -1):
        logger.warning("Inspection counter drift: decrement failed after delete", extra={
            "userId": caller_id, "inspectionId": inspection_id,
        })

    logger.info("Inspection deleted", extra={"inspectionId": inspection_id, "userId": caller_id})
    return inspection
