"""Dashboard routes.

- GET /api/dashboard: filtered, sorted inspection summaries
- POST /api/dashboard/pending-delete: mark an inspection for deletion
- DELETE /api/dashboard/pending-delete: cancel the pending deletion
- POST /api/dashboard/pending-delete/confirm: delete the marked inspection

The pending candidate is kept in a short-lived ``pending_delete`` cookie, so
nothing about it is stored server-side.
"""

import logging

from fastapi import APIRouter, Cookie, Depends, HTTPException, Query, Response, status

from api.dependencies import get_inspection_repo, get_inspection_stats_repo
from api.models import (
    DashboardResponse, FiltersModel, InspectionSummaryResponse, MessageResponse,
    PendingDeleteRequest,
)
from api.security import COOKIE_SECURE, get_current_user_required
from domain.model.dashboard import (
    ALL_REPORT_TYPES, DashboardFilters, DateRange, DeleteConfirmation, SortOrder,
)
from domain.model.errors import (
    NotFoundError, PermissionDeniedError, RepositoryError, ValidationError,
)
from domain.model.user import User
from port.inspection_repository import InspectionRepository
from port.inspection_stats_repository import InspectionStatsRepository
from services import dashboard_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])

PENDING_DELETE_COOKIE = "pending_delete"
PENDING_DELETE_MAX_AGE = 5 * 60


def _set_pending(response: Response, confirmation: DeleteConfirmation) -> None:
    if confirmation.is_pending:
        response.set_cookie(
            key=PENDING_DELETE_COOKIE,
            value=confirmation.candidate,
            max_age=PENDING_DELETE_MAX_AGE,
            httponly=True,
            secure=COOKIE_SECURE,
            samesite="strict",
            path="/api/dashboard",
        )
    else:
        response.delete_cookie(key=PENDING_DELETE_COOKIE, path="/api/dashboard")


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    date_range: str = Query(DateRange.ALL.value, alias="dateRange"),
    report_type: str = Query(ALL_REPORT_TYPES, alias="reportType"),
    sort_by: str = Query(SortOrder.NEWEST.value, alias="sortBy"),
    user_id: str | None = Query(None, alias="userId"),
    pending_delete: str | None = Cookie(None),
    current_user: User = Depends(get_current_user_required),
    repo: InspectionRepository = Depends(get_inspection_repo),
):
    try:
        filters = DashboardFilters.parse(date_range, report_type, sort_by)
        view = dashboard_service.build_dashboard(
            current_user, repo, filters,
            user_id=user_id,
            confirmation=DeleteConfirmation(candidate=pending_delete or None),
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PermissionDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except RepositoryError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch inspections",
        )

    return DashboardResponse(
        filters=FiltersModel.of(view.filters),
        inspections=[
            InspectionSummaryResponse(
                id=s.id,
                date=s.date,
                project_name=s.project_name,
                address=s.address,
                report_type=s.report_type,
            )
            for s in view.inspections
        ],
        user_id=view.viewing_user_id,
        is_foreign=view.is_foreign,
        pending_delete=view.pending_delete,
    )


@router.post("/pending-delete", response_model=MessageResponse)
async def mark_for_deletion(
    request: PendingDeleteRequest,
    response: Response,
    current_user: User = Depends(get_current_user_required),
):
    confirmation = DeleteConfirmation().mark(request.inspection_id)
    _set_pending(response, confirmation)
    logger.debug("Inspection marked for deletion", extra={
        "inspectionId": request.inspection_id, "userId": current_user.id,
    })
    return MessageResponse(
        message="Are you sure you want to delete this inspection? This action cannot be undone."
    )


@router.delete("/pending-delete", response_model=MessageResponse)
async def cancel_deletion(
    response: Response,
    current_user: User = Depends(get_current_user_required),
):
    _set_pending(response, DeleteConfirmation().cancel())
    return MessageResponse(message="Deletion cancelled")


@router.post("/pending-delete/confirm", response_model=MessageResponse)
async def confirm_deletion(
    response: Response,
    pending_delete: str | None = Cookie(None),
    current_user: User = Depends(get_current_user_required),
    repo: InspectionRepository = Depends(get_inspection_repo),
    stats: InspectionStatsRepository = Depends(get_inspection_stats_repo),
):
    confirmation = DeleteConfirmation(candidate=pending_delete or None)
    try:
        _, cleared = dashboard_service.confirm_delete(confirmation, current_user, repo, stats)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Inspection not found")
    except RepositoryError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete inspection",
        )

    _set_pending(response, cleared)
    return MessageResponse(message="Inspection deleted successfully")
