"""Inspection API routes.

- GET /api/inspections: List the caller's inspections (admins may pass ?userId=)
- POST /api/inspections: Create an inspection
- GET /api/inspections/{id}: Get one inspection
- PUT /api/inspections/{id}: Partially update an inspection
- DELETE /api/inspections/{id}: Delete an inspection

Single-record routes answer 404 both for missing inspections and for
inspections owned by someone else.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from api.dependencies import get_inspection_repo, get_inspection_stats_repo
from api.models import InspectionCreate, InspectionResponse, InspectionUpdate, MessageResponse
from api.security import get_current_user_required
from domain.model.errors import NotFoundError, PermissionDeniedError, RepositoryError
from domain.model.user import User
from port.inspection_repository import InspectionRepository
from port.inspection_stats_repository import InspectionStatsRepository
from services import inspection_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/inspections", tags=["inspections"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Inspection not found")


def _failed(action: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action} inspection",
    )


@router.get("", response_model=list[InspectionResponse])
async def list_inspections(
    user_id: str | None = Query(None, alias="userId"),
    current_user: User = Depends(get_current_user_required),
    repo: InspectionRepository = Depends(get_inspection_repo),
):
    try:
        inspections = inspection_service.list_inspections(current_user, repo, user_id=user_id)
    except PermissionDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except RepositoryError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch inspections",
        )
    return [InspectionResponse.of(i) for i in inspections]


@router.post("", response_model=InspectionResponse, status_code=status.HTTP_201_CREATED)
async def create_inspection(
    request: InspectionCreate,
    current_user: User = Depends(get_current_user_required),
    repo: InspectionRepository = Depends(get_inspection_repo),
    stats: InspectionStatsRepository = Depends(get_inspection_stats_repo),
):
    try:
        inspection = inspection_service.create_inspection(
            request.to_details(), current_user.id, repo, stats,
        )
    except RepositoryError:
        raise _failed("create")
    return InspectionResponse.of(inspection)


@router.get("/{inspection_id}", response_model=InspectionResponse)
async def get_inspection(
    inspection_id: str,
    current_user: User = Depends(get_current_user_required),
    repo: InspectionRepository = Depends(get_inspection_repo),
):
    try:
        inspection = inspection_service.get_inspection(inspection_id, current_user.id, repo)
    except NotFoundError:
        raise _not_found()
    except RepositoryError:
        raise _failed("fetch")
    return InspectionResponse.of(inspection)


@router.put("/{inspection_id}", response_model=InspectionResponse)
async def update_inspection(
    inspection_id: str,
    request: InspectionUpdate,
    current_user: User = Depends(get_current_user_required),
    repo: InspectionRepository = Depends(get_inspection_repo),
):
    try:
        inspection = inspection_service.update_inspection(
            inspection_id, current_user.id, request.to_changes(), repo,
        )
    except NotFoundError:
        raise _not_found()
    except RepositoryError:
        raise _failed("update")
    return InspectionResponse.of(inspection)


@router.delete("/{inspection_id}", response_model=MessageResponse)
async def delete_inspection(
    inspection_id: str,
    current_user: User = Depends(get_current_user_required),
    repo: InspectionRepository = Depends(get_inspection_repo),
    stats: InspectionStatsRepository = Depends(get_inspection_stats_repo),
):
    try:
        inspection_service.delete_inspection(inspection_id, current_user.id, repo, stats)
    except NotFoundError:
        raise _not_found()
    except RepositoryError:
        raise _failed("delete")
    return MessageResponse(message="Inspection deleted successfully")
