"""Authentication routes (register, login, logout, me).

The session token travels in the httpOnly ``token`` cookie.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from api.dependencies import get_user_repo
from api.models import AuthResponse, LoginRequest, MessageResponse, RegisterRequest, UserResponse
from api.security import clear_session_cookie, get_current_user_required, set_session_cookie
from domain.model.errors import DuplicateError, ValidationError
from domain.model.user import User
from port.user_repository import UserRepository
from services import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    response: Response,
    repo: UserRepository = Depends(get_user_repo),
):
    """Register a new user and start a session.

    Raises:
        HTTPException: 409 if email already exists, 400 if password is too weak
    """
    try:
        user = auth_service.register(repo, request.email, request.password, request.name)
    except DuplicateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    set_session_cookie(response, user.id)
    logger.info("User registered", extra={"userId": user.id})
    return AuthResponse(user=UserResponse.of(user))


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    response: Response,
    repo: UserRepository = Depends(get_user_repo),
):
    """Check credentials and set the session cookie.

    Raises:
        HTTPException: 401 if credentials are invalid
    """
    try:
        user = auth_service.authenticate(repo, request.email, request.password)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))

    set_session_cookie(response, user.id)
    logger.info("User logged in", extra={"userId": user.id})
    return AuthResponse(user=UserResponse.of(user))


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response):
    clear_session_cookie(response)
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: User = Depends(get_current_user_required)):
    return UserResponse.of(current_user)
