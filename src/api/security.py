"""Session cookie handling and authentication dependencies."""

import logging
import os
from typing import Optional

from fastapi import Depends, HTTPException, Response, status
from fastapi.security import APIKeyCookie, HTTPAuthorizationCredentials, HTTPBearer

from api.dependencies import get_user_repo
from domain.model.errors import AuthenticationError
from domain.model.user import User
from port.user_repository import UserRepository
from services.session_service import (
    SESSION_MAX_AGE_SECONDS, create_session_token, verify_session_token,
)

logger = logging.getLogger(__name__)

SESSION_COOKIE_NAME = "token"
COOKIE_SECURE = os.getenv("COOKIE_SECURE", "true").lower() != "false"

session_cookie = APIKeyCookie(name=SESSION_COOKIE_NAME, auto_error=False)
bearer = HTTPBearer(auto_error=False)


def _unauthorized() -> HTTPException:
    # One response for every failure: missing, forged, expired, or unknown user
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Authentication required",
        headers={"WWW-Authenticate": "Bearer"},
    )


def set_session_cookie(response: Response, user_id: str) -> None:
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=create_session_token(user_id),
        max_age=SESSION_MAX_AGE_SECONDS,
        httponly=True,
        secure=COOKIE_SECURE,
        samesite="lax",
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(key=SESSION_COOKIE_NAME, path="/")


def get_current_user_required(
    cookie_token: Optional[str] = Depends(session_cookie),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    user_repo: UserRepository = Depends(get_user_repo),
) -> User:
    """Get current authenticated user (required). Raises 401 if not authenticated.

    The ``token`` cookie wins over an Authorization header when both are sent.
    """
    token = cookie_token or (credentials.credentials if credentials else None)
    try:
        user_id = verify_session_token(token)
    except AuthenticationError:
        raise _unauthorized()

    user = user_repo.get_by_id(user_id)
    if not user:
        logger.info("Session refers to unknown user", extra={"userId": user_id})
        raise _unauthorized()
    return user
