"""Password reset routes.

- POST /api/forgot-password: email a single-use reset link
- POST /api/reset-password: redeem the link's token and set a new password

Flow:
    Client → POST /api/forgot-password {email} → generic message
    User clicks {APP_URL}/reset-password?token=... in the email
    Client → POST /api/reset-password {token, password} → password replaced
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_mailer, get_reset_token_repo, get_user_repo
from api.models import ForgotPasswordRequest, MessageResponse, ResetPasswordRequest
from domain.model.errors import (
    InvalidResetTokenError, MailDeliveryError, RepositoryError, ValidationError,
)
from port.mailer import Mailer
from port.reset_token_repository import ResetTokenRepository
from port.user_repository import UserRepository
from services import password_reset_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["password"])


@router.post("/forgot-password", response_model=MessageResponse)
async def forgot_password(
    request: ForgotPasswordRequest,
    users: UserRepository = Depends(get_user_repo),
    tokens: ResetTokenRepository = Depends(get_reset_token_repo),
    mailer: Mailer = Depends(get_mailer),
):
    """Send a reset link. The answer is the same whether or not the account exists."""
    try:
        message = password_reset_service.initiate(request.email, users, tokens, mailer)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except MailDeliveryError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to send reset email. Please try again later.",
        )
    except RepositoryError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error processing password reset request",
        )

    return MessageResponse(message=message)


@router.post("/reset-password", response_model=MessageResponse)
async def reset_password(
    request: ResetPasswordRequest,
    users: UserRepository = Depends(get_user_repo),
    tokens: ResetTokenRepository = Depends(get_reset_token_repo),
):
    """Set a new password using a reset token."""
    try:
        password_reset_service.consume(request.token, request.password, users, tokens)
    except (ValidationError, InvalidResetTokenError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except RepositoryError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error processing password reset request",
        )

    return MessageResponse(message="Password has been reset successfully")
