"""Password reset service: issue and redeem single-use reset tokens.

Pure business logic with no HTTP dependencies.

Flow:
    initiate(email) → ResetToken stored → reset link mailed
    consume(token, new password) → token removed atomically → password replaced

Unknown emails get the same answer as known ones, so the endpoint cannot be
used to discover accounts.
"""

import html
import logging
import os

from email_validator import EmailNotValidError, validate_email

from domain.model.errors import InvalidResetTokenError, MailDeliveryError, ValidationError
from domain.model.reset_token import ResetToken
from domain.model.user import User, normalize_email
from port.mailer import EmailMessage, Mailer
from port.reset_token_repository import ResetTokenRepository
from port.user_repository import UserRepository
from services.auth_service import hash_password, validate_password

logger = logging.getLogger(__name__)

APP_URL = os.getenv("APP_URL", "http://localhost:3000")

GENERIC_RESET_MESSAGE = (
    "If an account exists with this email, you will receive a password reset link."
)
RESET_SUBJECT = "Password Reset Request"


def build_reset_url(token: str, app_url: str | None = None) -> str:
    base = (app_url or APP_URL).rstrip("/")
    return f"{base}/reset-password?token={token}"


def _render_reset_email(user: User, reset_url: str) -> str:
    name = html.escape(user.name)
    return (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">'
        '<h2 style="color: #834CFF;">Reset Your Password</h2>'
        f"<p>Hello {name},</p>"
        "<p>We received a request to reset your password. "
        "Click the button below to create a new password:</p>"
        f'<a href="{reset_url}" style="display: inline-block; background-color: #834CFF; '
        'color: white; padding: 12px 24px; text-decoration: none; border-radius: 4px; '
        'margin: 16px 0;">Reset Password</a>'
        "<p>This link will expire in 1 hour for security reasons.</p>"
        "<p>If you didn't request this, you can safely ignore this email.</p>"
        "<p>Best regards,<br>Repospector Team</p>"
        "</div>"
    )


def _parse_email(email: str) -> str:
    try:
        validated = validate_email(email.strip(), check_deliverability=False)
    except EmailNotValidError as e:
        raise ValidationError("Invalid email address") from e
    return normalize_email(validated.normalized)


def initiate(
    email: str,
    users: UserRepository,
    tokens: ResetTokenRepository,
    mailer: Mailer,
    app_url: str | None = None,
) -> str:
    """Start a password reset and return the message to show the caller.

    Raises:
        ValidationError: email is malformed (checked before any store access)
        MailDeliveryError: the link could not be sent; the token was removed
    """
    email = _parse_email(email)

    user = users.get_by_email(email)
    if not user:
        logger.info("Password reset requested for unknown email")
        return GENERIC_RESET_MESSAGE

    reset_token = ResetToken.issue(user.id)
    tokens.create(reset_token)

    reset_url = build_reset_url(reset_token.token, app_url)
    message = EmailMessage(
        to=user.email,
        subject=RESET_SUBJECT,
        html=_render_reset_email(user, reset_url),
    )

    try:
        mailer.send(message)
    except MailDeliveryError:
        # A token nobody received must not stay valid
        tokens.delete(reset_token.token)
        logger.error("Reset email not delivered, token revoked", extra={"userId": user.id})
        raise

    logger.info("Password reset email sent", extra={"userId": user.id})
    return GENERIC_RESET_MESSAGE


def consume(
    token: str,
    new_password: str,
    users: UserRepository,
    tokens: ResetTokenRepository,
) -> User:
    """Redeem a reset token and set a new password.

    The token record is removed in the same store operation that reads it, so
    it can validate at most once even under concurrent requests.

    Raises:
        ValidationError: new password too weak (token is left untouched)
        InvalidResetTokenError: token unknown, already used, expired, or orphaned
    """
    validate_password(new_password)

    if not token:
        raise InvalidResetTokenError()

    reset_token = tokens.consume(token)
    if reset_token is None:
        raise InvalidResetTokenError()

    if reset_token.is_expired():
        logger.info("Expired reset token presented", extra={"userId": reset_token.user_id})
        raise InvalidResetTokenError()

    user = users.get_by_id(reset_token.user_id)
    if not user or not users.update_password(user.id, hash_password(new_password)):
        logger.warning("Reset token refers to missing user", extra={"userId": reset_token.user_id})
        raise InvalidResetTokenError()

    logger.info("Password reset completed", extra={"userId": user.id})
    return user
