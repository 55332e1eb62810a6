"""Session credentials: signed, stateless JWTs carrying the user id."""

import logging
import os
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from domain.model.errors import AuthenticationError

logger = logging.getLogger(__name__)

JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY")
if not JWT_SECRET_KEY:
    raise ValueError(
        "JWT_SECRET_KEY environment variable is required. "
        "Generate a secure key with: openssl rand -hex 32"
    )
JWT_ALGORITHM = "HS256"
JWT_EXPIRATION_DAYS = 7
SESSION_MAX_AGE_SECONDS = JWT_EXPIRATION_DAYS * 24 * 60 * 60


def create_session_token(user_id: str, now: datetime | None = None) -> str:
    """Create a signed session token for user."""
    now = now or datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "iat": now,
        "exp": now + timedelta(days=JWT_EXPIRATION_DAYS),
    }
    return jwt.encode(payload, JWT_SECRET_KEY, algorithm=JWT_ALGORITHM)


def verify_session_token(token: str | None) -> str:
    """Verify a session token and return the user id it carries.

    Raises:
        AuthenticationError: token missing, malformed, badly signed, expired,
            or without a subject. The message never says which.
    """
    if not token:
        raise AuthenticationError("Authentication required")

    try:
        payload = jwt.decode(token, JWT_SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except JWTError as e:
        logger.debug(f"JWT verification failed: {e}")
        raise AuthenticationError("Authentication required") from e

    user_id = payload.get("sub")
    if not user_id:
        raise AuthenticationError("Authentication required")
    return user_id
