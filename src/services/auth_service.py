"""Auth service: registration and authentication business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import re

import bcrypt

from domain.model.errors import DuplicateError, ValidationError
from domain.model.user import User, normalize_email
from port.user_repository import UserRepository

BCRYPT_ROUNDS = 12


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))


def validate_password(password: str) -> None:
    if len(password) < 8:
        raise ValidationError("Password must be at least 8 characters")
    if not re.search(r"[A-Z]", password):
        raise ValidationError("Password must contain at least one uppercase letter")
    if not re.search(r"[a-z]", password):
        raise ValidationError("Password must contain at least one lowercase letter")
    if not re.search(r"[0-9]", password):
        raise ValidationError("Password must contain at least one number")


def register(repo: UserRepository, email: str, password: str, name: str) -> User:
    """Register a new user.

    Returns the created User domain object.

    Raises:
        DuplicateError: email already registered
        ValidationError: password does not meet strength requirements
    """
    email = normalize_email(email)
    if repo.get_by_email(email):
        raise DuplicateError("Email already registered")

    validate_password(password)

    user = repo.create(email=email, password_hash=hash_password(password), name=name.strip())
    if not user:
        # Lost a race with a concurrent registration of the same address
        raise DuplicateError("Email already registered")
    return user


def authenticate(repo: UserRepository, email: str, password: str) -> User:
    """Authenticate a user by email and password.

    Doesn't reveal whether the email exists.

    Raises:
        ValidationError: invalid credentials (deliberately vague)
    """
    user = repo.get_by_email(normalize_email(email))
    if not user or not user.password_hash or not verify_password(password, user.password_hash):
        raise ValidationError("Invalid email or password")

    # Login succeeds even if the timestamp update fails
    repo.update_last_login(user.id)
    return user
