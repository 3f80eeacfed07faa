"""
Business logic for users.

Handles signup (with the admin‑token gate for the ADMIN role) and
credential checks.  Passwords are stored as PBKDF2 hashes from
``core.security``.
"""

import logging
import sqlite3
from typing import Optional

from ..core.config import settings
from ..core.db import transaction, get_cursor
from ..core.exceptions import AuthorizationError, DuplicateError
from ..core.messages import ErrorCode
from ..core.security import hash_password, verify_password
from ..models import User, UserRole
from ..repositories import UserRepository
from ..schemas.user import SignupRequest, UserRead


class UserService:
    """Service for registering and authenticating users."""

    @classmethod
    async def signup(cls, data: SignupRequest) -> UserRead:
        """Register a new user.

        Raises ``DuplicateError`` when the username or e‑mail is taken
        and ``AuthorizationError`` when ``admin`` is requested with a
        wrong (or unconfigured) admin token.
        """
        logger = logging.getLogger(__name__)
        role = UserRole.USER
        if data.admin:
            if not settings.admin_token or data.admin_token != settings.admin_token:
                raise AuthorizationError(ErrorCode.INVALID_ADMIN_TOKEN)
            role = UserRole.ADMIN

        with transaction() as conn:
            users = UserRepository(conn)
            if users.find_by_username(data.username) is not None:
                raise DuplicateError(ErrorCode.DUPLICATE_USERNAME, username=data.username)
            if users.find_by_email(data.email) is not None:
                raise DuplicateError(ErrorCode.DUPLICATE_EMAIL, email=data.email)
            try:
                user = users.save(data.username, data.email, hash_password(data.password), role)
            except sqlite3.IntegrityError as exc:
                raise DuplicateError(ErrorCode.DUPLICATE_USERNAME, username=data.username) from exc
        logger.info("Registered user %s with role %s", user.username, role.value)
        return UserRead.from_model(user)

    @classmethod
    async def authenticate(cls, username: str, password: str) -> Optional[User]:
        """Return the user when the credentials match, otherwise ``None``."""
        with get_cursor() as cursor:
            user = UserRepository(cursor).find_by_username(username)
        if user is None or not user.password or not verify_password(password, user.password):
            return None
        return user
