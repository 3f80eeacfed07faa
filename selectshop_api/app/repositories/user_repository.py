"""
repositories/user_repository.py
-------------------------------
Data access layer for user records.
"""

from typing import Optional

from .base import Executor
from ..models import User, UserRole

_COLUMNS = "id, username, email, password, role"


class UserRepository:
    """Repository for CRUD operations on the users table."""

    def __init__(self, db: Executor) -> None:
        self.db = db

    def save(self, username: str, email: str, password: str, role: UserRole) -> User:
        cursor = self.db.execute(
            "INSERT INTO users (username, email, password, role) VALUES (?, ?, ?, ?)",
            (username, email, password, role.value),
        )
        return User(id=cursor.lastrowid, username=username, email=email, role=role, password=password)

    def find_by_username(self, username: str) -> Optional[User]:
        row = self.db.execute(f"SELECT {_COLUMNS} FROM users WHERE username = ?", (username,)).fetchone()
        return User.from_row(row) if row else None

    def find_by_email(self, email: str) -> Optional[User]:
        row = self.db.execute(f"SELECT {_COLUMNS} FROM users WHERE email = ?", (email,)).fetchone()
        return User.from_row(row) if row else None
