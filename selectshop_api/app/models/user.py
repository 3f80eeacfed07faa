"""
models/user.py
--------------
Domain model for registered users.
"""

import sqlite3
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class UserRole(str, Enum):
    """Authorization level.  ``USER`` sees only its own data."""

    USER = "USER"
    ADMIN = "ADMIN"


@dataclass
class User:
    """
    Represents a registered account.

    Attributes:
        id: Database primary key.
        username: Unique login name.
        email: Unique e-mail address.
        role: ``UserRole.USER`` or ``UserRole.ADMIN``.
        password: PBKDF2 hash as stored; never serialised to clients.
    """
    id: int
    username: str
    email: str
    role: UserRole = UserRole.USER
    password: Optional[str] = None

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "User":
        return cls(
            id=row["id"],
            username=row["username"],
            email=row["email"],
            role=UserRole(row["role"]),
            password=row["password"],
        )
