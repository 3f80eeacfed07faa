"""
repositories/folder_repository.py
---------------------------------
Data access layer for folders.
"""

from typing import Iterable, List, Optional

from .base import Executor
from ..models import Folder


class FolderRepository:
    """Repository for the folders table."""

    def __init__(self, db: Executor) -> None:
        self.db = db

    def save(self, name: str, user_id: int) -> Folder:
        cursor = self.db.execute(
            "INSERT INTO folders (name, user_id) VALUES (?, ?)",
            (name, user_id),
        )
        return Folder(id=cursor.lastrowid, name=name, user_id=user_id)

    def find_by_id(self, folder_id: int) -> Optional[Folder]:
        row = self.db.execute(
            "SELECT id, name, user_id FROM folders WHERE id = ?", (folder_id,)
        ).fetchone()
        return Folder.from_row(row) if row else None

    def find_all_by_user(self, user_id: int) -> List[Folder]:
        rows = self.db.execute(
            "SELECT id, name, user_id FROM folders WHERE user_id = ? ORDER BY id",
            (user_id,),
        ).fetchall()
        return [Folder.from_row(row) for row in rows]

    def find_all_by_user_and_names(self, user_id: int, names: Iterable[str]) -> List[Folder]:
        names = list(names)
        if not names:
            return []
        placeholders = ", ".join("?" for _ in names)
        rows = self.db.execute(
            f"SELECT id, name, user_id FROM folders WHERE user_id = ? AND name IN ({placeholders}) ORDER BY id",
            (user_id, *names),
        ).fetchall()
        return [Folder.from_row(row) for row in rows]
