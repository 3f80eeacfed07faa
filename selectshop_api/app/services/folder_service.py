"""
Business logic for folders.

Folder names are unique per user and must not be blank.  ``add_folders``
creates a batch of folders atomically: any blank name, clash with an
existing folder or repeated name rejects the whole batch.
"""

import logging
import sqlite3
from typing import List

from ..core.db import get_cursor, transaction
from ..core.exceptions import DuplicateError, ValidationError
from ..core.messages import ErrorCode
from ..repositories import FolderRepository
from ..schemas.folder import FolderRead


class FolderService:
    """Service for managing a user's folders."""

    @classmethod
    async def add_folders(cls, folder_names: List[str], user_id: int) -> List[FolderRead]:
        logger = logging.getLogger(__name__)
        names = [name.strip() for name in folder_names]
        if not all(names):
            raise ValidationError(ErrorCode.INVALID_FOLDER_NAME)
        with transaction() as conn:
            folders = FolderRepository(conn)
            existing = {folder.name for folder in folders.find_all_by_user_and_names(user_id, names)}
            seen: set[str] = set()
            created = []
            for name in names:
                if name in existing or name in seen:
                    raise DuplicateError(ErrorCode.DUPLICATE_FOLDER_NAME, name=name)
                seen.add(name)
                try:
                    created.append(folders.save(name, user_id))
                except sqlite3.IntegrityError as exc:
                    raise DuplicateError(ErrorCode.DUPLICATE_FOLDER_NAME, name=name) from exc
        logger.info("User %s created folders %s", user_id, names)
        return [FolderRead.from_model(folder) for folder in created]

    @classmethod
    async def get_folders(cls, user_id: int) -> List[FolderRead]:
        """Return the user's folders ordered by creation."""
        with get_cursor() as cursor:
            folders = FolderRepository(cursor).find_all_by_user(user_id)
        return [FolderRead.from_model(folder) for folder in folders]
