"""
repositories/product_folder_repository.py
-----------------------------------------
Data access layer for product-to-folder links.
"""

from typing import Dict, Iterable, List, Optional

from .base import Executor
from ..models import Folder, ProductFolder

# Stays below SQLITE_MAX_VARIABLE_NUMBER on older builds (999).
ID_CHUNK_SIZE = 500


class ProductFolderRepository:
    """Repository for the product_folders join table."""

    def __init__(self, db: Executor) -> None:
        self.db = db

    def save(self, product_id: int, folder_id: int) -> ProductFolder:
        cursor = self.db.execute(
            "INSERT INTO product_folders (product_id, folder_id) VALUES (?, ?)",
            (product_id, folder_id),
        )
        return ProductFolder(id=cursor.lastrowid, product_id=product_id, folder_id=folder_id)

    def find_by_product_and_folder(self, product_id: int, folder_id: int) -> Optional[ProductFolder]:
        row = self.db.execute(
            "SELECT id, product_id, folder_id FROM product_folders WHERE product_id = ? AND folder_id = ?",
            (product_id, folder_id),
        ).fetchone()
        return ProductFolder.from_row(row) if row else None

    def find_folders_by_product_ids(self, product_ids: Iterable[int]) -> Dict[int, List[Folder]]:
        """Map each product id to the folders it is filed in, ordered by folder id.

        Ids are bound in batches of ``ID_CHUNK_SIZE`` to stay under
        SQLite's limit on host parameters per statement.
        """
        product_ids = list(product_ids)
        folders: Dict[int, List[Folder]] = {pid: [] for pid in product_ids}
        for start in range(0, len(product_ids), ID_CHUNK_SIZE):
            chunk = product_ids[start:start + ID_CHUNK_SIZE]
            placeholders = ", ".join("?" for _ in chunk)
            rows = self.db.execute(
                f"""
                SELECT pf.product_id, f.id, f.name, f.user_id
                FROM product_folders pf
                JOIN folders f ON f.id = pf.folder_id
                WHERE pf.product_id IN ({placeholders})
                ORDER BY f.id
                """,
                tuple(chunk),
            ).fetchall()
            for row in rows:
                folders[row["product_id"]].append(Folder.from_row(row))
        return folders
