"""
models/folder.py
----------------
Domain models for folders and product-to-folder links.
"""

import sqlite3
from dataclasses import dataclass


@dataclass
class Folder:
    """A named group of products owned by one user."""
    id: int
    name: str
    user_id: int

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id == user_id

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "Folder":
        return cls(id=row["id"], name=row["name"], user_id=row["user_id"])


@dataclass
class ProductFolder:
    """Association of one product with one folder."""
    id: int
    product_id: int
    folder_id: int

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "ProductFolder":
        return cls(id=row["id"], product_id=row["product_id"], folder_id=row["folder_id"])
