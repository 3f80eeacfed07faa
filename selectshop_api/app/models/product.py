"""
models/product.py
-----------------
Domain model for tracked products.
"""

import sqlite3
from dataclasses import dataclass, field
from typing import List, Optional

from .folder import Folder

# Lowest "my price" a user may set on a product.
MIN_MY_PRICE = 100


@dataclass
class Product:
    """
    A product a user tracks.

    Attributes:
        id: Database primary key.
        title: Display title as returned by the search service.
        link: Shop URL of the product.
        image: Thumbnail URL.
        lowest_price: Lowest price observed by the search service.
        my_price: User-assigned target price, never below ``MIN_MY_PRICE``.
        user_id: Owning user; ``None`` only for seeded rows.
        folders: Folders the product is filed in, when loaded.
    """
    id: int
    title: str
    link: str
    image: str
    lowest_price: int
    my_price: int = MIN_MY_PRICE
    user_id: Optional[int] = None
    folders: List[Folder] = field(default_factory=list)

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id is not None and self.user_id == user_id

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "Product":
        return cls(
            id=row["id"],
            title=row["title"],
            link=row["link"],
            image=row["image"],
            lowest_price=row["lowest_price"],
            my_price=row["my_price"],
            user_id=row["user_id"],
        )
