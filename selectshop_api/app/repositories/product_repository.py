"""
repositories/product_repository.py
----------------------------------
Data access layer for products.

The paged finders share one shape: count the matching rows, then
select the requested window with the ``PageRequest`` ordering.
"""

import logging
from typing import List, Optional, Sequence

from .base import Executor
from .paging import Page, PageRequest
from ..models import MIN_MY_PRICE, Product

logger = logging.getLogger(__name__)

_COLUMNS = "p.id, p.title, p.link, p.image, p.lowest_price, p.my_price, p.user_id"


class ProductRepository:
    """Repository for the products table."""

    def __init__(self, db: Executor) -> None:
        self.db = db

    def save(
        self,
        title: str,
        link: str,
        image: str,
        lowest_price: int,
        user_id: Optional[int],
        my_price: int = MIN_MY_PRICE,
    ) -> Product:
        cursor = self.db.execute(
            """
            INSERT INTO products (title, link, image, lowest_price, my_price, user_id)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (title, link, image, lowest_price, my_price, user_id),
        )
        return Product(
            id=cursor.lastrowid,
            title=title,
            link=link,
            image=image,
            lowest_price=lowest_price,
            my_price=my_price,
            user_id=user_id,
        )

    def find_by_id(self, product_id: int) -> Optional[Product]:
        row = self.db.execute(
            f"SELECT {_COLUMNS} FROM products p WHERE p.id = ?", (product_id,)
        ).fetchone()
        return Product.from_row(row) if row else None

    def find_all(self) -> List[Product]:
        rows = self.db.execute(f"SELECT {_COLUMNS} FROM products p ORDER BY p.id").fetchall()
        return [Product.from_row(row) for row in rows]

    def find_all_paged(self, pageable: PageRequest) -> Page[Product]:
        return self._page("FROM products p", (), pageable)

    def find_all_by_user(self, user_id: int, pageable: PageRequest) -> Page[Product]:
        return self._page("FROM products p WHERE p.user_id = ?", (user_id,), pageable)

    def find_all_by_user_and_folder_id(
        self, user_id: int, folder_id: int, pageable: PageRequest
    ) -> Page[Product]:
        return self._page(
            """
            FROM products p
            JOIN product_folders pf ON pf.product_id = p.id
            WHERE p.user_id = ? AND pf.folder_id = ?
            """,
            (user_id, folder_id),
            pageable,
        )

    def update_my_price(self, product_id: int, my_price: int) -> None:
        self.db.execute(
            "UPDATE products SET my_price = ?, modified_at = CURRENT_TIMESTAMP WHERE id = ?",
            (my_price, product_id),
        )

    def update_listing(
        self, product_id: int, title: str, link: str, lowest_price: int, image: Optional[str] = None
    ) -> None:
        """Overwrite the fields that come from the search service."""
        if image:
            self.db.execute(
                "UPDATE products SET title = ?, link = ?, lowest_price = ?, image = ?, "
                "modified_at = CURRENT_TIMESTAMP WHERE id = ?",
                (title, link, lowest_price, image, product_id),
            )
        else:
            self.db.execute(
                "UPDATE products SET title = ?, link = ?, lowest_price = ?, "
                "modified_at = CURRENT_TIMESTAMP WHERE id = ?",
                (title, link, lowest_price, product_id),
            )

    def _page(self, from_where: str, params: Sequence, pageable: PageRequest) -> Page[Product]:
        total = self.db.execute(f"SELECT COUNT(*) AS count {from_where}", tuple(params)).fetchone()["count"]
        query = f"SELECT {_COLUMNS} {from_where}" + pageable.order_clause("p") + pageable.limit_clause()
        logger.debug("Product page query: %s %s", query, params)
        rows = self.db.execute(query, tuple(params)).fetchall()
        return Page(
            items=[Product.from_row(row) for row in rows],
            page=pageable.page,
            size=pageable.size,
            total_elements=total,
        )
