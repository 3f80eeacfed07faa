"""
Business logic for tracked products.

``ProductService`` implements creation, the "my price" update, the
price sync from a search result, the role‑aware paginated listings and
filing products into folders.  Every read‑check‑write sequence runs
inside ``core.db.transaction`` so its checks and its write commit or
roll back together.  Owner ids are passed in explicitly by the caller.
"""

import logging
import sqlite3
from typing import List, Optional

from ..core.db import get_cursor, transaction
from ..core.exceptions import AuthorizationError, DuplicateError, NotFoundError, ValidationError
from ..core.messages import ErrorCode
from ..models import MIN_MY_PRICE, Product, UserRole
from ..repositories import (
    FolderRepository,
    Page,
    PageRequest,
    ProductFolderRepository,
    ProductRepository,
)
from ..schemas.product import ProductCreate, ProductMyPriceUpdate, ProductPage, ProductRead
from ..schemas.search import SearchItem

logger = logging.getLogger(__name__)


class ProductService:
    """Service for managing tracked products."""

    @classmethod
    async def create_product(cls, data: ProductCreate, user_id: Optional[int]) -> ProductRead:
        """Persist a new product owned by ``user_id`` and return it.

        ``user_id`` may be ``None`` for seeded products that belong to
        nobody.  The product starts with ``my_price = MIN_MY_PRICE``.
        """
        logger.info("User %s is adding product '%s'", user_id, data.title)
        with transaction() as conn:
            product = ProductRepository(conn).save(
                title=data.title,
                link=data.link,
                image=data.image,
                lowest_price=data.lowest_price,
                user_id=user_id,
            )
        return ProductRead.from_model(product)

    @classmethod
    async def update_product(cls, product_id: int, data: ProductMyPriceUpdate) -> ProductRead:
        """Set the product's "my price".

        Raises ``ValidationError`` when the price is below
        ``MIN_MY_PRICE`` (checked first, before the lookup) and
        ``NotFoundError`` when the product does not exist.
        """
        if data.my_price < MIN_MY_PRICE:
            raise ValidationError(ErrorCode.BELOW_MIN_MY_PRICE, min_price=MIN_MY_PRICE)

        with transaction() as conn:
            products = ProductRepository(conn)
            product = products.find_by_id(product_id)
            if product is None:
                raise NotFoundError(ErrorCode.PRODUCT_NOT_FOUND)
            products.update_my_price(product_id, data.my_price)
            product.my_price = data.my_price
            cls._attach_folders(conn, [product])
        logger.info("Product %s my price set to %s", product_id, data.my_price)
        return ProductRead.from_model(product)

    @classmethod
    async def update_by_search(cls, product_id: int, item: SearchItem) -> None:
        """Overwrite title, link and lowest price from a search result.

        The image is replaced only when the result carries one.  Raises
        ``NotFoundError`` when the product does not exist.
        """
        with transaction() as conn:
            products = ProductRepository(conn)
            if products.find_by_id(product_id) is None:
                raise NotFoundError(ErrorCode.PRODUCT_NOT_FOUND)
            products.update_listing(
                product_id,
                title=item.title,
                link=item.link,
                lowest_price=item.lowest_price,
                image=item.image or None,
            )
        logger.info("Product %s synced, lowest price %s", product_id, item.lowest_price)

    @classmethod
    async def get_products(
        cls,
        user_id: int,
        role: UserRole,
        page: int,
        size: int,
        sort_by: str = "id",
        is_asc: bool = True,
    ) -> ProductPage:
        """Return one page of products sorted by ``sort_by``.

        A ``USER`` sees only their own products; any other role sees
        every product.  ``page`` is 0‑based.
        """
        pageable = PageRequest.of(page, size, sort_by, is_asc)
        with get_cursor() as cursor:
            products = ProductRepository(cursor)
            if role == UserRole.USER:
                result = products.find_all_by_user(user_id, pageable)
            else:
                result = products.find_all_paged(pageable)
            cls._attach_folders(cursor, result.items)
        return ProductPage.from_page(result)

    @classmethod
    async def get_all_products(cls) -> List[ProductRead]:
        """Return every product, unpaginated, ordered by id."""
        with get_cursor() as cursor:
            products = ProductRepository(cursor).find_all()
            cls._attach_folders(cursor, products)
        return [ProductRead.from_model(product) for product in products]

    @classmethod
    async def add_folder(cls, product_id: int, folder_id: int, user_id: int) -> None:
        """File a product into a folder.

        Checks run in a fixed order, and the first failure is reported:
        the product exists, the folder exists, the caller owns both, and
        the pair is not linked already.
        """
        with transaction() as conn:
            product = ProductRepository(conn).find_by_id(product_id)
            if product is None:
                raise NotFoundError(ErrorCode.PRODUCT_NOT_FOUND)

            folder = FolderRepository(conn).find_by_id(folder_id)
            if folder is None:
                raise NotFoundError(ErrorCode.FOLDER_NOT_FOUND)

            if not product.is_owned_by(user_id) or not folder.is_owned_by(user_id):
                raise AuthorizationError(ErrorCode.NOT_OWNER)

            links = ProductFolderRepository(conn)
            if links.find_by_product_and_folder(product_id, folder_id) is not None:
                raise DuplicateError(ErrorCode.DUPLICATE_PRODUCT_FOLDER)

            try:
                links.save(product_id, folder_id)
            except sqlite3.IntegrityError as exc:
                raise DuplicateError(ErrorCode.DUPLICATE_PRODUCT_FOLDER) from exc
        logger.info("User %s filed product %s into folder %s", user_id, product_id, folder_id)

    @classmethod
    async def get_products_in_folder(
        cls,
        folder_id: int,
        user_id: int,
        page: int,
        size: int,
        sort_by: str = "id",
        is_asc: bool = True,
    ) -> ProductPage:
        """Return one page of the caller's products filed in ``folder_id``.

        Only products owned by ``user_id`` are listed, so a folder of
        another user yields an empty page.
        """
        pageable = PageRequest.of(page, size, sort_by, is_asc)
        with get_cursor() as cursor:
            result: Page[Product] = ProductRepository(cursor).find_all_by_user_and_folder_id(
                user_id, folder_id, pageable
            )
            cls._attach_folders(cursor, result.items)
        return ProductPage.from_page(result)

    @staticmethod
    def _attach_folders(db, products: List[Product]) -> None:
        if not products:
            return
        folders = ProductFolderRepository(db).find_folders_by_product_ids(p.id for p in products)
        for product in products:
            product.folders = folders.get(product.id, [])
