"""
Pydantic models for product data.

``ProductCreate`` is the body of ``POST /api/products``;
``ProductMyPriceUpdate`` sets the user's target price and
``ProductRead`` is returned for single products.  ``ProductPage`` wraps
one page of a sorted listing together with the totals a client needs
to render pagination.
"""

from typing import List

from pydantic import BaseModel, Field

from .folder import FolderRead
from ..models import Product
from ..repositories.paging import Page

_ALIASED = {
    "populate_by_name": True,
    "from_attributes": True,
}


class ProductCreate(BaseModel):
    title: str = Field(..., min_length=1, example="Clean Code")
    link: str = Field(..., example="https://search.shopping.naver.com/gate.nhn?id=123")
    image: str = Field(..., example="https://shopping-phinf.pstatic.net/main_123/123.jpg")
    lowest_price: int = Field(..., ge=0, alias="lowestPrice", example=1000)

    model_config = _ALIASED


class ProductMyPriceUpdate(BaseModel):
    """Schema for setting "my price".

    The lower bound is a domain rule checked by ``ProductService`` so
    that callers get the templated ``BELOW_MIN_MY_PRICE`` error rather
    than a generic schema violation.
    """

    my_price: int = Field(..., alias="myPrice", example=5000)

    model_config = _ALIASED


class ProductRead(BaseModel):
    """Schema for reading a product from the API."""

    id: int
    title: str
    link: str
    image: str
    lowest_price: int = Field(..., alias="lowestPrice")
    my_price: int = Field(..., alias="myPrice")
    folders: List[FolderRead] = Field(default_factory=list, alias="productFolderList")

    model_config = _ALIASED

    @classmethod
    def from_model(cls, product: Product) -> "ProductRead":
        return cls(
            id=product.id,
            title=product.title,
            link=product.link,
            image=product.image,
            lowest_price=product.lowest_price,
            my_price=product.my_price,
            folders=[FolderRead.from_model(folder) for folder in product.folders],
        )


class ProductPage(BaseModel):
    content: List[ProductRead]
    page: int
    size: int
    total_elements: int = Field(..., alias="totalElements")
    total_pages: int = Field(..., alias="totalPages")

    model_config = _ALIASED

    @classmethod
    def from_page(cls, page: Page[Product]) -> "ProductPage":
        return cls(
            content=[ProductRead.from_model(product) for product in page.items],
            page=page.page,
            size=page.size,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
        )
