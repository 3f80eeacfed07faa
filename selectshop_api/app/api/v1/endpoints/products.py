"""
Product endpoints for API v1.

Create tracked products, set "my price", list products page by page
and file a product into a folder.  The ``page`` query parameter is
1‑based here and converted to the 0‑based index the service uses.
"""

from fastapi import APIRouter, Depends, Query, Response, status

from selectshop_api.app.core.security import get_current_user
from selectshop_api.app.models import User
from selectshop_api.app.schemas.product import (
    ProductCreate,
    ProductMyPriceUpdate,
    ProductPage,
    ProductRead,
)
from selectshop_api.app.services.product_service import ProductService


router = APIRouter()


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def create_product(
    product: ProductCreate,
    current_user: User = Depends(get_current_user),
) -> ProductRead:
    """Start tracking a product found through search."""
    return await ProductService.create_product(product, current_user.id)


@router.put("/{product_id}", response_model=ProductRead)
async def update_product(
    product_id: int,
    data: ProductMyPriceUpdate,
    current_user: User = Depends(get_current_user),
) -> ProductRead:
    """Set "my price" for a product.

    Answers 400 when the price is below the minimum and 404 when the
    product does not exist.
    """
    return await ProductService.update_product(product_id, data)


@router.get("", response_model=ProductPage)
async def list_products(
    page: int = Query(1, ge=1),
    size: int = Query(10, ge=1, le=100),
    sort_by: str = Query("id", alias="sortBy"),
    is_asc: bool = Query(False, alias="isAsc"),
    current_user: User = Depends(get_current_user),
) -> ProductPage:
    """List products.

    - **page**, **size**: 1‑based page number and page size.
    - **sortBy**: `id`, `title`, `lowestPrice`, `myPrice`, `createdAt` or `modifiedAt`.
    - **isAsc**: sort direction.

    Regular users see their own products; admins see everyone's.
    """
    return await ProductService.get_products(
        current_user.id,
        current_user.role,
        page - 1,
        size,
        sort_by,
        is_asc,
    )


@router.post("/{product_id}/folder", status_code=status.HTTP_204_NO_CONTENT)
async def add_folder(
    product_id: int,
    folder_id: int = Query(..., alias="folderId"),
    current_user: User = Depends(get_current_user),
) -> Response:
    """File a product into one of the caller's folders."""
    await ProductService.add_folder(product_id, folder_id, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
