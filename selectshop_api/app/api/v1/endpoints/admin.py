"""
Administrator endpoints for API v1.

Bulk listing of every product and a manual price sync.  All routes
require the ADMIN role.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from selectshop_api.app.core.security import require_roles
from selectshop_api.app.models import User, UserRole
from selectshop_api.app.schemas.product import ProductRead
from selectshop_api.app.schemas.search import SearchItem
from selectshop_api.app.services.product_service import ProductService


router = APIRouter()


@router.get("/products", response_model=List[ProductRead])
async def list_all_products(
    current_user: User = Depends(require_roles(UserRole.ADMIN)),
) -> List[ProductRead]:
    """Return every product of every user, unpaginated."""
    return await ProductService.get_all_products()


@router.post("/products/{product_id}/sync", status_code=status.HTTP_204_NO_CONTENT)
async def sync_product(
    product_id: int,
    item: SearchItem,
    current_user: User = Depends(require_roles(UserRole.ADMIN)),
) -> Response:
    """Overwrite a product's title, link and lowest price from a search result."""
    await ProductService.update_by_search(product_id, item)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
