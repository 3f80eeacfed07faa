"""
Folder endpoints for API v1.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, status

from selectshop_api.app.core.security import get_current_user
from selectshop_api.app.models import User
from selectshop_api.app.schemas.folder import FolderCreate, FolderRead
from selectshop_api.app.schemas.product import ProductPage
from selectshop_api.app.services.folder_service import FolderService
from selectshop_api.app.services.product_service import ProductService


router = APIRouter()


@router.post("", response_model=List[FolderRead], status_code=status.HTTP_201_CREATED)
async def add_folders(
    body: FolderCreate,
    current_user: User = Depends(get_current_user),
) -> List[FolderRead]:
    """Create one or more folders; any duplicate name rejects the whole request."""
    return await FolderService.add_folders(body.folder_names, current_user.id)


@router.get("", response_model=List[FolderRead])
async def list_folders(current_user: User = Depends(get_current_user)) -> List[FolderRead]:
    return await FolderService.get_folders(current_user.id)


@router.get("/{folder_id}/products", response_model=ProductPage)
async def list_products_in_folder(
    folder_id: int,
    page: int = Query(1, ge=1),
    size: int = Query(10, ge=1, le=100),
    sort_by: str = Query("id", alias="sortBy"),
    is_asc: bool = Query(False, alias="isAsc"),
    current_user: User = Depends(get_current_user),
) -> ProductPage:
    """List the caller's products filed in a folder (1‑based ``page``)."""
    return await ProductService.get_products_in_folder(
        folder_id,
        current_user.id,
        page - 1,
        size,
        sort_by,
        is_asc,
    )
