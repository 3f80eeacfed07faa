"""
Top‑level router for version 1 of the API.

Aggregates the domain routers.  When a new domain is added, include
its router here.
"""

from fastapi import APIRouter

from .endpoints import admin, folders, products, search, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(products.router, prefix="/products", tags=["products"])
router.include_router(folders.router, prefix="/folders", tags=["folders"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
router.include_router(search.router, prefix="/search", tags=["search"])
