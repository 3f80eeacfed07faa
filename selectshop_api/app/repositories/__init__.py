"""
repositories/ - Data Access Layer
=================================
Each repository wraps the SQL for one entity.  Repositories are bound
to an open connection or cursor supplied by the caller, so a service
decides the transaction scope and several repositories can share it.
Rows come back as the dataclasses in ``models``.
"""

from .base import Executor
from .paging import Page, PageRequest
from .user_repository import UserRepository
from .product_repository import ProductRepository
from .folder_repository import FolderRepository
from .product_folder_repository import ProductFolderRepository

__all__ = [
    "Executor",
    "Page",
    "PageRequest",
    "UserRepository",
    "ProductRepository",
    "FolderRepository",
    "ProductFolderRepository",
]
