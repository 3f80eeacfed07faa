"""
models/ - Domain entities
=========================
Plain dataclasses built from database rows.  Ownership is expressed
with explicit ``user_id`` fields; nothing here lazily loads related
rows.
"""

from .user import User, UserRole
from .product import MIN_MY_PRICE, Product
from .folder import Folder, ProductFolder

__all__ = ["User", "UserRole", "Product", "MIN_MY_PRICE", "Folder", "ProductFolder"]
