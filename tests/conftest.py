import asyncio

import pytest
from fastapi.testclient import TestClient

from selectshop_api.app.core.config import settings
from selectshop_api.app.core.db import init_db, transaction
from selectshop_api.app.core.security import create_access_token, hash_password
from selectshop_api.app.models import UserRole
from selectshop_api.app.repositories import FolderRepository, ProductRepository, UserRepository


@pytest.fixture(autouse=True)
def database(tmp_path, monkeypatch):
    """Point every test at a fresh, migrated SQLite file."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "selectshop.db"))
    init_db()


@pytest.fixture
def run():
    """Drive an async service coroutine to completion."""
    return asyncio.run


@pytest.fixture
def make_user():
    counter = {"n": 0}

    def _make(username=None, role=UserRole.USER, password="password"):
        counter["n"] += 1
        username = username or f"user{counter['n']}"
        with transaction() as conn:
            return UserRepository(conn).save(
                username, f"{username}@example.com", hash_password(password), role
            )

    return _make


@pytest.fixture
def make_product():
    def _make(user_id, title="Book", lowest_price=1000, link="https://shop.example/p", image="https://img.example/p.jpg"):
        with transaction() as conn:
            return ProductRepository(conn).save(
                title=title, link=link, image=image, lowest_price=lowest_price, user_id=user_id
            )

    return _make


@pytest.fixture
def make_folder():
    def _make(user_id, name="Wishlist"):
        with transaction() as conn:
            return FolderRepository(conn).save(name, user_id)

    return _make


@pytest.fixture
def client():
    from selectshop_api.app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    def _headers(user):
        token = create_access_token({"sub": user.username, "role": user.role.value})
        return {"Authorization": f"Bearer {token}"}

    return _headers
