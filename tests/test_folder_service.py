import sqlite3

import pytest

from selectshop_api.app.core.db import get_cursor, transaction
from selectshop_api.app.core.exceptions import DuplicateError, ValidationError
from selectshop_api.app.core.messages import ErrorCode
from selectshop_api.app.services.folder_service import FolderService
from selectshop_api.app.services.product_service import ProductService


class TestAddFolders:
    """Tests for FolderService.add_folders."""

    def test_creates_all_folders(self, run, make_user):
        user = make_user()

        created = run(FolderService.add_folders(["Books", "Gifts"], user.id))

        assert [f.name for f in created] == ["Books", "Gifts"]
        assert [f.name for f in run(FolderService.get_folders(user.id))] == ["Books", "Gifts"]

    def test_existing_name_rejects_whole_batch(self, run, make_user, make_folder):
        user = make_user()
        make_folder(user.id, "Books")

        with pytest.raises(DuplicateError) as exc_info:
            run(FolderService.add_folders(["Gifts", "Books"], user.id))

        assert exc_info.value.code == ErrorCode.DUPLICATE_FOLDER_NAME
        assert exc_info.value.params == {"name": "Books"}
        assert [f.name for f in run(FolderService.get_folders(user.id))] == ["Books"]

    def test_repeated_name_in_request_is_duplicate(self, run, make_user):
        user = make_user()

        with pytest.raises(DuplicateError):
            run(FolderService.add_folders(["Gifts", "Gifts"], user.id))

        assert run(FolderService.get_folders(user.id)) == []

    @pytest.mark.parametrize("names", [["   "], ["Books", ""], ["Gifts", "\t\n"]])
    def test_blank_name_rejects_whole_batch(self, run, make_user, names):
        user = make_user()

        with pytest.raises(ValidationError) as exc_info:
            run(FolderService.add_folders(names, user.id))

        assert exc_info.value.code == ErrorCode.INVALID_FOLDER_NAME
        assert run(FolderService.get_folders(user.id)) == []

    def test_names_are_stored_stripped(self, run, make_user):
        user = make_user()

        created = run(FolderService.add_folders(["  Books "], user.id))

        assert [f.name for f in created] == ["Books"]

    def test_same_name_allowed_for_different_users(self, run, make_user):
        alice, bob = make_user(), make_user()

        run(FolderService.add_folders(["Books"], alice.id))
        run(FolderService.add_folders(["Books"], bob.id))

        assert len(run(FolderService.get_folders(alice.id))) == 1
        assert len(run(FolderService.get_folders(bob.id))) == 1


class TestSchemaConstraints:
    """The store rejects duplicates even when the service checks are bypassed."""

    def test_product_folder_pair_is_unique(self, make_user, make_product, make_folder):
        user = make_user()
        product = make_product(user.id)
        folder = make_folder(user.id)

        with pytest.raises(sqlite3.IntegrityError):
            with transaction() as conn:
                conn.execute("INSERT INTO product_folders (product_id, folder_id) VALUES (?, ?)", (product.id, folder.id))
                conn.execute("INSERT INTO product_folders (product_id, folder_id) VALUES (?, ?)", (product.id, folder.id))

        with get_cursor() as cursor:
            count = cursor.execute("SELECT COUNT(*) AS count FROM product_folders").fetchone()["count"]
        assert count == 0

    def test_links_cascade_when_folder_is_deleted(self, run, make_user, make_product, make_folder):
        user = make_user()
        product = make_product(user.id)
        folder = make_folder(user.id)
        run(ProductService.add_folder(product.id, folder.id, user.id))

        with transaction() as conn:
            conn.execute("DELETE FROM folders WHERE id = ?", (folder.id,))

        with get_cursor() as cursor:
            count = cursor.execute("SELECT COUNT(*) AS count FROM product_folders").fetchone()["count"]
        assert count == 0
