import logging
from unittest.mock import MagicMock

from selectshop_api.app.core.db import get_cursor
from selectshop_api.app.core.exceptions import ExternalServiceError
from selectshop_api.app.core.messages import ErrorCode
from selectshop_api.app.repositories import ProductRepository
from selectshop_api.app.schemas.search import SearchItem
from sync_prices import sync_prices


def _stored(product_id):
    with get_cursor() as cursor:
        return ProductRepository(cursor).find_by_id(product_id)


class TestSyncPrices:
    """Tests for the sync_prices script."""

    def test_updates_each_product_from_first_result(self, run, make_user, make_product):
        user = make_user()
        book = make_product(user.id, title="Book", lowest_price=1000)
        pen = make_product(user.id, title="Pen", lowest_price=500)
        client = MagicMock()
        client.search_items.side_effect = lambda query: [
            SearchItem(title=f"{query} v2", link=f"https://shop/{query}", lowestPrice=len(query) * 100),
            SearchItem(title="ignored", link="x", lowestPrice=1),
        ]

        failures = run(sync_prices(client))

        assert failures == 0
        assert _stored(book.id).title == "Book v2"
        assert _stored(book.id).lowest_price == 400
        assert _stored(pen.id).lowest_price == 300

    def test_dry_run_writes_nothing(self, run, make_user, make_product):
        product = make_product(make_user().id, title="Book", lowest_price=1000)
        client = MagicMock()
        client.search_items.return_value = [SearchItem(title="New", link="l", lowestPrice=1)]

        run(sync_prices(client, dry_run=True))

        assert _stored(product.id).lowest_price == 1000

    def test_only_selected_products(self, run, make_user, make_product):
        user = make_user()
        first = make_product(user.id, title="A")
        second = make_product(user.id, title="B")
        client = MagicMock()
        client.search_items.return_value = [SearchItem(title="New", link="l", lowestPrice=1)]

        run(sync_prices(client, product_ids=[second.id]))

        assert _stored(first.id).title == "A"
        assert _stored(second.id).title == "New"

    def test_search_failure_is_counted_and_pass_continues(self, run, make_user, make_product):
        user = make_user()
        make_product(user.id, title="Broken")
        fine = make_product(user.id, title="Fine")
        client = MagicMock()

        def search(query):
            if query == "Broken":
                raise ExternalServiceError(ErrorCode.SEARCH_UNAVAILABLE)
            return [SearchItem(title="Fine v2", link="l", lowestPrice=9)]

        client.search_items.side_effect = search

        failures = run(sync_prices(client))

        assert failures == 1
        assert _stored(fine.id).title == "Fine v2"

    def test_products_without_results_are_reported_as_skipped(self, run, make_user, make_product, caplog):
        user = make_user()
        missing = make_product(user.id, title="Nowhere")
        found = make_product(user.id, title="Book")
        client = MagicMock()
        client.search_items.side_effect = lambda query: (
            [] if query == "Nowhere" else [SearchItem(title="Book v2", link="l", lowestPrice=5)]
        )
        caplog.set_level(logging.INFO, logger="sync_prices")

        failures = run(sync_prices(client))

        assert failures == 0
        assert _stored(missing.id).title == "Nowhere"
        assert _stored(found.id).title == "Book v2"
        assert caplog.records[-1].getMessage() == "Updated 1 products, 1 skipped, 0 failed"

    def test_dry_run_summary(self, run, make_user, make_product, caplog):
        make_product(make_user().id, title="Book")
        client = MagicMock()
        client.search_items.return_value = [SearchItem(title="New", link="l", lowestPrice=1)]
        caplog.set_level(logging.INFO, logger="sync_prices")

        run(sync_prices(client, dry_run=True))

        assert caplog.records[-1].getMessage() == "Would update 1 products, 0 skipped, 0 failed"
