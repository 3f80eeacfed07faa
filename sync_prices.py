#!/usr/bin/env python3
"""
Refresh tracked products from the shopping search API.

For every product, the title is searched and the first result's
title, link and lowest price overwrite the stored ones through
``ProductService.update_by_search``.  A failure on one product is
logged and the pass continues with the next; the exit status is 1
when any product failed.

Run it from cron (e.g. nightly) next to the API server.

Usage:
    python sync_prices.py [--product-id 3 --product-id 7] [--dry-run]
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from selectshop_api.app.core.config import settings
from selectshop_api.app.core.db import init_db
from selectshop_api.app.core.exceptions import ShopError
from selectshop_api.app.core.logging_config import setup_logging
from selectshop_api.app.services.product_service import ProductService
from selectshop_api.app.services.search_service import SearchClient

logger = logging.getLogger("sync_prices")


async def sync_prices(
    client: SearchClient,
    product_ids: Optional[List[int]] = None,
    dry_run: bool = False,
) -> int:
    """Run one sync pass and return the number of failed products."""
    products = await ProductService.get_all_products()
    if product_ids:
        wanted = set(product_ids)
        products = [product for product in products if product.id in wanted]

    updated = skipped = failures = 0
    for product in products:
        try:
            items = client.search_items(product.title)
            if not items:
                skipped += 1
                logger.warning("No search result for product %s (%s)", product.id, product.title)
                continue
            best = items[0]
            if dry_run:
                logger.info(
                    "Would update product %s: %s -> %s",
                    product.id, product.lowest_price, best.lowest_price,
                )
            else:
                await ProductService.update_by_search(product.id, best)
            updated += 1
        except ShopError as exc:
            failures += 1
            logger.error("Sync failed for product %s: %s", product.id, exc)
    logger.info(
        "%s %s products, %s skipped, %s failed",
        "Would update" if dry_run else "Updated", updated, skipped, failures,
    )
    return failures


def main() -> int:
    ap = argparse.ArgumentParser(description="Sync tracked product prices from the search API.")
    ap.add_argument("--product-id", type=int, action="append", dest="product_ids",
                    help="Only sync this product (repeatable)")
    ap.add_argument("--dry-run", action="store_true", help="Search but do not write changes")
    args = ap.parse_args()

    setup_logging(settings.log_level, settings.log_file or None)
    init_db()
    failures = asyncio.run(sync_prices(SearchClient(), args.product_ids, args.dry_run))
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
