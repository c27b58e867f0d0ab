"""
Propagate field changes for fetched SKUs to the selected shops.
"""

import json
import logging
from typing import Callable, Dict, List, Sequence

from ..state import (
    Shop, ShopRegistry, SnapshotStore, UpdateRequestRow, UpdateResult
)
from ..shopify import ShopifyClient, ShopifyClientError, ShopifyUpstreamError

logger = logging.getLogger(__name__)


ClientFactory = Callable[[Shop], ShopifyClient]

SKIPPED_MESSAGE = "SKU not found in snapshot, skipping update."
SUCCESS_MESSAGE = "Update successful"


def describe_failure(error: ShopifyClientError) -> str:
    """Build the result message for a failed shop update."""
    detail = str(error)
    if isinstance(error, ShopifyUpstreamError) and error.details is not None:
        try:
            detail = json.dumps(error.details)
        except (TypeError, ValueError):
            detail = str(error.details)
    return f"Update failed: {detail}"


async def update_variants(
    rows: Sequence[UpdateRequestRow],
    shop_names: Sequence[str],
    registry: ShopRegistry,
    store: SnapshotStore,
    client_factory: ClientFactory,
) -> List[UpdateResult]:
    """
    Apply each row's changes to each selected shop, one call at a time.

    Rows whose SKU was never fetched get a single skip result. Unknown shop
    names are ignored. Failed calls are reported per shop and do not stop
    the batch.

    Args:
        rows: Edited rows, processed in order
        shop_names: Target shop names, processed in order for every row
        registry: Configured shops
        store: Snapshots from earlier fetches
        client_factory: Creates a client for a shop

    Returns:
        One result per (row, resolvable shop) pair, or per skipped row
    """
    results: List[UpdateResult] = []
    clients: Dict[str, ShopifyClient] = {}
    failed = 0

    try:
        for row in rows:
            snapshot = store.get(row.sku)
            if snapshot is None:
                logger.warning(f"SKU '{row.sku}' not in snapshot, skipping row {row.row_number}")
                results.append(UpdateResult(
                    sku=row.sku,
                    row_number=row.row_number,
                    shops=list(shop_names),
                    message=SKIPPED_MESSAGE,
                ))
                continue

            for shop_name in shop_names:
                shop = registry.find_by_name(shop_name)
                if shop is None:
                    logger.debug(f"Unknown shop '{shop_name}', skipping")
                    continue

                client = clients.get(shop.name)
                if client is None:
                    client = clients[shop.name] = client_factory(shop)

                try:
                    await client.update_variant(snapshot.numeric_variant_id, row.changes)
                    message = SUCCESS_MESSAGE
                    logger.debug(f"Updated '{row.sku}' on '{shop.name}'")
                except ShopifyClientError as e:
                    message = describe_failure(e)
                    failed += 1
                    logger.warning(f"Failed to update '{row.sku}' on '{shop.name}': {e}")

                results.append(UpdateResult(
                    sku=row.sku,
                    row_number=row.row_number,
                    shop=shop.name,
                    message=message,
                ))
    finally:
        for client in clients.values():
            await client.close()

    logger.info(
        f"Update process completed: {len(results)} results, {failed} failed"
    )
    return results
