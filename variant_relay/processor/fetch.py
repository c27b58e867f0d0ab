"""
Fetch a variant from the representative shop into the snapshot store.
"""

import logging
from typing import Any, Dict, Optional

from ..state import Shop, SnapshotStore, VariantSnapshot
from ..shopify import (
    ShopifyClient, VARIANT_BY_SKU_QUERY, build_sku_search, extract_numeric_id
)
from .errors import InvalidInputError, VariantNotFoundError

logger = logging.getLogger(__name__)


def normalize_variant(
    node: Dict[str, Any], sku: Optional[str] = None
) -> VariantSnapshot:
    """
    Turn a productVariant node into a snapshot.

    Known fields are mapped explicitly, everything else is kept as
    passthrough data. If given, `sku` overrides the node's SKU.
    """
    variant_id = node.get("id")
    if not variant_id:
        raise ValueError("Variant node has no id")

    image = node.get("image")
    image_url: Optional[str] = image.get("url") if isinstance(image, dict) else image

    known = {"id", "sku", "title", "price", "inventoryQuantity", "image"}
    passthrough = {k: v for k, v in node.items() if k not in known}

    return VariantSnapshot(
        sku=sku or node.get("sku") or "",
        variant_id=variant_id,
        numeric_variant_id=extract_numeric_id(variant_id),
        price=node.get("price"),
        title=node.get("title"),
        inventory_quantity=node.get("inventoryQuantity"),
        image=image_url,
        **passthrough,
    )


async def fetch_variant(
    sku: Optional[str],
    shop: Shop,
    store: SnapshotStore,
    client: ShopifyClient,
) -> VariantSnapshot:
    """
    Query the shop for a variant by SKU and record it in the store.

    Args:
        sku: SKU to look up
        shop: Representative shop
        store: Snapshot store to write to
        client: Client bound to the representative shop

    Returns:
        The stored snapshot

    Raises:
        InvalidInputError: If the SKU is missing or blank
        VariantNotFoundError: If no variant matches
        ShopifyUpstreamError: If Shopify returned an error payload
        ShopifyTransportError: If Shopify could not be reached
    """
    if not sku or not sku.strip():
        raise InvalidInputError("Missing required query parameter: sku")
    sku = sku.strip()

    logger.info(f"Fetching SKU '{sku}' from '{shop.name}'")
    data = await client.execute(
        VARIANT_BY_SKU_QUERY,
        variables={"query": build_sku_search(sku)},
    )

    edges = (data.get("productVariants") or {}).get("edges") or []
    if not edges:
        raise VariantNotFoundError(f"No variant found for SKU '{sku}'")

    node = edges[0].get("node") or {}
    found_sku = (node.get("sku") or "").strip()
    if found_sku and found_sku != sku:
        logger.warning(f"Search for SKU '{sku}' matched '{found_sku}' instead")
        raise VariantNotFoundError(f"No variant found for SKU '{sku}'")

    snapshot = normalize_variant(node, sku=sku)

    store.put(snapshot)
    logger.info(
        f"Stored snapshot for '{sku}' (variant {snapshot.numeric_variant_id})"
    )
    return snapshot
