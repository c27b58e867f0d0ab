"""
Shopify API module.
"""

from variant_relay.shopify.client import (
    ShopifyClient,
    ShopifyClientError,
    ShopifyUpstreamError,
    ShopifyAuthError,
    ShopifyTransportError,
    extract_error_details,
    extract_numeric_id,
)
from variant_relay.shopify.queries import VARIANT_BY_SKU_QUERY, build_sku_search

__all__ = [
    "ShopifyClient",
    "ShopifyClientError",
    "ShopifyUpstreamError",
    "ShopifyAuthError",
    "ShopifyTransportError",
    "extract_error_details",
    "extract_numeric_id",
    "VARIANT_BY_SKU_QUERY",
    "build_sku_search",
]
