"""
FastAPI dependency injection.
Shop registry, snapshot store and Shopify client factory.
"""

from typing import Optional

from .config import settings
from .processor import ClientFactory
from .shopify import ShopifyClient
from .state import Shop, ShopRegistry, SnapshotStore, load_shop_registry


# Global instances (initialized on startup)
_registry: Optional[ShopRegistry] = None
_store: Optional[SnapshotStore] = None


def init_dependencies() -> None:
    """
    Initialize global dependencies. Called on app startup.

    Raises:
        ConfigurationError: If the shop configuration is invalid
    """
    global _registry, _store

    _registry = load_shop_registry(settings)
    _store = SnapshotStore()


def close_dependencies() -> None:
    """Drop global dependencies. Called on app shutdown."""
    global _registry, _store
    _registry = None
    _store = None


def get_registry() -> ShopRegistry:
    """Get the shop registry."""
    if _registry is None:
        raise RuntimeError("Shop registry not initialized")
    return _registry


def get_snapshot_store() -> SnapshotStore:
    """Get the snapshot store."""
    if _store is None:
        raise RuntimeError("Snapshot store not initialized")
    return _store


def create_client(shop: Shop) -> ShopifyClient:
    """Create a client for a shop using the configured API version and timeouts."""
    return ShopifyClient(
        shop.domain,
        shop.token,
        api_version=settings.shopify_api_version,
        timeout=settings.request_timeout,
        connect_timeout=settings.connect_timeout,
    )


def get_client_factory() -> ClientFactory:
    """Get the function used to build per-shop clients."""
    return create_client
