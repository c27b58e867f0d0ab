"""
State package - shop registry and in-memory snapshots.
"""

from .models import (
    Shop, VariantSnapshot, UpdateRequest, UpdateRequestRow, UpdateResult,
    normalize_domain
)
from .registry import ShopRegistry, load_shop_registry, parse_shops
from .snapshots import SnapshotStore

__all__ = [
    "Shop",
    "VariantSnapshot",
    "UpdateRequest",
    "UpdateRequestRow",
    "UpdateResult",
    "normalize_domain",
    "ShopRegistry",
    "load_shop_registry",
    "parse_shops",
    "SnapshotStore",
]
