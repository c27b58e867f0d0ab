"""
Registry of configured shops.
Loaded once at startup, read-only afterwards.
"""

import json
import logging
from typing import Dict, Iterator, List, Optional

from pydantic import ValidationError

from ..config import ConfigurationError, Settings
from .models import Shop

logger = logging.getLogger(__name__)


class ShopRegistry:
    """Configured shops by name, with one designated representative."""

    def __init__(self, shops: List[Shop], representative_name: str):
        """
        Build the registry.

        Args:
            shops: Shops in configuration order
            representative_name: Name of the shop used as source of truth

        Raises:
            ConfigurationError: On duplicate names or unknown representative
        """
        self._shops: Dict[str, Shop] = {}
        for shop in shops:
            if shop.name in self._shops:
                raise ConfigurationError(f"Duplicate shop name: '{shop.name}'")
            self._shops[shop.name] = shop

        representative = self._shops.get(representative_name)
        if representative is None:
            raise ConfigurationError(
                f"Representative shop '{representative_name}' not found in SHOPIFY_SHOPS"
            )
        self._representative = representative

    @property
    def representative(self) -> Shop:
        return self._representative

    @property
    def names(self) -> List[str]:
        return list(self._shops)

    def find_by_name(self, name: str) -> Optional[Shop]:
        """Get a shop by name, or None if it is not configured."""
        return self._shops.get(name)

    def __len__(self) -> int:
        return len(self._shops)

    def __iter__(self) -> Iterator[Shop]:
        return iter(self._shops.values())


def parse_shops(raw: str) -> List[Shop]:
    """
    Parse the SHOPIFY_SHOPS JSON list.

    Raises:
        ConfigurationError: If the value is empty, not JSON, or has bad entries
    """
    if not raw or not raw.strip():
        raise ConfigurationError("SHOPIFY_SHOPS is not set")

    try:
        entries = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"SHOPIFY_SHOPS is not valid JSON: {e}") from e

    if not isinstance(entries, list):
        raise ConfigurationError("SHOPIFY_SHOPS must be a JSON list")

    shops = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ConfigurationError(f"SHOPIFY_SHOPS[{index}] must be an object")
        try:
            shops.append(Shop.model_validate(entry))
        except ValidationError as e:
            fields = ", ".join(
                ".".join(str(part) for part in err["loc"]) for err in e.errors()
            )
            raise ConfigurationError(
                f"SHOPIFY_SHOPS[{index}] is invalid ({fields})"
            ) from e

    return shops


def load_shop_registry(settings: Settings) -> ShopRegistry:
    """
    Validate shop settings and build the registry.

    Raises:
        ConfigurationError: If the configuration cannot be used
    """
    shops = parse_shops(settings.shopify_shops)

    representative_name = settings.representative_shop.strip()
    if not representative_name:
        raise ConfigurationError("REPRESENTATIVE_SHOP is not set")

    registry = ShopRegistry(shops, representative_name)
    logger.info(f"Loaded {len(registry)} shops: {', '.join(registry.names)}")
    logger.info(f"Representative shop set to: {registry.representative.name}")
    return registry
