#!/usr/bin/env python3
"""
Check the shop configuration without starting the server.
Usage: cd /path/to/app && /path/to/venv/bin/python scripts/check_config.py

Exits with status 1 if SHOPIFY_SHOPS or REPRESENTATIVE_SHOP is invalid.
"""

import logging
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from variant_relay.config import ConfigurationError, settings
from variant_relay.state import load_shop_registry

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def main():
    try:
        registry = load_shop_registry(settings)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    print(f"{len(registry)} shops configured:")
    for shop in registry:
        marker = " (representative)" if shop is registry.representative else ""
        print(f"  {shop.name:<12} {shop.domain}{marker}")
    print(f"API version: {settings.shopify_api_version}")
    print(f"Timeouts: {settings.request_timeout}s (connect {settings.connect_timeout}s)")


if __name__ == "__main__":
    main()
