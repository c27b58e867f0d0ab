"""
Fetch route - load one variant from the representative shop.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from ..dependencies import get_client_factory, get_registry, get_snapshot_store
from ..processor import (
    ClientFactory, InvalidInputError, VariantNotFoundError, fetch_variant
)
from ..shopify import ShopifyTransportError, ShopifyUpstreamError
from ..state import ShopRegistry, SnapshotStore, VariantSnapshot
from .errors import ApiError

logger = logging.getLogger(__name__)

router = APIRouter()


class FetchResponse(BaseModel):
    message: str
    data: VariantSnapshot


@router.get("/fetch", response_model=FetchResponse)
async def fetch(
    sku: Optional[str] = Query(None),
    registry: ShopRegistry = Depends(get_registry),
    store: SnapshotStore = Depends(get_snapshot_store),
    client_factory: ClientFactory = Depends(get_client_factory),
):
    """Fetch a variant by SKU and remember it for later updates."""
    if not sku or not sku.strip():
        raise ApiError(400, "Missing required query parameter: sku")

    shop = registry.representative

    try:
        async with client_factory(shop) as client:
            snapshot = await fetch_variant(sku, shop, store, client)
    except InvalidInputError as e:
        raise ApiError(400, str(e))
    except VariantNotFoundError as e:
        raise ApiError(404, str(e))
    except ShopifyUpstreamError as e:
        logger.error(f"Shopify error fetching '{sku}': {e}")
        raise ApiError(500, f"Shopify API error: {e}", details=e.details)
    except ShopifyTransportError as e:
        logger.error(f"Transport error fetching '{sku}': {e}")
        raise ApiError(500, str(e))
    except Exception:
        logger.exception("Error in /fetch")
        raise ApiError(500, "Fetch failed.")

    return FetchResponse(message="Fetch completed successfully.", data=snapshot)
