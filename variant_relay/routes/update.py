"""
Update route - push edited rows to the selected shops.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ..dependencies import get_client_factory, get_registry, get_snapshot_store
from ..processor import ClientFactory, update_variants
from ..state import ShopRegistry, SnapshotStore, UpdateRequest, UpdateResult
from .errors import ApiError

logger = logging.getLogger(__name__)

router = APIRouter()


class UpdateResponse(BaseModel):
    message: str
    results: List[UpdateResult]


@router.post(
    "/update", response_model=UpdateResponse, response_model_exclude_none=True
)
async def update(
    payload: UpdateRequest,
    registry: ShopRegistry = Depends(get_registry),
    store: SnapshotStore = Depends(get_snapshot_store),
    client_factory: ClientFactory = Depends(get_client_factory),
):
    """Apply each row's changes to every selected shop."""
    try:
        results = await update_variants(
            payload.updated_rows,
            payload.selected_shops,
            registry,
            store,
            client_factory,
        )
    except Exception:
        logger.exception("Error in /update")
        raise ApiError(500, "Update failed.")

    return UpdateResponse(message="Update process completed.", results=results)
