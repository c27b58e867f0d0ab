"""
In-memory snapshot store.
Process local, no expiry and no locking: the last write for a SKU wins.
"""

from typing import Dict, List, Optional

from .models import VariantSnapshot


class SnapshotStore:
    """Last fetched variant data keyed by SKU."""

    def __init__(self):
        self._snapshots: Dict[str, VariantSnapshot] = {}

    def get(self, sku: str) -> Optional[VariantSnapshot]:
        return self._snapshots.get(sku)

    def put(self, snapshot: VariantSnapshot) -> None:
        """Store a snapshot, replacing any previous one for the same SKU."""
        self._snapshots[snapshot.sku] = snapshot

    def skus(self) -> List[str]:
        return list(self._snapshots)

    def clear(self) -> None:
        self._snapshots.clear()

    def __contains__(self, sku: object) -> bool:
        return sku in self._snapshots

    def __len__(self) -> int:
        return len(self._snapshots)
