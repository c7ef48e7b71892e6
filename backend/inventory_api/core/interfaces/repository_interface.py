from typing import List, Optional

from inventory_api.domain.entities import InventoryRecord


class InventoryStoreInterface:
    """Minimal contract the inventory service needs from a store."""

    def insert(self, record: InventoryRecord) -> str:
        """Persist a new record and return the identifier assigned to it."""
        raise NotImplementedError

    def replace(self, record_id: str, record: InventoryRecord) -> bool:
        """Replace the mutable fields of ``record_id``. False when absent."""
        raise NotImplementedError

    def delete(self, record_id: str) -> bool:
        """Remove ``record_id``. False when absent."""
        raise NotImplementedError

    def list_all(self) -> List[InventoryRecord]:
        raise NotImplementedError

    def get_by_id(self, record_id: str) -> Optional[InventoryRecord]:
        raise NotImplementedError
