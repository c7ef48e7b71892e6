from typing import List

from inventory_api.domain.entities import InventoryRecord


class InventoryServiceInterface:
    def create_record(self, record: InventoryRecord) -> InventoryRecord:
        raise NotImplementedError

    def update_record(self, record_id: str, record: InventoryRecord) -> InventoryRecord:
        raise NotImplementedError

    def delete_record(self, record_id: str) -> None:
        raise NotImplementedError

    def list_records(self) -> List[InventoryRecord]:
        raise NotImplementedError

    def get_record(self, record_id: str) -> InventoryRecord:
        raise NotImplementedError
