import logging
from dataclasses import replace
from typing import List

from ..core.exceptions import NotFoundError
from ..core.interfaces.repository_interface import InventoryStoreInterface
from ..core.interfaces.service_interface import InventoryServiceInterface
from ..domain.entities import InventoryRecord

logger = logging.getLogger(__name__)


class InventoryService(InventoryServiceInterface):
    """Inventory operations over an injected store.

    Holds no state besides the store handle; every call is a single round
    trip and store failures propagate unchanged.
    """

    def __init__(self, repository: InventoryStoreInterface):
        self.repository = repository

    def create_record(self, record: InventoryRecord) -> InventoryRecord:
        record_id = self.repository.insert(replace(record, id=None))
        logger.info(
            "Inventory record created",
            extra={"context": {"inventory_id": record_id, "name": record.name}},
        )
        return replace(record, id=record_id)

    def update_record(self, record_id: str, record: InventoryRecord) -> InventoryRecord:
        updated = replace(record, id=record_id)
        if not self.repository.replace(record_id, updated):
            raise NotFoundError(record_id)
        logger.info(
            "Inventory record updated",
            extra={"context": {"inventory_id": record_id}},
        )
        return updated

    def delete_record(self, record_id: str) -> None:
        if not self.repository.delete(record_id):
            raise NotFoundError(record_id)
        logger.info(
            "Inventory record deleted",
            extra={"context": {"inventory_id": record_id}},
        )

    def list_records(self) -> List[InventoryRecord]:
        return self.repository.list_all()

    def get_record(self, record_id: str) -> InventoryRecord:
        record = self.repository.get_by_id(record_id)
        if record is None:
            raise NotFoundError(record_id)
        return record
