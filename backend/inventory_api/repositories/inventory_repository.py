import logging
from functools import wraps
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from inventory_api.core.exceptions import StoreError
from inventory_api.core.interfaces.repository_interface import InventoryStoreInterface
from inventory_api.db.base import InventoryDocument, new_record_id
from inventory_api.db.session import SessionLocal
from inventory_api.domain.entities import InventoryRecord

logger = logging.getLogger(__name__)

# Driver and mapping failures that callers see as StoreError
STORE_FAILURES = (SQLAlchemyError, ValueError, OverflowError)


def _store_operation(operation: str):
    """Roll back and re-raise store and row-mapping failures as StoreError."""

    def decorator(func):
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)
            except STORE_FAILURES as e:
                try:
                    self.db.rollback()
                except SQLAlchemyError:
                    logger.debug(
                        "Rollback failed after store error",
                        extra={"context": {"operation": operation}},
                    )
                logger.error(
                    "Inventory store operation failed",
                    extra={"context": {"operation": operation, "error": str(e)}},
                )
                raise StoreError(operation, e) from e

        return wrapper

    return decorator


class InventoryRepository(InventoryStoreInterface):
    def __init__(self, db_session=None):
        self.db = db_session or SessionLocal()

    @_store_operation("insert")
    def insert(self, record: InventoryRecord) -> str:
        db_item = InventoryDocument(id=new_record_id())
        self._apply(db_item, record)
        self.db.add(db_item)
        self.db.commit()
        return db_item.id

    @_store_operation("replace")
    def replace(self, record_id: str, record: InventoryRecord) -> bool:
        db_item = self.db.query(InventoryDocument).filter_by(id=record_id).first()
        if not db_item:
            return False
        # Full replace, last write wins
        self._apply(db_item, record)
        self.db.commit()
        return True

    @_store_operation("delete")
    def delete(self, record_id: str) -> bool:
        deleted = (
            self.db.query(InventoryDocument)
            .filter_by(id=record_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted > 0

    @_store_operation("list")
    def list_all(self) -> List[InventoryRecord]:
        return [self._to_domain(i) for i in self.db.query(InventoryDocument).all()]

    @_store_operation("get")
    def get_by_id(self, record_id: str) -> Optional[InventoryRecord]:
        db_item = self.db.query(InventoryDocument).filter_by(id=record_id).first()
        return self._to_domain(db_item) if db_item else None

    @staticmethod
    def _apply(db_item: InventoryDocument, record: InventoryRecord) -> None:
        db_item.name = record.name
        db_item.quantity = record.quantity
        db_item.price = record.price
        db_item.category = record.category
        db_item.description = record.description

    def _to_domain(self, db_item: InventoryDocument) -> InventoryRecord:
        return InventoryRecord(
            id=db_item.id,
            name=db_item.name,
            quantity=db_item.quantity,
            price=db_item.price,
            category=db_item.category,
            description=db_item.description,
        )
