"""
Wire representation of inventory records.

Records travel as JSON objects keyed by ``inventoryId``; the domain entity
keeps the plain ``id`` name.
"""

from typing import Any, Dict, Iterable, List

from inventory_api.domain.entities import InventoryRecord

ID_FIELD = "inventoryId"


def record_to_dict(record: InventoryRecord) -> Dict[str, Any]:
    return {
        ID_FIELD: record.id,
        "name": record.name,
        "quantity": record.quantity,
        "price": record.price,
        "category": record.category,
        "description": record.description,
    }


def records_to_list(records: Iterable[InventoryRecord]) -> List[Dict[str, Any]]:
    return [record_to_dict(record) for record in records]
