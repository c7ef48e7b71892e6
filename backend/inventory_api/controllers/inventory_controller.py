"""
Inventory controller for handling HTTP requests.

This controller:
- Handles HTTP concerns only (parsing, status codes, serialization)
- Builds the service per request around a fresh store session
- Leaves error rendering to the application error handlers
"""

from contextlib import contextmanager
from typing import Iterator

from flask import Blueprint, jsonify, request

from inventory_api.core.api_utils import get_json_body
from inventory_api.core.limiter_config import READ_LIMIT, WRITE_LIMIT, limiter
from inventory_api.core.validation import parse_inventory_id, parse_inventory_payload
from inventory_api.db.session import SessionLocal
from inventory_api.domain.entities import InventoryRecord
from inventory_api.repositories.inventory_repository import InventoryRepository
from inventory_api.schemas.inventory import ID_FIELD, record_to_dict, records_to_list
from inventory_api.services.inventory_service import InventoryService

inventory_bp = Blueprint("inventory", __name__, url_prefix="/inventory")


@contextmanager
def inventory_service() -> Iterator[InventoryService]:
    """Yield a service bound to a request-scoped store session."""
    db = SessionLocal()
    try:
        yield InventoryService(InventoryRepository(db))
    finally:
        db.close()


@inventory_bp.route("", methods=["GET"], strict_slashes=False)
@limiter.limit(READ_LIMIT)
def list_inventory():
    """List all inventory records in store order."""
    with inventory_service() as service:
        records = service.list_records()
    return jsonify(records_to_list(records)), 200


@inventory_bp.route("/<inventory_id>", methods=["GET"])
@limiter.limit(READ_LIMIT)
def get_inventory(inventory_id):
    with inventory_service() as service:
        record = service.get_record(parse_inventory_id(inventory_id))
    return jsonify(record_to_dict(record)), 200


@inventory_bp.route("", methods=["POST"], strict_slashes=False)
@limiter.limit(WRITE_LIMIT)
def create_inventory():
    """Create a record; any inventoryId in the body is ignored."""
    record = parse_inventory_payload(get_json_body())
    with inventory_service() as service:
        created = service.create_record(record)
    return jsonify(record_to_dict(created)), 201


@inventory_bp.route("", methods=["PUT"], strict_slashes=False)
@limiter.limit(WRITE_LIMIT)
def update_inventory():
    """Replace the record named by the body's inventoryId."""
    data = get_json_body()
    record = parse_inventory_payload(data)
    return _replace(parse_inventory_id(data.get(ID_FIELD)), record)


@inventory_bp.route("/<inventory_id>", methods=["PUT"])
@limiter.limit(WRITE_LIMIT)
def update_inventory_by_path(inventory_id):
    record = parse_inventory_payload(get_json_body())
    return _replace(parse_inventory_id(inventory_id), record)


def _replace(inventory_id: str, record: InventoryRecord):
    with inventory_service() as service:
        updated = service.update_record(inventory_id, record)
    return jsonify(record_to_dict(updated)), 200


@inventory_bp.route("", methods=["DELETE"], strict_slashes=False)
@limiter.limit(WRITE_LIMIT)
def delete_inventory():
    """Delete the record named by ?inventoryId= or the body's inventoryId."""
    inventory_id = request.args.get(ID_FIELD)
    if inventory_id is None:
        data = get_json_body(required=False)
        if isinstance(data, dict):
            inventory_id = data.get(ID_FIELD)
    return _delete(parse_inventory_id(inventory_id))


@inventory_bp.route("/<inventory_id>", methods=["DELETE"])
@limiter.limit(WRITE_LIMIT)
def delete_inventory_by_path(inventory_id):
    return _delete(parse_inventory_id(inventory_id))


def _delete(inventory_id: str):
    with inventory_service() as service:
        service.delete_record(inventory_id)
    return "", 204
