"""
Application-wide error handlers.

Each InventoryError subclass is rendered with its own HTTP status in the
standard API envelope. Nothing is retried here.
"""

import logging

from flask import Flask, request
from werkzeug.exceptions import HTTPException

from inventory_api.core.api_utils import api_response
from inventory_api.core.exceptions import (
    InventoryError,
    NotFoundError,
    StoreError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def handle_validation_error(error: ValidationError):
    logger.warning(
        "Rejected inventory payload",
        extra={
            "context": {
                "method": request.method,
                "path": request.path,
                "errors": error.errors,
            }
        },
    )
    return api_response(False, error.message, error.to_data(), error.status_code)


def handle_not_found(error: NotFoundError):
    logger.info(
        "Inventory record not found",
        extra={"context": {"inventory_id": error.record_id, "path": request.path}},
    )
    return api_response(False, error.message, None, error.status_code)


def handle_store_error(error: StoreError):
    logger.error(
        "Inventory store failure",
        extra={
            "context": {
                "operation": error.operation,
                "method": request.method,
                "path": request.path,
                "error": str(error.cause) if error.cause else None,
            }
        },
        exc_info=error,
    )
    return api_response(False, error.message, None, error.status_code)


def handle_inventory_error(error: InventoryError):
    return api_response(False, error.message, error.to_data(), error.status_code)


def handle_http_exception(error: HTTPException):
    return api_response(False, error.description or error.name, None, error.code or 500)


def register_error_handlers(app: Flask) -> None:
    app.register_error_handler(ValidationError, handle_validation_error)
    app.register_error_handler(NotFoundError, handle_not_found)
    app.register_error_handler(StoreError, handle_store_error)
    app.register_error_handler(InventoryError, handle_inventory_error)
    app.register_error_handler(HTTPException, handle_http_exception)
