"""
Custom exceptions for the application.

Every failure an inventory operation can surface derives from
InventoryError and carries the HTTP status it is rendered with.
"""

from typing import List, Optional


class InventoryError(Exception):
    """Base class for inventory operation failures."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_data(self) -> Optional[dict]:
        return None


class ValidationError(InventoryError):
    """
    Raised when a request payload is malformed or misses a required field.
    """

    status_code = 400

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = list(errors or [])

    def to_data(self) -> Optional[dict]:
        return {"errors": self.errors} if self.errors else None


class NotFoundError(InventoryError):
    """Raised when the referenced inventory id is absent from the store."""

    status_code = 404

    def __init__(self, record_id: str):
        super().__init__(f"Inventory record '{record_id}' not found")
        self.record_id = record_id


class StoreError(InventoryError):
    """Raised when the store is unreachable or fails unexpectedly."""

    status_code = 500

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        super().__init__(f"Inventory store failed during {operation}")
        self.operation = operation
        self.cause = cause
