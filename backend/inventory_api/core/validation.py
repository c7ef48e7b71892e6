"""
Validation utilities for inventory request payloads.

Validators collect every field error into a ValidationResult so a single
response can report all of them; parse_inventory_payload() turns a failed
result into a ValidationError.
"""

import logging
import math
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

from inventory_api.core.exceptions import ValidationError
from inventory_api.domain.entities import InventoryRecord

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 255
CATEGORY_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1000
# Upper bound of the 32-bit INTEGER column backing quantity
QUANTITY_MAX = 2**31 - 1


class ValidationResult:
    """Container for validation results."""

    def __init__(self):
        self.errors: List[str] = []
        self.is_valid: bool = True
        self.cleaned_data: Dict[str, Any] = {}

    def add_error(self, message: str, field: Optional[str] = None):
        """Add validation error."""
        error_msg = f"{field}: {message}" if field else message
        self.errors.append(error_msg)
        self.is_valid = False
        logger.debug(f"Validation error: {error_msg}")


class BaseValidator:
    """Base validator with common validation methods."""

    def validate(
        self, data: Dict[str, Any]
    ) -> ValidationResult:  # pragma: no cover - interface definition
        """Validate data for a specific entity type."""
        raise NotImplementedError("Subclasses must implement validate")

    @staticmethod
    def validate_required_field(
        value: Any, field_name: str, result: ValidationResult
    ) -> bool:
        """Validate that a required field is present and not empty."""
        if (
            value is None
            or value == ""
            or (isinstance(value, str) and value.strip() == "")
        ):
            result.add_error("is required", field_name)
            return False
        return True

    @staticmethod
    def validate_integer(
        value: Any,
        field_name: str,
        result: ValidationResult,
        min_value: Optional[int] = None,
        max_value: Optional[int] = None,
    ) -> Optional[int]:
        """Validate and convert integer field."""
        if isinstance(value, bool):
            result.add_error("must be an integer", field_name)
            return None

        if isinstance(value, float):
            if not value.is_integer():
                result.add_error("must be an integer", field_name)
                return None
            int_value = int(value)
        else:
            try:
                int_value = int(value)
            except (ValueError, TypeError):
                result.add_error("must be an integer", field_name)
                return None

        if min_value is not None and int_value < min_value:
            result.add_error(f"must be greater than or equal to {min_value}", field_name)
            return None

        if max_value is not None and int_value > max_value:
            result.add_error(f"must be less than or equal to {max_value}", field_name)
            return None

        return int_value

    @staticmethod
    def validate_number(
        value: Any,
        field_name: str,
        result: ValidationResult,
        min_value: Optional[float] = None,
    ) -> Optional[float]:
        """Validate and convert a finite numeric field."""
        if isinstance(value, bool):
            result.add_error("must be a number", field_name)
            return None

        try:
            if isinstance(value, str):
                value = value.strip()
            number = float(Decimal(str(value)))
        except (InvalidOperation, TypeError, ValueError):
            result.add_error("must be a number", field_name)
            return None

        if not math.isfinite(number):
            result.add_error("must be a finite number", field_name)
            return None

        if min_value is not None and number < min_value:
            result.add_error(f"must be greater than or equal to {min_value}", field_name)
            return None

        return number

    @staticmethod
    def validate_string(
        value: Any,
        field_name: str,
        result: ValidationResult,
        max_length: Optional[int] = None,
    ) -> Optional[str]:
        """Validate string field; blank strings become None."""
        if value is None:
            return None

        if not isinstance(value, str):
            result.add_error("must be a string", field_name)
            return None

        value = value.strip()

        if max_length is not None and len(value) > max_length:
            result.add_error(f"must be at most {max_length} characters", field_name)
            return None

        return value if value else None


class InventoryRecordValidator(BaseValidator):
    """Validator for inventory record payloads (create and full replace)."""

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        result = ValidationResult()

        if self.validate_required_field(data.get("name"), "name", result):
            name = self.validate_string(
                data.get("name"), "name", result, max_length=NAME_MAX_LENGTH
            )
            if name is not None:
                result.cleaned_data["name"] = name

        quantity = data.get("quantity")
        if quantity is None:
            result.cleaned_data["quantity"] = 0
        else:
            quantity = self.validate_integer(
                quantity, "quantity", result, min_value=0, max_value=QUANTITY_MAX
            )
            if quantity is not None:
                result.cleaned_data["quantity"] = quantity

        price = data.get("price")
        if price is None:
            result.cleaned_data["price"] = 0.0
        else:
            price = self.validate_number(price, "price", result, min_value=0)
            if price is not None:
                result.cleaned_data["price"] = price

        result.cleaned_data["category"] = self.validate_string(
            data.get("category"), "category", result, max_length=CATEGORY_MAX_LENGTH
        )
        result.cleaned_data["description"] = self.validate_string(
            data.get("description"),
            "description",
            result,
            max_length=DESCRIPTION_MAX_LENGTH,
        )

        return result


def parse_inventory_payload(data: Any) -> InventoryRecord:
    """Validate a decoded JSON body and build the record it describes.

    Raises:
        ValidationError: when the body is not an object or a field is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")

    result = InventoryRecordValidator().validate(data)
    if not result.is_valid:
        raise ValidationError("Invalid inventory payload", result.errors)

    return InventoryRecord(**result.cleaned_data)


def parse_inventory_id(value: Any) -> str:
    """Normalize an inventory id taken from a path, query string or body."""
    if isinstance(value, bool) or value is None:
        raise ValidationError("inventoryId is required", ["inventoryId: is required"])
    if isinstance(value, int):
        value = str(value)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("inventoryId is required", ["inventoryId: is required"])
    return value.strip()
