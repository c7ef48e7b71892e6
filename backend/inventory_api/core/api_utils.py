"""
Common API utilities for consistent response formatting across all controllers.
"""

from typing import Any, Optional

from flask import jsonify, request

from inventory_api.core.exceptions import ValidationError


def api_response(
    success: bool, message: str, data: Optional[Any] = None, status_code: int = 200
) -> tuple:
    """
    Standardized API envelope, used for errors and confirmations.

    Args:
        success: Whether the operation was successful
        message: Human-readable message about the operation
        data: Optional data payload
        status_code: HTTP status code

    Returns:
        Tuple of (json_response, status_code)
    """
    response = {"success": success, "message": message}

    if data is not None:
        response["data"] = data

    return jsonify(response), status_code


def get_json_body(required: bool = True) -> Any:
    """
    Decode the request body as JSON.

    Raises:
        ValidationError: if the body is missing (when required) or not valid JSON
    """
    data = request.get_json(silent=True)
    if data is None and (required or request.get_data()):
        raise ValidationError("Request body must be valid JSON")
    return data
