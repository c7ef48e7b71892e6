"""
Domain package - pure data layer.

This package contains:
- entities.py: the inventory record entity
"""

from .entities import InventoryRecord

__all__ = [
    "InventoryRecord",
]
