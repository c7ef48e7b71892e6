"""
Domain entities - pure data, no framework dependencies.

The entity is independent of:
- Database implementation (SQLAlchemy)
- HTTP frameworks (Flask)
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class InventoryRecord:
    """Domain entity for one tracked inventory item.

    ``id`` stays None until the store assigns one on insert.
    """

    name: str = ""
    quantity: int = 0
    price: float = 0.0
    category: Optional[str] = None
    description: Optional[str] = None
    id: Optional[str] = None

    def __post_init__(self):
        """Validate domain rules."""
        if not self.name or not self.name.strip():
            raise ValueError("Name is required")
        if self.quantity < 0:
            raise ValueError("Quantity cannot be negative")
        if self.price < 0:
            raise ValueError("Price cannot be negative")
