from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy import Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from inventory_api.core.config import get_inventory_collection

from .session import Base


def new_record_id() -> str:
    """Opaque identifier assigned to every inserted record."""
    return uuid.uuid4().hex


class InventoryDocument(Base):
    """Stored form of an inventory record.

    The table name comes from INVENTORY_COLLECTION when the module is first
    imported.
    """

    __tablename__ = get_inventory_collection()

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_record_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    category: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self):
        return f"<InventoryDocument(id={self.id}, name='{self.name}', quantity={self.quantity})>"
