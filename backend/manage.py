"""Management commands for the Inventory API."""

from __future__ import annotations

import logging

import click
from sqlalchemy.exc import SQLAlchemyError

from inventory_api.controllers.health_controller import check_store_connection
from inventory_api.core.config import get_database_url, get_inventory_collection, mask_url_password
from inventory_api.core.exceptions import StoreError
from inventory_api.db.session import SessionLocal, create_tables
from inventory_api.domain.entities import InventoryRecord
from inventory_api.repositories.inventory_repository import InventoryRepository
from inventory_api.services.inventory_service import InventoryService

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

SAMPLE_RECORDS = [
    InventoryRecord(name="Widget", quantity=5, price=9.99, category="hardware"),
    InventoryRecord(name="Gadget", quantity=12, price=24.5, category="hardware"),
    InventoryRecord(
        name="Cable", quantity=40, price=3.25, description="USB-C, 1 meter"
    ),
]


@click.group()
def cli() -> None:
    """Entry point for management commands."""


@cli.command("init-db")
def init_db() -> None:
    """Create the inventory collection table if it is missing."""
    try:
        create_tables()
    except SQLAlchemyError as e:
        raise click.ClickException(f"Could not create tables: {e}")
    logging.info(
        "Collection '%s' ready at %s",
        get_inventory_collection(),
        mask_url_password(get_database_url()),
    )


@cli.command("check-db")
def check_db() -> None:
    """Exit non-zero when the store is unreachable."""
    if not check_store_connection():
        raise click.ClickException(
            f"Store unreachable at {mask_url_password(get_database_url())}"
        )
    logging.info("Store reachable.")


@cli.command("seed")
def seed() -> None:
    """Insert a handful of sample inventory records."""
    try:
        create_tables()
    except SQLAlchemyError as e:
        raise click.ClickException(f"Could not create tables: {e}")

    session = SessionLocal()
    try:
        service = InventoryService(InventoryRepository(session))
        for record in SAMPLE_RECORDS:
            created = service.create_record(record)
            logging.info("Inserted %s (%s)", created.name, created.id)
    except StoreError as e:
        raise click.ClickException(str(e))
    finally:
        session.close()


if __name__ == "__main__":
    cli()
