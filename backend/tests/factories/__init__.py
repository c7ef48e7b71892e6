from .repository_factories import InventoryServiceFactory, InventoryStoreFactory

__all__ = ["InventoryServiceFactory", "InventoryStoreFactory"]
