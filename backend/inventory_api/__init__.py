"""Inventory API - CRUD service over a single collection of inventory records."""

__version__ = "1.0.0"
