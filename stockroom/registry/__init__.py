# stockroom/registry/__init__.py
"""
Stockroom registry.

The registry holds stored items by id and lists them in description order.

Example:
    registry = ItemRegistry()
    registry.add(StoredItem("ITEM002", "Fan Motor", "Aisle 2, Shelf 5"))

    for item in registry.list_by_description():
        print(f"- {item.description}: {item.location}")
"""

from .registry import ItemRegistry

__all__ = ["ItemRegistry"]
