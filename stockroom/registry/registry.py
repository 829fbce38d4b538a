# stockroom/registry/registry.py
"""
In-memory item registry.

Items are indexed twice:
- by id (primary index, authoritative for existence)
- by description (secondary index, used for ordered listings)

The secondary index maps each description to the id of the item that
currently occupies it. When two live items share a description, the most
recently added one holds the slot; the older item remains reachable by id
but is no longer listed.
"""

import logging
import threading
from typing import Dict, Iterator, List, Optional

from ..errors import DuplicateKeyError, ItemNotFoundError
from ..item import StoredItem

logger = logging.getLogger(__name__)


class ItemRegistry:
    """
    Registry of stored items keyed by id, listable by description.

    Usage:
        registry = ItemRegistry()
        registry.add(StoredItem("ITEM001", "LED Light", "Aisle 3, Shelf 1"))
        registry.find_by_id("ITEM001").location  # "Aisle 3, Shelf 1"
        [item.description for item in registry.list_by_description()]
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._by_id: Dict[str, StoredItem] = {}
        self._by_description: Dict[str, str] = {}

    def add(self, item: StoredItem) -> None:
        """
        Add an item to both indexes.

        Raises:
            DuplicateKeyError: If an item with the same id is registered.
                The registry is left unchanged.
        """
        with self._lock:
            if item.id in self._by_id:
                raise DuplicateKeyError(item.id)

            previous = self._by_description.get(item.description)
            if previous is not None:
                logger.debug(
                    f"Description {item.description!r} moves from {previous} to {item.id}"
                )

            self._by_id[item.id] = item
            self._by_description[item.description] = item.id
            logger.debug(f"Added item {item.id}")

    def find_by_id(self, item_id: str) -> StoredItem:
        """
        Get the item registered under an id.

        Raises:
            ItemNotFoundError: If no such item exists.
        """
        with self._lock:
            item = self._by_id.get(item_id)
        if item is None:
            logger.debug(f"Lookup miss: {item_id}")
            raise ItemNotFoundError(item_id)
        return item

    def get(self, item_id: str) -> Optional[StoredItem]:
        """Get an item by id, or None if absent."""
        with self._lock:
            return self._by_id.get(item_id)

    def remove(self, item_id: str) -> None:
        """
        Remove an item from the registry.

        The description slot is only cleared if it still belongs to this
        item; a newer item sharing the description keeps its slot.

        Raises:
            ItemNotFoundError: If no such item exists. The registry is
                left unchanged.
        """
        with self._lock:
            item = self._by_id.pop(item_id, None)
            if item is None:
                raise ItemNotFoundError(item_id)

            if self._by_description.get(item.description) == item_id:
                del self._by_description[item.description]
            logger.debug(f"Removed item {item_id}")

    def list_by_description(self) -> List[StoredItem]:
        """List items reachable by description, in ascending description order."""
        with self._lock:
            return [
                self._by_id[self._by_description[description]]
                for description in sorted(self._by_description)
            ]

    def __contains__(self, item_id: str) -> bool:
        with self._lock:
            return item_id in self._by_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_id)

    def __iter__(self) -> Iterator[StoredItem]:
        return iter(self.list_by_description())
