# stockroom/item.py
"""
Stored item records.

An item is identified by a caller-chosen id and carries a human-readable
description (used for ordered listings) and an opaque location string.
Records are frozen once constructed.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class StoredItem:
    """
    A single item held by the registry.

    Attributes:
        id: Unique, non-empty identifier chosen by the caller
        description: Human-readable description (secondary key)
        location: Where the item lives, e.g. "Aisle 3, Shelf 1"
    """
    id: str
    description: str
    location: str

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id:
            raise ValueError(f"Item id must be a non-empty string, got {self.id!r}")
        if not isinstance(self.description, str):
            raise ValueError(f"Item {self.id} description must be a string")
        if not isinstance(self.location, str):
            raise ValueError(f"Item {self.id} location must be a string")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "location": self.location,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StoredItem":
        return cls(
            id=data["id"],
            description=data["description"],
            location=data["location"],
        )
