# stockroom/manifest.py
"""
YAML item manifests.

A manifest lists items to load into a registry:

    name: warehouse-a
    items:
      - id: ITEM001
        description: LED Light
        location: Aisle 3, Shelf 1
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

import yaml

from .errors import DuplicateKeyError
from .item import StoredItem
from .registry import ItemRegistry

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("id", "description", "location")


@dataclass
class Manifest:
    """Parsed item manifest."""
    name: str = "unnamed"
    items: List[StoredItem] = field(default_factory=list)

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "Manifest":
        """Parse manifest from YAML string."""
        data = yaml.safe_load(yaml_content) or {}
        if not isinstance(data, dict):
            raise ValueError("Manifest must be a mapping with an 'items' list")

        raw_items = data.get("items", [])
        if not isinstance(raw_items, list):
            raise ValueError("Manifest 'items' must be a list")

        items = []
        for index, entry in enumerate(raw_items):
            if not isinstance(entry, dict):
                raise ValueError(f"Manifest item {index} must be a mapping")
            missing = [f for f in REQUIRED_FIELDS if f not in entry]
            if missing:
                raise ValueError(f"Manifest item {index} missing fields: {', '.join(missing)}")
            try:
                items.append(StoredItem.from_dict(entry))
            except ValueError as e:
                raise ValueError(f"Manifest item {index} is invalid: {e}") from e

        return cls(name=str(data.get("name", "unnamed")), items=items)

    @classmethod
    def from_file(cls, path: Path | str) -> "Manifest":
        """Load manifest from YAML file."""
        with open(path, "r") as f:
            return cls.from_yaml(f.read())

    def populate(self, registry: ItemRegistry, skip_duplicates: bool = False) -> List[str]:
        """
        Add the manifest's items to a registry, in order.

        Args:
            registry: Registry to add to
            skip_duplicates: If True, log and skip items whose id is already
                registered instead of raising

        Returns:
            Ids of the items that were added
        """
        added = []
        for item in self.items:
            try:
                registry.add(item)
            except DuplicateKeyError as e:
                if not skip_duplicates:
                    raise
                logger.warning(f"Skipping item in manifest {self.name}: {e}")
                continue
            added.append(item.id)

        logger.debug(f"Loaded {len(added)} items from manifest {self.name}")
        return added
