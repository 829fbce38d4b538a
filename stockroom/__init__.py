# stockroom - In-memory item registry with ordered listings
#
# Items are registered under a caller-chosen id and listed in description
# order. Lookups by id are exact; listings are recomputed on every call.
#
# Core concepts:
# - StoredItem: An immutable record with id, description and location
# - ItemRegistry: Dual-index registry (id -> item, description -> id)
# - Manifest: YAML list of items used to populate a registry

from .errors import RegistryError, DuplicateKeyError, ItemNotFoundError
from .item import StoredItem
from .registry import ItemRegistry
from .manifest import Manifest

__all__ = [
    "RegistryError",
    "DuplicateKeyError",
    "ItemNotFoundError",
    "StoredItem",
    "ItemRegistry",
    "Manifest",
]

__version__ = "0.1.0"
