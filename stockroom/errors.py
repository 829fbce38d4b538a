# stockroom/errors.py
"""Errors raised by the item registry."""


class RegistryError(Exception):
    """Base class for registry failures tied to a specific item id."""

    def __init__(self, item_id: str, message: str):
        super().__init__(message)
        self.item_id = item_id


class DuplicateKeyError(RegistryError):
    """An item with the same id is already registered."""

    def __init__(self, item_id: str):
        super().__init__(item_id, f"Item using id {item_id} already exists!")


class ItemNotFoundError(RegistryError):
    """No item with the requested id is registered."""

    def __init__(self, item_id: str):
        super().__init__(item_id, f"Item using id {item_id} not found.")
