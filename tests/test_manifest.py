# tests/test_manifest.py
"""Tests for YAML item manifests."""

import logging

import pytest

from stockroom.errors import DuplicateKeyError
from stockroom.manifest import Manifest
from stockroom.registry import ItemRegistry

WAREHOUSE_YAML = """
name: warehouse-a
items:
  - id: ITEM001
    description: LED Light
    location: Aisle 3, Shelf 1
  - id: ITEM002
    description: Fan Motor
    location: Aisle 2, Shelf 5
"""

DUPLICATE_YAML = """
name: dupes
items:
  - id: ITEM001
    description: LED Light
    location: Aisle 3, Shelf 1
  - id: ITEM001
    description: LED Light
    location: Aisle 7, Shelf 2
  - id: ITEM002
    description: Fan Motor
    location: Aisle 2, Shelf 5
"""


class TestManifestParsing:
    """Test manifest parsing."""

    def test_from_yaml(self):
        """Test items are parsed in document order."""
        manifest = Manifest.from_yaml(WAREHOUSE_YAML)

        assert manifest.name == "warehouse-a"
        assert [item.id for item in manifest.items] == ["ITEM001", "ITEM002"]
        assert manifest.items[1].location == "Aisle 2, Shelf 5"

    def test_from_file(self, tmp_path):
        """Test loading from a file path."""
        path = tmp_path / "items.yaml"
        path.write_text(WAREHOUSE_YAML)

        manifest = Manifest.from_file(path)
        assert len(manifest.items) == 2

    def test_empty_document(self):
        """Test empty document gives an empty manifest."""
        manifest = Manifest.from_yaml("")
        assert manifest.name == "unnamed"
        assert manifest.items == []

    def test_items_not_list(self):
        """Test non-list items is rejected."""
        with pytest.raises(ValueError, match="must be a list"):
            Manifest.from_yaml("items: ITEM001")

    def test_missing_field(self):
        """Test entry without location names the entry."""
        with pytest.raises(ValueError, match="item 0 missing fields: location"):
            Manifest.from_yaml("items:\n  - id: A\n    description: Widget\n")

    def test_empty_id(self):
        """Test entry with empty id is rejected."""
        with pytest.raises(ValueError, match="item 0 is invalid"):
            Manifest.from_yaml("items:\n  - id: ''\n    description: W\n    location: L\n")


class TestManifestPopulate:
    """Test loading manifests into a registry."""

    def test_populate(self):
        """Test every item is added."""
        registry = ItemRegistry()
        added = Manifest.from_yaml(WAREHOUSE_YAML).populate(registry)

        assert added == ["ITEM001", "ITEM002"]
        assert [i.description for i in registry.list_by_description()] == [
            "Fan Motor",
            "LED Light",
        ]

    def test_duplicate_raises(self):
        """Test duplicate id propagates and keeps earlier items."""
        registry = ItemRegistry()
        manifest = Manifest.from_yaml(DUPLICATE_YAML)

        with pytest.raises(DuplicateKeyError):
            manifest.populate(registry)

        assert registry.find_by_id("ITEM001").location == "Aisle 3, Shelf 1"
        assert "ITEM002" not in registry

    def test_skip_duplicates(self, caplog):
        """Test duplicates are logged and skipped."""
        registry = ItemRegistry()
        manifest = Manifest.from_yaml(DUPLICATE_YAML)

        with caplog.at_level(logging.WARNING, logger="stockroom.manifest"):
            added = manifest.populate(registry, skip_duplicates=True)

        assert added == ["ITEM001", "ITEM002"]
        assert registry.find_by_id("ITEM001").location == "Aisle 3, Shelf 1"
        assert "already exists" in caplog.text
