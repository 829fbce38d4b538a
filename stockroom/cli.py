#!/usr/bin/env python3
"""
Stockroom CLI

Command-line interface for the item registry:
  stockroom demo - Run the scripted demonstration
  stockroom list - Load a manifest and list items by description
  stockroom find - Load a manifest and look up one item

Usage:
  stockroom demo
  stockroom list <manifest.yaml> [--skip-duplicates]
  stockroom find <manifest.yaml> <id>
"""

import argparse
import logging
import sys
from typing import List, Optional

from .errors import DuplicateKeyError, ItemNotFoundError
from .item import StoredItem
from .manifest import Manifest
from .registry import ItemRegistry

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

SAMPLE_ITEMS = [
    StoredItem("ITEM001", "LED Light", "Aisle 3, Shelf 1"),
    StoredItem("ITEM002", "Fan Motor", "Aisle 2, Shelf 5"),
]


def print_listing(registry: ItemRegistry):
    """Print items in description order."""
    for item in registry.list_by_description():
        print(f"- {item.description}: {item.location}")


def check_duplicate_addition():
    """Adding the same record twice is rejected."""
    registry = ItemRegistry()
    item = StoredItem("ITEM001", "LED Light", "Aisle 3, Shelf 1")
    registry.add(item)

    try:
        registry.add(item)
    except DuplicateKeyError as e:
        print(f"[Test] caught duplicate addition: {e}")


def check_item_not_found():
    """Looking up an unknown id is rejected."""
    registry = ItemRegistry()
    try:
        registry.find_by_id("NOITEM")
    except ItemNotFoundError as e:
        print(f"[Test] Caught item not found: {e}")


def cmd_demo(args):
    """Run the scripted demonstration."""
    registry = ItemRegistry()
    item1, item2 = SAMPLE_ITEMS

    for item in (item1, item2):
        print(f"Adding item: {item.id} - {item.description}")
        registry.add(item)

    print(f"Attempting to add {item1.id} again...")
    try:
        registry.add(item1)
    except DuplicateKeyError as e:
        print(f"Error: {e}")

    print(f"Retrieving {item2.id}...")
    found = registry.find_by_id(item2.id)
    print(f"Found: {found.description} at {found.location}")

    print("Removing ITEM003...")
    try:
        registry.remove("ITEM003")
    except ItemNotFoundError as e:
        print(f"Error: {e}")

    print("Items in Description Order:")
    print_listing(registry)

    check_duplicate_addition()
    check_item_not_found()
    return 0


def _load_registry(args) -> ItemRegistry:
    manifest = Manifest.from_file(args.manifest)
    registry = ItemRegistry()
    manifest.populate(registry, skip_duplicates=getattr(args, "skip_duplicates", False))
    return registry


def cmd_list(args):
    """List a manifest's items by description."""
    registry = _load_registry(args)
    print_listing(registry)
    return 0


def cmd_find(args):
    """Look up one item from a manifest."""
    registry = _load_registry(args)
    try:
        item = registry.find_by_id(args.id)
    except ItemNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"{item.description} at {item.location}")
    return 0


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        prog="stockroom",
        description="Stockroom - Item registry with ordered listings",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("demo", help="Run the scripted demonstration")

    list_parser = subparsers.add_parser("list", help="List manifest items by description")
    list_parser.add_argument("manifest", help="Manifest YAML file")
    list_parser.add_argument("--skip-duplicates", action="store_true",
                             help="Skip items whose id is already loaded")

    find_parser = subparsers.add_parser("find", help="Find a manifest item by id")
    find_parser.add_argument("manifest", help="Manifest YAML file")
    find_parser.add_argument("id", help="Item id")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    if args.command == "demo":
        code = cmd_demo(args)
    elif args.command == "list":
        code = cmd_list(args)
    elif args.command == "find":
        code = cmd_find(args)
    else:
        parser.print_help()
        code = 1

    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
