"""Import categories and items from a JSON file into MongoDB.

The file holds a list of categories, each with nested items:

  [
    {
      "name": "Tools",
      "description": "Hand tools",
      "items": [
        {"name": "Hammer", "description": "Claw hammer", "price": 12.5, "stock": 4}
      ]
    }
  ]

Usage:
  MONGODB_URI=mongodb://localhost:27017 MONGODB_DB=inventory_app \
    python scripts/import_inventory.py inventory.json

Options:
  --mongo-uri / --mongo-db   override the environment
  --skip-existing            skip categories whose name already exists
                             (case-insensitive), including their items
"""

from __future__ import annotations

import argparse
import json
import logging
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pymongo import MongoClient

from inventory_app.repositories.category_repository import CategoryRepository
from inventory_app.repositories.item_repository import ItemRepository
from inventory_app.schemas.base import validate_form
from inventory_app.schemas.category import CategoryFormSchema
from inventory_app.schemas.item import ItemFormSchema


logger = logging.getLogger(__name__)


def _load(path: Path) -> list[dict[str, Any]]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, list):
        raise ValueError(f"{path}: expected a list of categories")
    return payload


def import_inventory(
    categories: CategoryRepository,
    items: ItemRepository,
    payload: list[dict[str, Any]],
    *,
    skip_existing: bool = False,
) -> tuple[int, int]:
    """Insert categories and their items; returns (categories, items) inserted."""

    category_schema = CategoryFormSchema()
    item_schema = ItemFormSchema()
    imported_categories = 0
    imported_items = 0

    for entry in payload:
        result = validate_form(category_schema, entry)
        if not result.ok:
            logger.warning("Skipping category %r: %s", entry.get("name"), "; ".join(result.messages()))
            continue

        category = categories.find_by_name_case_insensitive(result.data["name"])
        if category is not None and skip_existing:
            logger.info("Category %r exists (id=%s), skipping", category.name, category.id)
            continue
        if category is None:
            category = categories.create(result.data["name"], result.data["description"])
            imported_categories += 1

        for raw_item in entry.get("items") or []:
            item_result = validate_form(item_schema, {**raw_item, "category": category.id})
            if not item_result.ok:
                logger.warning(
                    "Skipping item %r: %s",
                    raw_item.get("name"),
                    "; ".join(item_result.messages()),
                )
                continue
            items.create(item_result.data)
            imported_items += 1

    return imported_categories, imported_items


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Import categories and items from JSON into MongoDB")
    parser.add_argument("path", type=Path)
    parser.add_argument("--mongo-uri", dest="mongo_uri", type=str, default=None)
    parser.add_argument("--mongo-db", dest="mongo_db", type=str, default=None)
    parser.add_argument("--skip-existing", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    mongo_uri = args.mongo_uri or os.getenv("MONGODB_URI") or "mongodb://localhost:27017"
    mongo_db = args.mongo_db or os.getenv("MONGODB_DB") or "inventory_app"
    logger.info("MongoDB: %s (db=%s)", mongo_uri, mongo_db)

    payload = _load(args.path)

    client = MongoClient(mongo_uri)
    try:
        db = client[mongo_db]
        n_categories, n_items = import_inventory(
            CategoryRepository(db),
            ItemRepository(db),
            payload,
            skip_existing=args.skip_existing,
        )
    finally:
        client.close()

    logger.info("Imported %s categories and %s items", n_categories, n_items)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
