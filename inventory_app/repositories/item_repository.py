"""Repository layer for Item persistence."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from pymongo.database import Database

from inventory_app.repositories.base import next_id

ITEM_FIELDS = ("name", "description", "price", "stock", "category", "image")


@dataclass(frozen=True)
class ItemRecord:
    id: int
    name: str
    description: str = ""
    price: float = 0.0
    stock: int = 0
    category: int | None = None
    image: str | None = None


def _to_record(doc: dict[str, Any]) -> ItemRecord:
    category = doc.get("category")
    return ItemRecord(
        id=int(doc["id"]),
        name=str(doc.get("name") or ""),
        description=str(doc.get("description") or ""),
        price=float(doc.get("price") or 0.0),
        stock=int(doc.get("stock") or 0),
        category=int(category) if category is not None else None,
        image=doc.get("image") or None,
    )


def _clean_fields(fields: dict[str, Any]) -> dict[str, Any]:
    # Unknown keys and the id are never written.
    return {k: v for k, v in fields.items() if k in ITEM_FIELDS}


class ItemRepository:
    """CRUD operations for Item."""

    def __init__(self, db: Database) -> None:
        self._col = db["items"]
        self._db = db

    def create(self, fields: dict[str, Any]) -> ItemRecord:
        new_id = next_id(self._db, "items")
        doc = {"id": new_id, **_clean_fields(fields)}
        self._col.insert_one(doc)
        return _to_record(doc)

    def get_by_id(self, item_id: int) -> ItemRecord | None:
        d = self._col.find_one({"id": int(item_id)}, {"_id": 0})
        if not d:
            return None
        return _to_record(d)

    def list_all(self) -> list[ItemRecord]:
        cur = self._col.find({}, {"_id": 0}).sort("name", 1)
        return [_to_record(d) for d in cur]

    def list_by_category(
        self,
        category_id: int,
        projected_fields: Iterable[str] | None = None,
    ) -> list[ItemRecord]:
        projection: dict[str, int] = {"_id": 0}
        if projected_fields is not None:
            projection["id"] = 1
            projection.update({f: 1 for f in projected_fields})
        cur = self._col.find({"category": int(category_id)}, projection).sort("id", 1)
        return [_to_record(d) for d in cur]

    def update(self, item_id: int, fields: dict[str, Any]) -> bool:
        result = self._col.update_one({"id": int(item_id)}, {"$set": _clean_fields(fields)})
        return result.matched_count > 0

    def delete(self, item_id: int) -> bool:
        result = self._col.delete_one({"id": int(item_id)})
        return result.deleted_count > 0

    def count_all(self) -> int:
        return int(self._col.count_documents({}))
