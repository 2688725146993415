"""Repository layer for Category persistence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pymongo.database import Database

from inventory_app.repositories.base import next_id


@dataclass(frozen=True)
class CategoryRecord:
    id: int
    name: str
    description: str


def name_key(name: str) -> str:
    """Case-folded form of a category name used for duplicate lookups."""

    return name.casefold()


def _to_record(doc: dict[str, Any]) -> CategoryRecord:
    return CategoryRecord(
        id=int(doc["id"]),
        name=str(doc.get("name") or ""),
        description=str(doc.get("description") or ""),
    )


class CategoryRepository:
    """CRUD operations for Category."""

    _projection = {"_id": 0, "id": 1, "name": 1, "description": 1}

    def __init__(self, db: Database) -> None:
        self._col = db["categories"]
        self._db = db

    def create(self, name: str, description: str) -> CategoryRecord:
        new_id = next_id(self._db, "categories")
        doc = {
            "id": new_id,
            "name": name,
            "name_key": name_key(name),
            "description": description,
        }
        self._col.insert_one(doc)
        return CategoryRecord(id=new_id, name=name, description=description)

    def get_by_id(self, category_id: int) -> CategoryRecord | None:
        doc = self._col.find_one({"id": int(category_id)}, self._projection)
        if not doc:
            return None
        return _to_record(doc)

    def list_all(self) -> list[CategoryRecord]:
        cur = self._col.find({}, self._projection).sort([("name_key", 1), ("id", 1)])
        return [_to_record(d) for d in cur]

    def find_by_name_case_insensitive(self, name: str) -> CategoryRecord | None:
        doc = self._col.find_one({"name_key": name_key(name)}, self._projection, sort=[("id", 1)])
        if not doc:
            return None
        return _to_record(doc)

    def update(self, category_id: int, *, name: str, description: str) -> bool:
        result = self._col.update_one(
            {"id": int(category_id)},
            {"$set": {"name": name, "name_key": name_key(name), "description": description}},
        )
        return result.matched_count > 0

    def delete(self, category_id: int) -> bool:
        result = self._col.delete_one({"id": int(category_id)})
        return result.deleted_count > 0

    def count_all(self) -> int:
        return int(self._col.count_documents({}))
