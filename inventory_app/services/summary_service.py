"""Home page counts."""

from __future__ import annotations

from dataclasses import dataclass

from pymongo.database import Database

from inventory_app.repositories.category_repository import CategoryRepository
from inventory_app.repositories.item_repository import ItemRepository
from inventory_app.utils.concurrency import run_concurrently


@dataclass(frozen=True)
class InventorySummary:
    item_count: int
    category_count: int


class SummaryService:
    def __init__(self, categories: CategoryRepository, items: ItemRepository) -> None:
        self._categories = categories
        self._items = items

    @classmethod
    def from_db(cls, db: Database) -> SummaryService:
        return cls(CategoryRepository(db), ItemRepository(db))

    def counts(self) -> InventorySummary:
        item_count, category_count = run_concurrently(
            self._items.count_all,
            self._categories.count_all,
        )
        return InventorySummary(item_count=item_count, category_count=category_count)
