"""Service layer for Category workflows.

Covers duplicate-name prevention on create and the dependent check that
guards deletion.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pymongo.database import Database

from inventory_app.errors import NotFoundError
from inventory_app.repositories.category_repository import CategoryRecord, CategoryRepository
from inventory_app.repositories.item_repository import ItemRecord, ItemRepository
from inventory_app.utils.concurrency import run_concurrently

logger = logging.getLogger(__name__)

# Fields shown for each item on the category detail page.
DETAIL_ITEM_FIELDS = ("name", "description", "price", "stock")


@dataclass(frozen=True)
class CategoryDetail:
    category: CategoryRecord
    items: list[ItemRecord] = field(default_factory=list)


@dataclass(frozen=True)
class DeleteOutcome:
    """Result of a delete attempt.

    `blocked` means the category still has dependent items and was left in
    place; `dependents` holds the items found at the time of the check.
    """

    category: CategoryRecord | None
    dependents: list[ItemRecord]
    deleted: bool

    @property
    def blocked(self) -> bool:
        return not self.deleted and bool(self.dependents)


class CategoryService:
    """Category use-cases."""

    def __init__(self, categories: CategoryRepository, items: ItemRepository) -> None:
        self._categories = categories
        self._items = items

    @classmethod
    def from_db(cls, db: Database) -> CategoryService:
        return cls(CategoryRepository(db), ItemRepository(db))

    def list_categories(self) -> list[CategoryRecord]:
        return self._categories.list_all()

    def get_category(self, category_id: int) -> CategoryRecord:
        category = self._categories.get_by_id(category_id)
        if category is None:
            raise NotFoundError("Category", category_id)
        return category

    def get_detail(self, category_id: int) -> CategoryDetail:
        category, items = run_concurrently(
            lambda: self._categories.get_by_id(category_id),
            lambda: self._items.list_by_category(category_id, DETAIL_ITEM_FIELDS),
        )
        if category is None:
            raise NotFoundError("Category", category_id)
        return CategoryDetail(category=category, items=items)

    def create(self, name: str, description: str) -> tuple[CategoryRecord, bool]:
        """Create a category unless one with the same name (ignoring case) exists.

        Returns the stored record and whether it was newly created.
        """

        existing = self._categories.find_by_name_case_insensitive(name)
        if existing is not None:
            logger.info("Category %r already exists as id=%s", name, existing.id)
            return existing, False

        category = self._categories.create(name=name, description=description)
        logger.info("Created category id=%s", category.id)
        return category, True

    def update(self, category_id: int, name: str, description: str) -> CategoryRecord:
        if not self._categories.update(category_id, name=name, description=description):
            raise NotFoundError("Category", category_id)
        logger.info("Updated category id=%s", category_id)
        return CategoryRecord(id=int(category_id), name=name, description=description)

    def load_for_delete(self, category_id: int) -> CategoryDetail | None:
        """Category plus all of its dependents, or None when it is gone."""

        category, dependents = run_concurrently(
            lambda: self._categories.get_by_id(category_id),
            lambda: self._items.list_by_category(category_id),
        )
        if category is None:
            return None
        return CategoryDetail(category=category, items=dependents)

    def delete(self, category_id: int) -> DeleteOutcome:
        # Dependents are re-read right before deleting; an item created
        # between this check and delete_one is not caught.
        category, dependents = run_concurrently(
            lambda: self._categories.get_by_id(category_id),
            lambda: self._items.list_by_category(category_id),
        )
        if dependents:
            logger.info(
                "Refusing to delete category id=%s: %s dependent item(s)",
                category_id,
                len(dependents),
            )
            return DeleteOutcome(category=category, dependents=dependents, deleted=False)

        self._categories.delete(category_id)
        logger.info("Deleted category id=%s", category_id)
        return DeleteOutcome(category=category, dependents=[], deleted=True)
