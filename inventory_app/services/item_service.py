"""Service layer for item business logic."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from pymongo.database import Database
from werkzeug.datastructures import FileStorage

from inventory_app.errors import NotFoundError
from inventory_app.repositories.category_repository import CategoryRecord, CategoryRepository
from inventory_app.repositories.item_repository import ItemRecord, ItemRepository
from inventory_app.storage import UploadStorage, has_upload
from inventory_app.utils.concurrency import run_concurrently

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ItemView:
    """An item together with the category it points at (if that still exists)."""

    item: ItemRecord
    category: CategoryRecord | None


class ItemService:
    """Item use-cases."""

    def __init__(
        self,
        items: ItemRepository,
        categories: CategoryRepository,
        uploads: UploadStorage,
    ) -> None:
        self._items = items
        self._categories = categories
        self._uploads = uploads

    @classmethod
    def from_db(cls, db: Database, uploads: UploadStorage) -> ItemService:
        return cls(ItemRepository(db), CategoryRepository(db), uploads)

    def list_items(self) -> list[ItemView]:
        items, categories = run_concurrently(self._items.list_all, self._categories.list_all)
        by_id = {c.id: c for c in categories}
        return [ItemView(item=i, category=by_id.get(i.category)) for i in items]

    def list_categories(self) -> list[CategoryRecord]:
        return self._categories.list_all()

    def get_item(self, item_id: int) -> ItemRecord:
        item = self._items.get_by_id(item_id)
        if item is None:
            raise NotFoundError("Item", item_id)
        return item

    def get_detail(self, item_id: int) -> ItemView:
        view = self.load_for_delete(item_id)
        if view is None:
            raise NotFoundError("Item", item_id)
        return view

    def load_for_delete(self, item_id: int) -> ItemView | None:
        """Item plus its category, or None when the item is gone."""

        item = self._items.get_by_id(item_id)
        if item is None:
            return None
        category = self._categories.get_by_id(item.category) if item.category is not None else None
        return ItemView(item=item, category=category)

    def get_for_edit(self, item_id: int) -> tuple[ItemRecord, list[CategoryRecord]]:
        item, categories = run_concurrently(
            lambda: self._items.get_by_id(item_id),
            self._categories.list_all,
        )
        if item is None:
            raise NotFoundError("Item", item_id)
        return item, categories

    def create(self, data: dict[str, Any], upload: FileStorage | None = None) -> ItemRecord:
        fields = dict(data)
        fields["image"] = self._uploads.save(upload) if has_upload(upload) else None

        item = self._items.create(fields)
        logger.info("Created item id=%s in category id=%s", item.id, item.category)
        return item

    def update(self, item_id: int, data: dict[str, Any], upload: FileStorage | None = None) -> ItemRecord:
        current = self.get_item(item_id)

        fields = dict(data)
        fields["image"] = self._uploads.save(upload) if has_upload(upload) else current.image

        if not self._items.update(item_id, fields):
            if fields["image"] != current.image:
                self._uploads.delete(fields["image"])
            raise NotFoundError("Item", item_id)
        if fields["image"] != current.image:
            self._uploads.delete(current.image)

        logger.info("Updated item id=%s", item_id)
        return ItemRecord(id=int(item_id), **fields)

    def delete(self, item_id: int) -> bool:
        item = self._items.get_by_id(item_id)
        if item is None:
            return False

        self._items.delete(item_id)
        self._uploads.delete(item.image)
        logger.info("Deleted item id=%s", item_id)
        return True
