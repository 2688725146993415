"""Shared fixtures: an app wired to mongomock and a temporary upload folder."""

from __future__ import annotations

import mongomock
import pytest

from inventory_app import create_app
from inventory_app import config
from inventory_app.repositories.category_repository import CategoryRepository
from inventory_app.repositories.item_repository import ItemRepository
from inventory_app.services.category_service import CategoryService
from inventory_app.services.item_service import ItemService
from inventory_app.storage import UploadStorage


@pytest.fixture
def mongo_client():
    return mongomock.MongoClient()


@pytest.fixture
def db(mongo_client):
    return mongo_client["inventory_app_test"]


@pytest.fixture
def uploads(tmp_path):
    return UploadStorage(tmp_path / "uploads")


@pytest.fixture
def categories(db):
    return CategoryRepository(db)


@pytest.fixture
def items(db):
    return ItemRepository(db)


@pytest.fixture
def category_service(categories, items):
    return CategoryService(categories, items)


@pytest.fixture
def item_service(items, categories, uploads):
    return ItemService(items, categories, uploads)


@pytest.fixture
def app(mongo_client, tmp_path):
    app = create_app(config.TestingConfig, mongo_client=mongo_client)
    app.config["UPLOAD_FOLDER"] = str(tmp_path / "uploads")
    yield app
    app.extensions["mongo_store"].close()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_db(app):
    return app.extensions["mongo_store"].db
