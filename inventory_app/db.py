"""MongoDB client lifecycle.

One `MongoStore` is opened by the app factory and closed at process exit.
Handlers get repositories built from it instead of a module-level connection.
"""

from __future__ import annotations

import atexit
import logging

from flask import Flask, current_app
from pymongo import ASCENDING, MongoClient
from pymongo.database import Database

logger = logging.getLogger(__name__)


class MongoStore:
    """Owns the MongoClient and the application database handle."""

    def __init__(self, uri: str, db_name: str, client: MongoClient | None = None) -> None:
        self._uri = uri
        self._db_name = db_name
        self._client = client
        self._db: Database | None = None

    @property
    def db(self) -> Database:
        if self._db is None:
            raise RuntimeError("MongoStore is not open")
        return self._db

    @property
    def is_open(self) -> bool:
        return self._db is not None

    def open(self) -> Database:
        if self._db is not None:
            return self._db

        if self._client is None:
            self._client = MongoClient(self._uri)
        self._db = self._client[self._db_name]
        self.ensure_indexes()
        logger.info("Opened MongoDB database %s", self._db_name)
        return self._db

    def close(self) -> None:
        if self._client is None:
            return
        self._client.close()
        self._client = None
        self._db = None
        logger.info("Closed MongoDB client")

    def ensure_indexes(self) -> None:
        db = self.db
        db["categories"].create_index([("id", ASCENDING)], unique=True)
        db["categories"].create_index([("name_key", ASCENDING)])
        db["items"].create_index([("id", ASCENDING)], unique=True)
        db["items"].create_index([("category", ASCENDING)])


def init_db(app: Flask, client: MongoClient | None = None) -> MongoStore:
    """Open the store for `app` and register it under app.extensions."""

    store = MongoStore(
        str(app.config["MONGODB_URI"]),
        str(app.config["MONGODB_DB"]),
        client=client,
    )
    store.open()
    app.extensions["mongo_store"] = store
    atexit.register(store.close)
    return store


def get_store() -> MongoStore:
    """Get the current application's MongoStore."""

    store: MongoStore | None = current_app.extensions.get("mongo_store")
    if store is None:
        raise RuntimeError("Database not initialized")
    return store
