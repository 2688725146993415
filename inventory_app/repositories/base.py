"""Shared helpers for MongoDB repositories."""

from __future__ import annotations

from pymongo import ReturnDocument
from pymongo.database import Database


def next_id(db: Database, sequence: str) -> int:
    """Allocate the next integer id for `sequence` from the counters collection."""

    doc = db["counters"].find_one_and_update(
        {"_id": sequence},
        {"$inc": {"seq": 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return int((doc or {}).get("seq") or 1)
