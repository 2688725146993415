"""URL builders for categories and items."""

from __future__ import annotations


def category_url(category_id: int) -> str:
    return f"/category/{int(category_id)}"


def item_url(item_id: int) -> str:
    return f"/item/{int(item_id)}"


def upload_url(reference: str) -> str:
    return f"/uploads/{reference}"
