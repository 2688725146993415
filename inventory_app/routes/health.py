"""Health check routes."""

from __future__ import annotations

from flask import Blueprint

from inventory_app.db import get_store
from inventory_app.utils.responses import ok

health_bp = Blueprint("health", __name__)


@health_bp.get("/health")
def health_check():
    """Health check endpoint."""

    store = get_store()
    return ok({"status": "ok", "database": "open" if store.is_open else "closed"})
