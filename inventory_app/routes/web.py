"""Web page routes."""

from __future__ import annotations

from flask import Blueprint, render_template, send_from_directory

from inventory_app.db import get_store
from inventory_app.services.summary_service import SummaryService
from inventory_app.storage import get_upload_storage

web_bp = Blueprint("web", __name__)


@web_bp.get("/")
def index():
    summary = SummaryService.from_db(get_store().db).counts()
    return render_template(
        "index.html",
        title="Inventory App - Home",
        item_count=summary.item_count,
        category_count=summary.category_count,
    )


@web_bp.get("/uploads/<path:filename>")
def uploaded_file(filename: str):
    return send_from_directory(get_upload_storage().root, filename)
