"""Item routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, redirect, render_template, request

from inventory_app.db import get_store
from inventory_app.schemas.base import FormResult, validate_form
from inventory_app.schemas.item import ItemFormSchema
from inventory_app.services.item_service import ItemService
from inventory_app.storage import get_upload_storage, has_upload
from inventory_app.utils.urls import item_url

items_bp = Blueprint("items", __name__)

_form_schema = ItemFormSchema()


def _service() -> ItemService:
    return ItemService.from_db(get_store().db, get_upload_storage())


def _validate_submission() -> FormResult:
    result = validate_form(_form_schema, request.form)
    upload = request.files.get("image")
    if has_upload(upload):
        error = get_upload_storage().validate(upload)
        if error:
            result.add_error("image", error)
    return result


@items_bp.get("/items")
def item_list():
    """List all items."""

    items = _service().list_items()
    return render_template("item_list.html", title="Item List", item_list=items)


@items_bp.get("/item/<int:item_id>")
def item_detail(item_id: int):
    """Get a single item by id."""

    view = _service().get_detail(item_id)
    return render_template("item_detail.html", title="Item Detail", item=view.item, category=view.category)


@items_bp.get("/item/create")
def item_create_get():
    categories = _service().list_categories()
    return render_template("item_form.html", title="Create Item", categories=categories)


@items_bp.post("/item/create")
def item_create_post():
    """Create a new item."""

    service = _service()
    result = _validate_submission()
    if not result.ok:
        return render_template(
            "item_form.html",
            title="Create Item",
            item=result.values,
            categories=service.list_categories(),
            errors=result.messages(),
        )

    item = service.create(result.data, request.files.get("image"))
    return redirect(item_url(item.id))


@items_bp.get("/item/<int:item_id>/update")
def item_update_get(item_id: int):
    item, categories = _service().get_for_edit(item_id)
    return render_template("item_form.html", title="Update Item", item=item, categories=categories)


@items_bp.post("/item/<int:item_id>/update")
def item_update_post(item_id: int):
    service = _service()
    result = _validate_submission()
    if not result.ok:
        current = service.get_item(item_id)
        return render_template(
            "item_form.html",
            title="Update Item",
            item={**result.values, "id": item_id, "image": current.image},
            categories=service.list_categories(),
            errors=result.messages(),
        )

    item = service.update(item_id, result.data, request.files.get("image"))
    return redirect(item_url(item.id))


@items_bp.get("/item/<int:item_id>/delete")
def item_delete_get(item_id: int):
    view = _service().load_for_delete(item_id)
    if view is None:
        return redirect("/items")
    return render_template("item_delete.html", title="Delete Item", item=view.item, category=view.category)


@items_bp.post("/item/<int:item_id>/delete")
def item_delete_post(item_id: int):
    _service().delete(item_id)
    return redirect("/items")
