"""Category routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, redirect, render_template, request

from inventory_app.db import get_store
from inventory_app.schemas.base import validate_form
from inventory_app.schemas.category import CategoryFormSchema
from inventory_app.services.category_service import CategoryService
from inventory_app.utils.urls import category_url

categories_bp = Blueprint("categories", __name__)

_form_schema = CategoryFormSchema()


def _service() -> CategoryService:
    return CategoryService.from_db(get_store().db)


@categories_bp.get("/categories")
def category_list():
    categories = _service().list_categories()
    return render_template("category_list.html", title="Category List", category_list=categories)


@categories_bp.get("/category/<int:category_id>")
def category_detail(category_id: int):
    detail = _service().get_detail(category_id)
    return render_template(
        "category_detail.html",
        title="Category Detail",
        category=detail.category,
        category_items=detail.items,
    )


@categories_bp.get("/category/create")
def category_create_get():
    return render_template("category_form.html", title="Create Category")


@categories_bp.post("/category/create")
def category_create_post():
    result = validate_form(_form_schema, request.form)
    if not result.ok:
        return render_template(
            "category_form.html",
            title="Create Category",
            category=result.values,
            errors=result.messages(),
        )

    category, _created = _service().create(result.data["name"], result.data["description"])
    return redirect(category_url(category.id))


@categories_bp.get("/category/<int:category_id>/update")
def category_update_get(category_id: int):
    category = _service().get_category(category_id)
    return render_template("category_form.html", title="Update Category", category=category)


@categories_bp.post("/category/<int:category_id>/update")
def category_update_post(category_id: int):
    result = validate_form(_form_schema, request.form)
    if not result.ok:
        return render_template(
            "category_form.html",
            title="Update Category",
            category={**result.values, "id": category_id},
            errors=result.messages(),
        )

    category = _service().update(category_id, result.data["name"], result.data["description"])
    return redirect(category_url(category.id))


@categories_bp.get("/category/<int:category_id>/delete")
def category_delete_get(category_id: int):
    detail = _service().load_for_delete(category_id)
    if detail is None:
        return redirect("/categories")
    return render_template(
        "category_delete.html",
        title="Delete Category",
        category=detail.category,
        category_items=detail.items,
    )


@categories_bp.post("/category/<int:category_id>/delete")
def category_delete_post(category_id: int):
    outcome = _service().delete(category_id)
    if outcome.blocked:
        return render_template(
            "category_delete.html",
            title="Delete Category",
            category=outcome.category,
            category_items=outcome.dependents,
        )
    return redirect("/categories")
