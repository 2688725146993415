"""End-to-end tests through the Flask test client."""

from __future__ import annotations

import io

from inventory_app.repositories.category_repository import CategoryRepository
from inventory_app.repositories.item_repository import ItemRepository


def _category(app_db, name="Tools", description="Hand tools"):
    return CategoryRepository(app_db).create(name, description)


def _item(app_db, category_id, name="Hammer"):
    return ItemRepository(app_db).create(
        {"name": name, "description": "Claw", "price": 5.0, "stock": 2, "category": category_id}
    )


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.get_json() == {"success": True, "data": {"status": "ok", "database": "open"}, "error": None}


def test_home_shows_counts(client, app_db):
    category = _category(app_db)
    _item(app_db, category.id, "One")
    _item(app_db, category.id, "Two")

    resp = client.get("/")

    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert "<strong>Items:</strong> 2" in body
    assert "<strong>Categories:</strong> 1" in body


def test_category_create_redirects_to_detail(client, app_db):
    resp = client.post("/category/create", data={"name": "Tools", "description": "Hand tools"})

    created = CategoryRepository(app_db).find_by_name_case_insensitive("tools")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith(f"/category/{created.id}")


def test_category_create_duplicate_redirects_to_existing(client, app_db):
    first = client.post("/category/create", data={"name": "Widgets", "description": "desc"})
    second = client.post("/category/create", data={"name": "widgets", "description": "other desc"})

    assert first.headers["Location"] == second.headers["Location"]
    assert CategoryRepository(app_db).count_all() == 1


def test_category_create_empty_name_redisplays_form(client, app_db):
    resp = client.post("/category/create", data={"name": "  ", "description": "<b>bold</b>"})

    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert "Category name required" in body
    assert 'value="&lt;b&gt;bold&lt;/b&gt;"' in body
    assert CategoryRepository(app_db).count_all() == 0


def test_category_detail_lists_items(client, app_db):
    category = _category(app_db)
    _item(app_db, category.id, "Hammer")

    resp = client.get(f"/category/{category.id}")

    assert resp.status_code == 200
    assert "Hammer" in resp.get_data(as_text=True)


def test_category_detail_missing_is_404(client):
    resp = client.get("/category/999")

    assert resp.status_code == 404
    assert "Category not found" in resp.get_data(as_text=True)


def test_category_detail_missing_json(client):
    resp = client.get("/category/999", headers={"Accept": "application/json"})

    assert resp.status_code == 404
    assert resp.get_json()["error"]["code"] == "not_found"


def test_category_update(client, app_db):
    category = _category(app_db)

    form = client.get(f"/category/{category.id}/update")
    assert 'value="Tools"' in form.get_data(as_text=True)

    resp = client.post(f"/category/{category.id}/update", data={"name": "Power", "description": "Electric"})

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith(f"/category/{category.id}")
    assert CategoryRepository(app_db).get_by_id(category.id).name == "Power"


def test_category_update_invalid_keeps_target(client, app_db):
    category = _category(app_db)

    resp = client.post(f"/category/{category.id}/update", data={"name": "Power", "description": ""})

    assert resp.status_code == 200
    assert "Category description required" in resp.get_data(as_text=True)
    assert CategoryRepository(app_db).get_by_id(category.id).name == "Tools"


def test_category_update_form_missing_is_404(client):
    assert client.get("/category/5/update").status_code == 404


def test_category_delete_get_missing_redirects(client):
    resp = client.get("/category/999/delete")

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/categories")


def test_category_delete_blocked_by_items(client, app_db):
    category = _category(app_db)
    _item(app_db, category.id, "Blocker")

    resp = client.post(f"/category/{category.id}/delete")

    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert "Delete the following items" in body
    assert "Blocker" in body
    assert CategoryRepository(app_db).get_by_id(category.id) is not None


def test_category_delete_succeeds_without_items(client, app_db):
    category = _category(app_db)

    confirm = client.get(f"/category/{category.id}/delete")
    assert "Do you really want to delete this category?" in confirm.get_data(as_text=True)

    resp = client.post(f"/category/{category.id}/delete")

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/categories")
    assert CategoryRepository(app_db).get_by_id(category.id) is None


def test_category_list(client, app_db):
    _category(app_db, "Tools")
    _category(app_db, "Garden")

    body = client.get("/categories").get_data(as_text=True)

    assert body.index("Garden") < body.index("Tools")


def test_item_create_with_image(client, app_db, app):
    category = _category(app_db)

    resp = client.post(
        "/item/create",
        data={
            "name": "Hammer",
            "description": "Claw hammer",
            "price": "12.50",
            "stock": "3",
            "category": str(category.id),
            "image": (io.BytesIO(b"fake png"), "hammer.png"),
        },
        content_type="multipart/form-data",
    )

    assert resp.status_code == 302
    item = ItemRepository(app_db).list_all()[0]
    assert resp.headers["Location"].endswith(f"/item/{item.id}")
    assert item.price == 12.5
    assert item.image.endswith("_hammer.png")

    detail = client.get(f"/item/{item.id}").get_data(as_text=True)
    assert f"/uploads/{item.image}" in detail

    image = client.get(f"/uploads/{item.image}")
    assert image.status_code == 200
    assert image.data == b"fake png"


def test_item_create_invalid_collects_errors(client, app_db):
    _category(app_db)

    resp = client.post(
        "/item/create",
        data={
            "name": "",
            "description": "Claw",
            "price": "-2",
            "stock": "1",
            "category": "",
            "image": (io.BytesIO(b"MZ"), "virus.exe"),
        },
        content_type="multipart/form-data",
    )

    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert "Item name required" in body
    assert "Price must not be negative" in body
    assert "Category required" in body
    assert "Image must be one of" in body
    assert ItemRepository(app_db).count_all() == 0


def test_item_update_preserves_id(client, app_db):
    category = _category(app_db)
    item = _item(app_db, category.id)

    resp = client.post(
        f"/item/{item.id}/update",
        data={"name": "Mallet", "description": "Rubber", "price": "7", "stock": "1", "category": str(category.id)},
    )

    assert resp.status_code == 302
    stored = ItemRepository(app_db).get_by_id(item.id)
    assert stored.id == item.id
    assert stored.name == "Mallet"


def test_item_delete_flow(client, app_db):
    category = _category(app_db)
    item = _item(app_db, category.id)

    confirm = client.get(f"/item/{item.id}/delete")
    assert "Do you really want to delete this item?" in confirm.get_data(as_text=True)

    resp = client.post(f"/item/{item.id}/delete")

    assert resp.status_code == 302
    assert ItemRepository(app_db).get_by_id(item.id) is None
    assert client.get(f"/item/{item.id}/delete").status_code == 302


def test_item_detail_missing_is_404(client):
    assert client.get("/item/31337").status_code == 404


def test_unknown_route_is_404(client):
    assert client.get("/nope").status_code == 404


def test_uploads_served_from_relative_folder(client, app, app_db, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    app.config["UPLOAD_FOLDER"] = "./relative-uploads"
    category = _category(app_db)

    resp = client.post(
        "/item/create",
        data={
            "name": "Hammer",
            "description": "Claw hammer",
            "price": "1",
            "stock": "1",
            "category": str(category.id),
            "image": (io.BytesIO(b"png bytes"), "h.png"),
        },
        content_type="multipart/form-data",
    )
    assert resp.status_code == 302

    item = ItemRepository(app_db).list_all()[0]
    assert (tmp_path / "relative-uploads" / item.image).exists()

    image = client.get(f"/uploads/{item.image}")
    assert image.status_code == 200
    assert image.data == b"png bytes"


def test_item_update_invalid_redisplays_current_image(client, app_db):
    category = _category(app_db)
    item = ItemRepository(app_db).create(
        {"name": "Hammer", "description": "Claw", "price": 5.0, "stock": 2, "category": category.id, "image": "abc_h.png"}
    )

    resp = client.post(
        f"/item/{item.id}/update",
        data={"name": "", "description": "Claw", "price": "5", "stock": "2", "category": str(category.id)},
    )

    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert "Item name required" in body
    assert "/uploads/abc_h.png" in body
    assert ItemRepository(app_db).get_by_id(item.id).name == "Hammer"


def test_category_delete_blocked_when_category_already_gone(client, app_db):
    _item(app_db, 404, "Stray")

    resp = client.post("/category/404/delete")

    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert "Delete the following items" in body
    assert "Stray" in body
