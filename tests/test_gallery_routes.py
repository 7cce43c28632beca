from sqlalchemy import select

from app.models.gallery.gallery_item import GalleryItem
from tests.conftest import gallery_payload, make_gallery_item


async def test_create_gallery_item(client, editor_headers):
    resp = await client.post(
        "/api/admin/gallery",
        json=gallery_payload(description={"en": "Where the day starts"}),
        headers=editor_headers,
    )

    assert resp.status_code == 201
    data = resp.json()["data"]
    assert data["_id"]
    assert data["isActive"] is True
    assert data["order"] == 0
    assert data["description"]["en"] == "Where the day starts"


async def test_create_requires_image_and_bilingual_title(client, editor_headers):
    no_image = gallery_payload()
    del no_image["image"]

    missing_image = await client.post("/api/admin/gallery", json=no_image, headers=editor_headers)
    half_title = await client.post(
        "/api/admin/gallery", json=gallery_payload(title={"ar": "البار"}), headers=editor_headers
    )

    assert missing_image.status_code == half_title.status_code == 400


async def test_admin_list_defaults_to_order(client, db, editor_headers):
    await make_gallery_item(db, title={"en": "Third", "ar": "ثالث"}, order=3)
    await make_gallery_item(db, title={"en": "First", "ar": "أول"}, order=1)
    await make_gallery_item(db, title={"en": "Second", "ar": "ثاني"}, order=2)

    resp = await client.get("/api/admin/gallery", headers=editor_headers)

    body = resp.json()
    assert [i["title"]["en"] for i in body["data"]] == ["First", "Second", "Third"]
    assert body["pagination"]["total"] == 3


async def test_reorder_assigns_positions(client, db, editor_headers):
    a = await make_gallery_item(db, order=7)
    b = await make_gallery_item(db, order=7)
    c = await make_gallery_item(db, order=7)

    resp = await client.post(
        "/api/admin/gallery/reorder",
        json={"items": [{"id": c.id}, {"id": a.id}, {"id": b.id}]},
        headers=editor_headers,
    )
    assert resp.status_code == 200

    rows = await db.execute(select(GalleryItem.id, GalleryItem.order))
    assert dict(rows.all()) == {c.id: 0, a.id: 1, b.id: 2}


async def test_reorder_validates_items(client, db, editor_headers):
    item = await make_gallery_item(db)

    missing = await client.post("/api/admin/gallery/reorder", json={}, headers=editor_headers)
    no_id = await client.post(
        "/api/admin/gallery/reorder", json={"items": [{"id": item.id}, {"order": 3}]}, headers=editor_headers
    )

    assert missing.status_code == no_id.status_code == 400
    assert missing.json()["message"] == "Items array is required"

    # nothing was written for the partially valid request
    rows = await db.execute(select(GalleryItem.order))
    assert rows.scalars().all() == [0]


async def test_bulk_toggle_active(client, db, manager_headers):
    item = await make_gallery_item(db)

    resp = await client.post(
        "/api/admin/gallery/bulk",
        json={"action": "toggle-active", "ids": [item.id]},
        headers=manager_headers,
    )
    assert resp.json()["data"] == {"matched": 1}

    rows = await db.execute(select(GalleryItem.is_active))
    assert rows.scalars().all() == [False]


async def test_bulk_rejects_menu_actions(client, db, manager_headers):
    item = await make_gallery_item(db)

    resp = await client.post(
        "/api/admin/gallery/bulk",
        json={"action": "toggle-featured", "ids": [item.id]},
        headers=manager_headers,
    )
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid action"


async def test_update_and_delete(client, db, editor_headers, manager_headers):
    item = await make_gallery_item(db)

    resp = await client.put(
        f"/api/admin/gallery/{item.id}", json={"isActive": False, "order": 4}, headers=editor_headers
    )
    data = resp.json()["data"]
    assert data["isActive"] is False
    assert data["order"] == 4

    assert (await client.delete(f"/api/admin/gallery/{item.id}", headers=editor_headers)).status_code == 403
    assert (await client.delete(f"/api/admin/gallery/{item.id}", headers=manager_headers)).status_code == 200
    assert (await client.get(f"/api/admin/gallery/{item.id}", headers=editor_headers)).status_code == 404


async def test_stats_and_categories(client, db, editor_headers):
    await make_gallery_item(db)
    await make_gallery_item(db, is_active=False)
    await make_gallery_item(db, category={"en": "Events", "ar": "فعاليات"})

    stats = (await client.get("/api/admin/gallery/stats/overview", headers=editor_headers)).json()["data"]
    categories = (await client.get("/api/admin/gallery/categories/all", headers=editor_headers)).json()["data"]

    assert stats["totalItems"] == 3
    assert stats["activeItems"] == 2
    assert stats["categoryStats"][0] == {"category": "Interior", "count": 2}
    assert categories == ["Events", "Interior"]


# ---------- Storefront ----------
async def test_public_gallery_shows_active_items(client, db):
    shown = await make_gallery_item(db, order=1)
    await make_gallery_item(db, is_active=False)
    await make_gallery_item(db, category={"en": "Events", "ar": "فعاليات"}, order=0)

    resp = await client.get("/api/gallery")
    assert len(resp.json()) == 2
    assert resp.json()[1]["_id"] == shown.id

    resp = await client.get("/api/gallery/category/فعاليات", params={"language": "ar"})
    assert [i["category"]["en"] for i in resp.json()] == ["Events"]


async def test_public_gallery_item_and_categories(client, db):
    hidden = await make_gallery_item(db, is_active=False, category={"en": "Private", "ar": "خاص"})
    shown = await make_gallery_item(db)

    assert (await client.get(f"/api/gallery/{shown.id}")).status_code == 200
    assert (await client.get(f"/api/gallery/{hidden.id}")).status_code == 404
    assert (await client.get("/api/gallery/categories/all")).json() == ["Interior"]
