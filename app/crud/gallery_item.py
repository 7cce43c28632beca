import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ValidationError
from app.crud import content
from app.models.gallery.gallery_item import GalleryItem
from app.schemas.common import Language, QueryParams, SortOrder
from app.schemas.gallery_item import GalleryItemCreate, GalleryItemUpdate
from app.utils.query_builder import Collection, build_admin_query, build_public_query

log = logging.getLogger(__name__)

GALLERY_COLLECTION = Collection(
    model=GalleryItem,
    text_fields=("title", "description"),
    sort_fields={
        "order": "order",
        "createdAt": "created_at",
        "isActive": "is_active",
    },
    default_sort=(("order", SortOrder.asc),),
)

PUBLIC_SORT = (("order", SortOrder.asc), ("created_at", SortOrder.desc))

TOGGLES = {
    "toggle-active": GalleryItem.is_active,
}

NULLABLE_FIELDS = frozenset({"description"})


async def create_gallery_item(db: AsyncSession, payload: GalleryItemCreate) -> GalleryItem:
    item = GalleryItem(**payload.model_dump())
    db.add(item)
    await db.commit()
    await db.refresh(item)
    log.info("gallery item created: %s (%s)", item.id, item.title.get("en"))
    return item


async def get_gallery_item(db: AsyncSession, item_id: str) -> Optional[GalleryItem]:
    return await db.get(GalleryItem, item_id)


async def list_gallery_items(db: AsyncSession, params: QueryParams) -> Tuple[List[GalleryItem], Dict[str, int]]:
    query = build_admin_query(GALLERY_COLLECTION, params)
    return await content.fetch_page(db, GalleryItem, query)


async def update_gallery_item(db: AsyncSession, item_id: str, updates: GalleryItemUpdate) -> Optional[GalleryItem]:
    item = await get_gallery_item(db, item_id)
    if not item:
        return None

    for key, value in content.changes_from(updates, NULLABLE_FIELDS).items():
        setattr(item, key, value)

    await db.commit()
    await db.refresh(item)
    return item


async def delete_gallery_item(db: AsyncSession, item_id: str) -> Optional[GalleryItem]:
    item = await get_gallery_item(db, item_id)
    if item:
        await db.delete(item)
        await db.commit()
        log.info("gallery item deleted: %s", item_id)
    return item


async def bulk_gallery_items(db: AsyncSession, action: str, ids: Any, updates: Optional[dict] = None) -> int:
    return await content.run_bulk(
        db,
        GalleryItem,
        action,
        ids,
        updates,
        update_schema=GalleryItemUpdate,
        toggles=TOGGLES,
        nullable=NULLABLE_FIELDS,
    )


def _reorder_ids(items: Any) -> List[str]:
    if items is None or not isinstance(items, list):
        raise ValidationError("Items array is required")

    ids = []
    for entry in items:
        item_id = entry.get("id") if isinstance(entry, dict) else None
        if not item_id:
            raise ValidationError("Every reorder entry needs an id")
        ids.append(str(item_id))
    return ids


async def reorder_gallery_items(db: AsyncSession, items: Any) -> int:
    """Position i in ``items`` becomes ``order = i``; existing order values are ignored."""
    ids = _reorder_ids(items)

    for index, item_id in enumerate(ids):
        await db.execute(
            update(GalleryItem)
            .where(GalleryItem.id == item_id)
            .values(order=index)
            .execution_options(synchronize_session=False)
        )
    await db.commit()
    log.info("gallery reordered: %s items", len(ids))
    return len(ids)


async def gallery_stats(db: AsyncSession) -> Dict[str, Any]:
    return {
        "total_items": await content.count_where(db, GalleryItem),
        "active_items": await content.count_where(db, GalleryItem, GalleryItem.is_active == True),
        "category_stats": await content.category_counts(db, GalleryItem),
    }


async def gallery_categories(db: AsyncSession, language: Language = Language.en, active_only: bool = False) -> List[str]:
    where = (GalleryItem.is_active == True,) if active_only else ()
    return await content.distinct_categories(db, GalleryItem, language, where)


# --------- Storefront ---------
async def list_active(db: AsyncSession, category: Optional[str] = None, language: Language = Language.en) -> List[GalleryItem]:
    params = QueryParams(category=category, language=language)
    query = build_public_query(GALLERY_COLLECTION, params, visible_field="is_active", default_sort=PUBLIC_SORT)
    return await content.fetch_all(db, GalleryItem, query)


async def get_active_item(db: AsyncSession, item_id: str) -> Optional[GalleryItem]:
    item = await get_gallery_item(db, item_id)
    if item is None or not item.is_active:
        return None
    return item
