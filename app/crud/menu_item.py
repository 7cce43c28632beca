import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.config import settings
from app.crud import content
from app.models.menu.menu_item import MenuItem
from app.schemas.common import Language, QueryParams, SortOrder
from app.schemas.menu_item import MenuItemCreate, MenuItemUpdate
from app.utils.query_builder import Collection, build_admin_query, build_public_query, localized, tag_contains

log = logging.getLogger(__name__)

MENU_COLLECTION = Collection(
    model=MenuItem,
    text_fields=("name", "description"),
    sort_fields={
        "createdAt": "created_at",
        "updatedAt": "updated_at",
        "price": "price",
        "order": "order",
        "discountPercentage": "discount_percentage",
        "isAvailable": "is_available",
        "isFeatured": "is_featured",
    },
    default_sort=(("created_at", SortOrder.desc),),
    price_field="price",
)

# storefront listing: display order first, then newest
PUBLIC_SORT = (("order", SortOrder.asc), ("created_at", SortOrder.desc))
SEARCH_SORT = (("is_featured", SortOrder.desc), ("created_at", SortOrder.desc))
ADVANCED_SEARCH_SORT = (
    ("is_featured", SortOrder.desc),
    ("discount_percentage", SortOrder.desc),
    ("created_at", SortOrder.desc),
)

TOGGLES = {
    "toggle-availability": MenuItem.is_available,
    "toggle-featured": MenuItem.is_featured,
}

NULLABLE_FIELDS = frozenset({"original_price", "image", "nutritional_info"})


# --------- Admin CRUD ---------
async def create_menu_item(db: AsyncSession, payload: MenuItemCreate) -> MenuItem:
    item = MenuItem(**payload.model_dump())
    db.add(item)
    await db.commit()
    await db.refresh(item)
    log.info("menu item created: %s (%s)", item.id, item.name.get("en"))
    return item


async def get_menu_item(db: AsyncSession, item_id: str) -> Optional[MenuItem]:
    return await db.get(MenuItem, item_id)


async def list_menu_items(db: AsyncSession, params: QueryParams) -> Tuple[List[MenuItem], Dict[str, int]]:
    query = build_admin_query(MENU_COLLECTION, params)
    return await content.fetch_page(db, MenuItem, query)


async def update_menu_item(db: AsyncSession, item_id: str, updates: MenuItemUpdate) -> Optional[MenuItem]:
    item = await get_menu_item(db, item_id)
    if not item:
        return None

    for key, value in content.changes_from(updates, NULLABLE_FIELDS).items():
        setattr(item, key, value)

    await db.commit()
    await db.refresh(item)
    return item


async def delete_menu_item(db: AsyncSession, item_id: str) -> Optional[MenuItem]:
    item = await get_menu_item(db, item_id)
    if item:
        await db.delete(item)
        await db.commit()
        log.info("menu item deleted: %s", item_id)
    return item


async def bulk_menu_items(db: AsyncSession, action: str, ids: Any, updates: Optional[dict] = None) -> int:
    return await content.run_bulk(
        db,
        MenuItem,
        action,
        ids,
        updates,
        update_schema=MenuItemUpdate,
        toggles=TOGGLES,
        nullable=NULLABLE_FIELDS,
    )


async def menu_stats(db: AsyncSession) -> Dict[str, Any]:
    price = await db.execute(
        select(func.avg(MenuItem.price), func.min(MenuItem.price), func.max(MenuItem.price))
    )
    avg_price, min_price, max_price = price.one()

    return {
        "total_items": await content.count_where(db, MenuItem),
        "available_items": await content.count_where(db, MenuItem, MenuItem.is_available == True),
        "featured_items": await content.count_where(db, MenuItem, MenuItem.is_featured == True),
        "discounted_items": await content.count_where(db, MenuItem, MenuItem.is_discounted == True),
        "category_stats": await content.category_counts(db, MenuItem),
        "price_stats": {
            "avg_price": avg_price or 0,
            "min_price": min_price or 0,
            "max_price": max_price or 0,
        },
    }


async def menu_categories(db: AsyncSession, language: Language = Language.en, available_only: bool = False) -> List[str]:
    where = (MenuItem.is_available == True,) if available_only else ()
    return await content.distinct_categories(db, MenuItem, language, where)


# --------- Storefront ---------
async def list_available(db: AsyncSession, category: Optional[str] = None, language: Language = Language.en) -> List[MenuItem]:
    params = QueryParams(category=category, language=language)
    query = build_public_query(MENU_COLLECTION, params, visible_field="is_available", default_sort=PUBLIC_SORT)
    return await content.fetch_all(db, MenuItem, query)


async def list_discounted(db: AsyncSession) -> List[MenuItem]:
    params = QueryParams(is_discounted=True)
    query = build_public_query(
        MENU_COLLECTION,
        params,
        visible_field="is_available",
        default_sort=(("discount_percentage", SortOrder.desc),),
    )
    return await content.fetch_all(db, MenuItem, query)


async def list_featured(db: AsyncSession) -> List[MenuItem]:
    params = QueryParams(is_featured=True)
    query = build_public_query(
        MENU_COLLECTION,
        params,
        visible_field="is_available",
        default_sort=(("created_at", SortOrder.desc),),
    )
    return await content.fetch_all(db, MenuItem, query)


async def get_available_item(db: AsyncSession, item_id: str) -> Optional[MenuItem]:
    item = await get_menu_item(db, item_id)
    if item is None or not item.is_available:
        return None
    return item


async def search(db: AsyncSession, params: QueryParams, advanced: bool = False) -> List[MenuItem]:
    """Storefront search; the advanced variant honours every filter and has a larger cap."""
    if not advanced:
        params = params.model_copy(
            update={"is_discounted": False, "is_featured": False, "allergens": [], "tags": []}
        )
    query = build_public_query(
        MENU_COLLECTION,
        params,
        visible_field="is_available",
        include_tags=True,
        default_sort=ADVANCED_SEARCH_SORT if advanced else SEARCH_SORT,
        limit=settings.advanced_search_limit if advanced else settings.search_limit,
    )
    return await content.fetch_all(db, MenuItem, query)


async def suggestions(db: AsyncSession, term: Optional[str], language: Language = Language.en) -> List[str]:
    if not term or len(term) < 2:
        return []

    name = localized(MenuItem.name, language)
    matches = or_(
        name.icontains(term, autoescape=True),
        localized(MenuItem.category, language).icontains(term, autoescape=True),
        tag_contains(MenuItem, term),
    )
    result = await db.execute(
        select(name.label("name"))
        .where(MenuItem.is_available == True, matches)
        .order_by(MenuItem.created_at.desc(), MenuItem.id)
        .limit(settings.suggestion_limit)
    )

    seen = []
    for value in result.scalars().all():
        if value and value not in seen:
            seen.append(value)
    return seen
