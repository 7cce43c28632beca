from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.dependencies import get_current_admin, require_role
from app.core.exceptions import NotFound
from app.crud import gallery_item as gallery_crud
from app.db import get_db
from app.models.admin import AdminRole
from app.schemas.common import BulkRequest, QueryParams, ReorderRequest, SortOrder
from app.schemas.gallery_item import GalleryItemCreate, GalleryItemRead, GalleryItemUpdate, GalleryStats

router = APIRouter(prefix="/api/admin/gallery", tags=["admin-gallery"])

can_edit = require_role(AdminRole.ADMIN, AdminRole.MANAGER, AdminRole.EDITOR)
can_delete = require_role(AdminRole.ADMIN, AdminRole.MANAGER)


@router.get("")
async def list_gallery_items(
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    search: Optional[str] = None,
    category: Optional[str] = None,
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: Optional[SortOrder] = Query(None, alias="sortOrder"),
    db: AsyncSession = Depends(get_db),
    admin=Depends(get_current_admin),
):
    params = QueryParams(
        page=page, limit=limit, search=search, category=category, sort_by=sort_by, sort_order=sort_order
    )
    items, pagination = await gallery_crud.list_gallery_items(db, params)
    return {
        "success": True,
        "data": [GalleryItemRead.model_validate(i) for i in items],
        "pagination": pagination,
    }


@router.get("/stats/overview")
async def gallery_stats(db: AsyncSession = Depends(get_db), admin=Depends(get_current_admin)):
    stats = await gallery_crud.gallery_stats(db)
    return {"success": True, "data": GalleryStats.model_validate(stats)}


@router.get("/categories/all")
async def gallery_categories(db: AsyncSession = Depends(get_db), admin=Depends(get_current_admin)):
    return {"success": True, "data": await gallery_crud.gallery_categories(db)}


@router.post("/bulk")
async def bulk_gallery_items(
    payload: BulkRequest,
    db: AsyncSession = Depends(get_db),
    admin=Depends(can_delete),
):
    matched = await gallery_crud.bulk_gallery_items(db, payload.action, payload.ids, payload.updates)
    return {
        "success": True,
        "message": f"Bulk {payload.action} completed successfully",
        "data": {"matched": matched},
    }


@router.post("/reorder")
async def reorder_gallery_items(
    payload: ReorderRequest,
    db: AsyncSession = Depends(get_db),
    admin=Depends(can_edit),
):
    await gallery_crud.reorder_gallery_items(db, payload.items)
    return {"success": True, "message": "Gallery items reordered successfully"}


@router.get("/{item_id}")
async def get_gallery_item(item_id: str, db: AsyncSession = Depends(get_db), admin=Depends(get_current_admin)):
    item = await gallery_crud.get_gallery_item(db, item_id)
    if not item:
        raise NotFound("Gallery item not found")
    return {"success": True, "data": GalleryItemRead.model_validate(item)}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_gallery_item(
    payload: GalleryItemCreate,
    db: AsyncSession = Depends(get_db),
    admin=Depends(can_edit),
):
    item = await gallery_crud.create_gallery_item(db, payload)
    return {"success": True, "message": "Gallery item created successfully", "data": GalleryItemRead.model_validate(item)}


@router.put("/{item_id}")
async def update_gallery_item(
    item_id: str,
    updates: GalleryItemUpdate,
    db: AsyncSession = Depends(get_db),
    admin=Depends(can_edit),
):
    item = await gallery_crud.update_gallery_item(db, item_id, updates)
    if not item:
        raise NotFound("Gallery item not found")
    return {"success": True, "message": "Gallery item updated successfully", "data": GalleryItemRead.model_validate(item)}


@router.delete("/{item_id}")
async def delete_gallery_item(item_id: str, db: AsyncSession = Depends(get_db), admin=Depends(can_delete)):
    item = await gallery_crud.delete_gallery_item(db, item_id)
    if not item:
        raise NotFound("Gallery item not found")
    return {"success": True, "message": "Gallery item deleted successfully"}
