from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.dependencies import get_current_admin, require_role
from app.core.exceptions import NotFound
from app.crud import menu_item as menu_crud
from app.db import get_db
from app.models.admin import AdminRole
from app.schemas.common import BulkRequest, QueryParams, SortOrder
from app.schemas.menu_item import MenuItemCreate, MenuItemRead, MenuItemUpdate, MenuStats

router = APIRouter(prefix="/api/admin/menu", tags=["admin-menu"])

can_edit = require_role(AdminRole.ADMIN, AdminRole.MANAGER, AdminRole.EDITOR)
can_delete = require_role(AdminRole.ADMIN, AdminRole.MANAGER)


@router.get("")
async def list_menu_items(
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
    items, pagination = await menu_crud.list_menu_items(db, params)
    return {
        "success": True,
        "data": [MenuItemRead.model_validate(i) for i in items],
        "pagination": pagination,
    }


@router.get("/stats/overview")
async def menu_stats(db: AsyncSession = Depends(get_db), admin=Depends(get_current_admin)):
    stats = await menu_crud.menu_stats(db)
    return {"success": True, "data": MenuStats.model_validate(stats)}


@router.get("/categories/all")
async def menu_categories(db: AsyncSession = Depends(get_db), admin=Depends(get_current_admin)):
    return {"success": True, "data": await menu_crud.menu_categories(db)}


@router.post("/bulk")
async def bulk_menu_items(
    payload: BulkRequest,
    db: AsyncSession = Depends(get_db),
    admin=Depends(can_delete),
):
    matched = await menu_crud.bulk_menu_items(db, payload.action, payload.ids, payload.updates)
    return {
        "success": True,
        "message": f"Bulk {payload.action} completed successfully",
        "data": {"matched": matched},
    }


@router.get("/{item_id}")
async def get_menu_item(item_id: str, db: AsyncSession = Depends(get_db), admin=Depends(get_current_admin)):
    item = await menu_crud.get_menu_item(db, item_id)
    if not item:
        raise NotFound("Menu item not found")
    return {"success": True, "data": MenuItemRead.model_validate(item)}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_menu_item(
    payload: MenuItemCreate,
    db: AsyncSession = Depends(get_db),
    admin=Depends(can_edit),
):
    item = await menu_crud.create_menu_item(db, payload)
    return {"success": True, "message": "Menu item created successfully", "data": MenuItemRead.model_validate(item)}


@router.put("/{item_id}")
async def update_menu_item(
    item_id: str,
    updates: MenuItemUpdate,
    db: AsyncSession = Depends(get_db),
    admin=Depends(can_edit),
):
    item = await menu_crud.update_menu_item(db, item_id, updates)
    if not item:
        raise NotFound("Menu item not found")
    return {"success": True, "message": "Menu item updated successfully", "data": MenuItemRead.model_validate(item)}


@router.delete("/{item_id}")
async def delete_menu_item(item_id: str, db: AsyncSession = Depends(get_db), admin=Depends(can_delete)):
    item = await menu_crud.delete_menu_item(db, item_id)
    if not item:
        raise NotFound("Menu item not found")
    return {"success": True, "message": "Menu item deleted successfully"}
