from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFound
from app.crud import menu_item as menu_crud
from app.db import get_db
from app.schemas.common import Language
from app.schemas.menu_item import MenuItemRead

router = APIRouter(prefix="/api/menu", tags=["menu"])


@router.get("", response_model=List[MenuItemRead])
async def list_menu(
    category: Optional[str] = None,
    language: Language = Language.en,
    db: AsyncSession = Depends(get_db),
):
    return await menu_crud.list_available(db, category, language)


@router.get("/category/{category}", response_model=List[MenuItemRead])
async def list_menu_by_category(
    category: str,
    language: Language = Language.en,
    db: AsyncSession = Depends(get_db),
):
    return await menu_crud.list_available(db, category, language)


# Hero slider
@router.get("/discounted", response_model=List[MenuItemRead])
async def list_discounted(db: AsyncSession = Depends(get_db)):
    return await menu_crud.list_discounted(db)


@router.get("/featured", response_model=List[MenuItemRead])
async def list_featured(db: AsyncSession = Depends(get_db)):
    return await menu_crud.list_featured(db)


@router.get("/categories/all", response_model=List[str])
async def list_categories(language: Language = Language.en, db: AsyncSession = Depends(get_db)):
    return await menu_crud.menu_categories(db, language, available_only=True)


@router.get("/{item_id}", response_model=MenuItemRead)
async def get_menu_item(item_id: str, db: AsyncSession = Depends(get_db)):
    item = await menu_crud.get_available_item(db, item_id)
    if not item:
        raise NotFound("Menu item not found")
    return item
