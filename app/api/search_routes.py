from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import menu_item as menu_crud
from app.db import get_db
from app.schemas.common import Language, QueryParams, split_csv
from app.schemas.menu_item import MenuItemRead

router = APIRouter(prefix="/api/search", tags=["search"])


@router.get("", response_model=List[MenuItemRead])
async def search_menu(
    q: Optional[str] = None,
    category: Optional[str] = None,
    language: Language = Language.en,
    min_price: Optional[float] = Query(None, alias="minPrice"),
    max_price: Optional[float] = Query(None, alias="maxPrice"),
    db: AsyncSession = Depends(get_db),
):
    params = QueryParams(
        search=q, category=category, language=language, min_price=min_price, max_price=max_price
    )
    return await menu_crud.search(db, params)


@router.get("/advanced", response_model=List[MenuItemRead])
async def advanced_search(
    q: Optional[str] = None,
    category: Optional[str] = None,
    language: Language = Language.en,
    min_price: Optional[float] = Query(None, alias="minPrice"),
    max_price: Optional[float] = Query(None, alias="maxPrice"),
    is_discounted: Optional[str] = Query(None, alias="isDiscounted"),
    is_featured: Optional[str] = Query(None, alias="isFeatured"),
    allergens: Optional[str] = None,
    tags: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    params = QueryParams(
        search=q,
        category=category,
        language=language,
        min_price=min_price,
        max_price=max_price,
        # only an explicit "true" switches these filters on
        is_discounted=is_discounted == "true",
        is_featured=is_featured == "true",
        allergens=split_csv(allergens),
        tags=split_csv(tags),
    )
    return await menu_crud.search(db, params, advanced=True)


@router.get("/suggestions", response_model=List[str])
async def search_suggestions(
    q: Optional[str] = None,
    language: Language = Language.en,
    db: AsyncSession = Depends(get_db),
):
    return await menu_crud.suggestions(db, q, language)
