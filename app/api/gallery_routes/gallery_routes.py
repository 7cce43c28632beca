from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFound
from app.crud import gallery_item as gallery_crud
from app.db import get_db
from app.schemas.common import Language
from app.schemas.gallery_item import GalleryItemRead

router = APIRouter(prefix="/api/gallery", tags=["gallery"])


@router.get("", response_model=List[GalleryItemRead])
async def list_gallery(
    category: Optional[str] = None,
    language: Language = Language.en,
    db: AsyncSession = Depends(get_db),
):
    return await gallery_crud.list_active(db, category, language)


@router.get("/category/{category}", response_model=List[GalleryItemRead])
async def list_gallery_by_category(
    category: str,
    language: Language = Language.en,
    db: AsyncSession = Depends(get_db),
):
    return await gallery_crud.list_active(db, category, language)


@router.get("/categories/all", response_model=List[str])
async def list_categories(language: Language = Language.en, db: AsyncSession = Depends(get_db)):
    return await gallery_crud.gallery_categories(db, language, active_only=True)


@router.get("/{item_id}", response_model=GalleryItemRead)
async def get_gallery_item(item_id: str, db: AsyncSession = Depends(get_db)):
    item = await gallery_crud.get_active_item(db, item_id)
    if not item:
        raise NotFound("Gallery item not found")
    return item
