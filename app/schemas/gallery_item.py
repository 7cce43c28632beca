from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.schemas.common import BilingualText, CamelModel, OptionalBilingualText
from app.schemas.menu_item import CategoryCount


# ---------- Gallery Item ----------
class GalleryItemBase(CamelModel):
    title: BilingualText
    description: Optional[OptionalBilingualText] = None
    image: str = Field(..., min_length=1)
    category: BilingualText
    is_active: bool = True
    order: int = 0


class GalleryItemCreate(GalleryItemBase):
    pass


class GalleryItemUpdate(CamelModel):
    title: Optional[BilingualText] = None
    description: Optional[OptionalBilingualText] = None
    image: Optional[str] = Field(None, min_length=1)
    category: Optional[BilingualText] = None
    is_active: Optional[bool] = None
    order: Optional[int] = None

    class Config:
        extra = "forbid"


class GalleryItemRead(GalleryItemBase):
    id: str = Field(..., serialization_alias="_id")
    created_at: datetime


class GalleryStats(CamelModel):
    total_items: int
    active_items: int
    category_stats: List[CategoryCount]
