from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.schemas.common import BilingualList, BilingualText, CamelModel


class NutritionalInfo(CamelModel):
    calories: Optional[float] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fat: Optional[float] = None


# ---------- Menu Item ----------
class MenuItemBase(CamelModel):
    name: BilingualText
    description: BilingualText
    category: BilingualText
    price: float = Field(..., ge=0)
    original_price: Optional[float] = Field(None, ge=0)
    image: Optional[str] = None
    is_discounted: bool = False
    discount_percentage: float = Field(0, ge=0, le=100)
    ingredients: BilingualList = BilingualList()
    allergens: BilingualList = BilingualList()
    nutritional_info: Optional[NutritionalInfo] = None
    is_available: bool = True
    is_featured: bool = False
    tags: List[str] = []
    order: int = 0


class MenuItemCreate(MenuItemBase):
    pass


class MenuItemUpdate(CamelModel):
    name: Optional[BilingualText] = None
    description: Optional[BilingualText] = None
    category: Optional[BilingualText] = None
    price: Optional[float] = Field(None, ge=0)
    original_price: Optional[float] = Field(None, ge=0)
    image: Optional[str] = None
    is_discounted: Optional[bool] = None
    discount_percentage: Optional[float] = Field(None, ge=0, le=100)
    ingredients: Optional[BilingualList] = None
    allergens: Optional[BilingualList] = None
    nutritional_info: Optional[NutritionalInfo] = None
    is_available: Optional[bool] = None
    is_featured: Optional[bool] = None
    tags: Optional[List[str]] = None
    order: Optional[int] = None

    class Config:
        extra = "forbid"


class MenuItemRead(MenuItemBase):
    id: str = Field(..., serialization_alias="_id")
    created_at: datetime
    updated_at: datetime


# ---------- Stats ----------
class CategoryCount(CamelModel):
    category: Optional[str] = None
    count: int


class PriceStats(CamelModel):
    avg_price: float = 0
    min_price: float = 0
    max_price: float = 0


class MenuStats(CamelModel):
    total_items: int
    available_items: int
    featured_items: int
    discounted_items: int
    category_stats: List[CategoryCount]
    price_stats: PriceStats
