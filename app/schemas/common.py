from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for API payloads: snake_case in Python, camelCase on the wire."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


# ---------- Enums ----------
class Language(str, Enum):
    en = "en"
    ar = "ar"


class SortOrder(str, Enum):
    asc = "asc"
    desc = "desc"


# ---------- Bilingual values ----------
class BilingualText(CamelModel):
    en: str = Field(..., min_length=1)
    ar: str = Field(..., min_length=1)


class OptionalBilingualText(CamelModel):
    en: Optional[str] = None
    ar: Optional[str] = None


class BilingualList(CamelModel):
    en: List[str] = []
    ar: List[str] = []


# ---------- Listing ----------
class QueryParams(CamelModel):
    """Everything a list/search endpoint can receive from the query string."""

    page: int = 1
    limit: Optional[int] = None
    search: Optional[str] = None
    category: Optional[str] = None
    language: Language = Language.en
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    is_discounted: bool = False
    is_featured: bool = False
    allergens: List[str] = []
    tags: List[str] = []
    sort_by: Optional[str] = None
    sort_order: Optional[SortOrder] = None


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    pages: int


# ---------- Bulk ----------
class BulkRequest(CamelModel):
    # loosely typed on purpose; the crud layer reports malformed input as a ValidationError
    action: Optional[str] = None
    ids: Any = None
    updates: Optional[dict] = None


class ReorderRequest(CamelModel):
    items: Any = None


def split_csv(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]
