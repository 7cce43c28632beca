"""
Translate list/search query parameters into SQLAlchemy filter, sort and
paging clauses.

Bilingual fields are JSON columns shaped ``{"en": ..., "ar": ...}``; text
search looks into both languages. Building a query never touches the
database, so the same parameters always produce the same clauses.
"""
import math
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from sqlalchemy import String, func, literal, or_, select
from sqlalchemy import column as sa_column
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.functions import FunctionElement

from app.core.config import settings
from app.core.exceptions import ValidationError
from app.schemas.common import Language, QueryParams, SortOrder


@dataclass(frozen=True)
class Collection:
    """How one content table is searched and sorted."""

    model: Any
    text_fields: Tuple[str, ...]
    sort_fields: Dict[str, str]
    default_sort: Tuple[Tuple[str, SortOrder], ...]
    price_field: Optional[str] = None


@dataclass(frozen=True)
class BuiltQuery:
    filters: Tuple[Any, ...]
    order_by: Tuple[Any, ...]
    page: int = 1
    limit: Optional[int] = None
    offset: int = 0

    def select(self, model):
        stmt = select(model).where(*self.filters).order_by(*self.order_by)
        if self.offset:
            stmt = stmt.offset(self.offset)
        if self.limit is not None:
            stmt = stmt.limit(self.limit)
        return stmt

    def count(self, model):
        return select(func.count()).select_from(model).where(*self.filters)

    def pages(self, total: int) -> int:
        if not self.limit:
            return 1 if total else 0
        return math.ceil(total / self.limit)


# ---------- Clause helpers ----------
def localized(column, language: Language):
    """Text of one language inside a bilingual JSON column."""
    return column[Language(language).value].as_string()


class json_elements(FunctionElement):
    """Rows of a JSON array column (or of one of its keys), one per element."""

    name = "json_elements"
    inherit_cache = True


@compiles(json_elements)
def _json_each(element, compiler, **kw):
    args = [compiler.process(arg, **kw) for arg in element.clauses]
    if len(args) > 1:
        return "json_each(%s, '$.' || %s)" % tuple(args)
    return "json_each(%s)" % args[0]


@compiles(json_elements, "postgresql")
def _json_array_elements_text(element, compiler, **kw):
    args = [compiler.process(arg, **kw) for arg in element.clauses]
    if len(args) > 1:
        return "json_array_elements_text(%s -> %s)" % tuple(args)
    return "json_array_elements_text(%s)" % args[0]


def any_element(column, condition: Callable[[Any], Any], key: Optional[str] = None):
    """EXISTS over the array elements; ``condition`` receives the element text."""
    args = (column,) if key is None else (column, literal(key, String))
    elements = json_elements(*args).table_valued(sa_column("value", String))
    return select(elements.c.value).where(condition(elements.c.value)).exists()


def tag_contains(model, term: str):
    return any_element(model.tags, lambda value: value.icontains(term, autoescape=True))


def text_search(model, text_fields: Sequence[str], term: str, include_tags: bool = False):
    columns = []
    for name in text_fields:
        column = getattr(model, name)
        columns.extend(localized(column, lang) for lang in Language)
    clauses = [c.icontains(term, autoescape=True) for c in columns]
    if include_tags:
        clauses.append(tag_contains(model, term))
    return or_(*clauses)


def price_range(column, min_price: Optional[float], max_price: Optional[float]) -> List[Any]:
    clauses = []
    if min_price is not None:
        clauses.append(column >= min_price)
    if max_price is not None:
        clauses.append(column <= max_price)
    return clauses


def any_tag(model, tags: Sequence[str]):
    return any_element(model.tags, lambda value: value.in_(list(tags)))


def any_allergen(model, allergens: Sequence[str], language: Language):
    return any_element(
        model.allergens,
        lambda value: or_(*[value.icontains(allergen, autoescape=True) for allergen in allergens]),
        key=Language(language).value,
    )


def order_clauses(collection: Collection, sort_by: Optional[str], sort_order: Optional[SortOrder]) -> Tuple[Any, ...]:
    if sort_by:
        if sort_by not in collection.sort_fields:
            raise ValidationError(
                f"Cannot sort by '{sort_by}'",
                details={"allowed": sorted(collection.sort_fields)},
            )
        direction = sort_order or collection.default_sort[0][1]
        sort = ((collection.sort_fields[sort_by], direction),)
    elif sort_order:
        sort = ((collection.default_sort[0][0], sort_order),) + tuple(collection.default_sort[1:])
    else:
        sort = collection.default_sort

    clauses = []
    for attr, direction in sort:
        column = getattr(collection.model, attr)
        clauses.append(column.asc() if direction == SortOrder.asc else column.desc())
    # stable paging across equal sort keys
    clauses.append(collection.model.id.asc())
    return tuple(clauses)


def paging(page: int, limit: Optional[int]) -> Tuple[int, int, int]:
    page = max(page or 1, 1)
    limit = limit or settings.default_page_size
    limit = max(1, min(limit, settings.max_page_size))
    return page, limit, (page - 1) * limit


# ---------- Builders ----------
def build_admin_query(collection: Collection, params: QueryParams) -> BuiltQuery:
    """Paginated admin listing: free text, English category, explicit sort."""
    filters = []
    if params.search:
        filters.append(text_search(collection.model, collection.text_fields, params.search))
    if params.category:
        filters.append(localized(collection.model.category, Language.en) == params.category)

    page, limit, offset = paging(params.page, params.limit)
    return BuiltQuery(
        filters=tuple(filters),
        order_by=order_clauses(collection, params.sort_by, params.sort_order),
        page=page,
        limit=limit,
        offset=offset,
    )


def build_public_query(
    collection: Collection,
    params: QueryParams,
    *,
    visible_field: str,
    include_tags: bool = False,
    default_sort: Optional[Tuple[Tuple[str, SortOrder], ...]] = None,
    limit: Optional[int] = None,
) -> BuiltQuery:
    """Storefront reads and searches: only visible rows, language-keyed category."""
    model = collection.model
    filters = [getattr(model, visible_field) == True]

    if params.search:
        filters.append(text_search(model, collection.text_fields, params.search, include_tags=include_tags))
    if params.category:
        filters.append(localized(model.category, params.language) == params.category)
    if collection.price_field:
        filters.extend(price_range(getattr(model, collection.price_field), params.min_price, params.max_price))
    if params.is_discounted:
        filters.append(model.is_discounted == True)
    if params.is_featured:
        filters.append(model.is_featured == True)
    if params.allergens:
        filters.append(any_allergen(model, params.allergens, params.language))
    if params.tags:
        filters.append(any_tag(model, params.tags))

    sort_collection = replace(collection, default_sort=default_sort) if default_sort else collection
    return BuiltQuery(
        filters=tuple(filters),
        order_by=order_clauses(sort_collection, None, None),
        limit=limit,
    )
