"""
Operations shared by the menu and gallery tables: paging, bulk actions,
category statistics.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError
from sqlalchemy import delete, desc, func, not_, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.exceptions import ValidationError
from app.schemas.common import Language
from app.utils.query_builder import BuiltQuery, localized

log = logging.getLogger(__name__)


async def fetch_page(db: AsyncSession, model, query: BuiltQuery) -> Tuple[List[Any], Dict[str, int]]:
    """One page of rows plus the pagination block for the response envelope."""
    total = await db.scalar(query.count(model)) or 0
    result = await db.execute(query.select(model))
    pagination = {
        "page": query.page,
        "limit": query.limit,
        "total": total,
        "pages": query.pages(total),
    }
    return result.scalars().all(), pagination


async def fetch_all(db: AsyncSession, model, query: BuiltQuery) -> List[Any]:
    result = await db.execute(query.select(model))
    return result.scalars().all()


def changes_from(updates: BaseModel, nullable: frozenset = frozenset()) -> Dict[str, Any]:
    """Set fields of a partial-update schema as column values; nulls only reach nullable columns."""
    values = updates.model_dump(exclude_unset=True)
    return {k: v for k, v in values.items() if v is not None or k in nullable}


def parse_updates(schema: Type[BaseModel], raw: Mapping[str, Any], nullable: frozenset = frozenset()) -> Dict[str, Any]:
    try:
        parsed = schema.model_validate(raw)
    except SchemaValidationError as exc:
        details = [
            {"field": ".".join(str(p) for p in err["loc"]), "error": err["msg"]}
            for err in exc.errors()
        ]
        raise ValidationError("Invalid updates for bulk update operation", details=details)
    values = changes_from(parsed, nullable)
    if not values:
        raise ValidationError("Updates required for bulk update operation")
    return values


def check_bulk_request(action: Optional[str], ids: Any) -> List[str]:
    if not action or ids is None or not isinstance(ids, list):
        raise ValidationError("Invalid bulk operation parameters")
    return [str(i) for i in ids]


async def run_bulk(
    db: AsyncSession,
    model,
    action: str,
    ids: Any,
    updates: Optional[Mapping[str, Any]],
    *,
    update_schema: Type[BaseModel],
    toggles: Mapping[str, Any],
    nullable: frozenset = frozenset(),
) -> int:
    """Apply one bulk action to every row in ``ids``; returns the number of rows matched."""
    ids = check_bulk_request(action, ids)
    where = model.id.in_(ids)

    if action == "delete":
        stmt = delete(model).where(where)
    elif action == "update":
        if not updates:
            raise ValidationError("Updates required for bulk update operation")
        stmt = update(model).where(where).values(**parse_updates(update_schema, updates, nullable))
    elif action in toggles:
        column = toggles[action]
        # each row flips its own value
        stmt = update(model).where(where).values({column: not_(column)})
    else:
        raise ValidationError("Invalid action")

    result = await db.execute(stmt.execution_options(synchronize_session=False))
    await db.commit()
    log.info("bulk %s on %s: requested=%s matched=%s", action, model.__tablename__, len(ids), result.rowcount)
    return result.rowcount


async def count_where(db: AsyncSession, model, *clauses) -> int:
    return await db.scalar(select(func.count()).select_from(model).where(*clauses)) or 0


async def category_counts(db: AsyncSession, model) -> List[Dict[str, Any]]:
    """Rows per English category, largest first."""
    category = localized(model.category, Language.en).label("category")
    result = await db.execute(
        select(category, func.count(model.id).label("count"))
        .group_by("category")
        .order_by(desc("count"), "category")
    )
    return [{"category": row.category, "count": row.count} for row in result]


async def distinct_categories(db: AsyncSession, model, language: Language = Language.en, where=()) -> List[str]:
    category = localized(model.category, language).label("category")
    result = await db.execute(
        select(category).where(*where).distinct().order_by("category")
    )
    return [value for value in result.scalars().all() if value]
