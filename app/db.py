import json

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from app.core.config import settings
from app.models.base import Base


def _json_serializer(obj):
    # keep Arabic text readable (and searchable) inside JSON columns
    return json.dumps(obj, ensure_ascii=False)


def build_engine(url: str, **kwargs):
    return create_async_engine(url, json_serializer=_json_serializer, **kwargs)


# Create engine
engine = build_engine(settings.database_url, echo=settings.database_echo)

# Async session maker
async_session = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)

# Dependency
async def get_db():
    async with async_session() as session:
        yield session

async def create_db_and_tables():
    import app.models  # triggers __init__.py

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
