import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401  registers every table on Base
from app.auth.routes import get_token_strategy
from app.crud import admin as admin_crud
from app.crud import gallery_item as gallery_crud
from app.crud import menu_item as menu_crud
from app.db import build_engine, get_db
from app.main import app as api
from app.models.base import Base
from app.schemas.admin import AdminCreate
from app.schemas.gallery_item import GalleryItemCreate
from app.schemas.menu_item import MenuItemCreate

PASSWORD = "secret123"


@pytest.fixture
async def engine():
    engine = build_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    api.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=api), base_url="http://test") as ac:
        yield ac
    api.dependency_overrides.clear()


# ---------- Accounts ----------
async def make_admin(db, username, role="admin", **overrides):
    data = {
        "username": username,
        "email": f"{username}@coffeeshop.com",
        "password": PASSWORD,
        "first_name": username.title(),
        "last_name": "Tester",
        "role": role,
    }
    data.update(overrides)
    return await admin_crud.create_admin(db, AdminCreate(**data))


def bearer(admin):
    return {"Authorization": f"Bearer {get_token_strategy().write_token(admin.id)}"}


@pytest.fixture
async def admin_user(db):
    return await make_admin(db, "owner", "admin")


@pytest.fixture
async def manager_user(db):
    return await make_admin(db, "manager", "manager")


@pytest.fixture
async def editor_user(db):
    return await make_admin(db, "editor", "editor")


@pytest.fixture
def admin_headers(admin_user):
    return bearer(admin_user)


@pytest.fixture
def manager_headers(manager_user):
    return bearer(manager_user)


@pytest.fixture
def editor_headers(editor_user):
    return bearer(editor_user)


# ---------- Content ----------
def menu_payload(**overrides):
    data = {
        "name": {"en": "Latte", "ar": "لاتيه"},
        "description": {"en": "Espresso with steamed milk", "ar": "إسبريسو مع حليب مبخر"},
        "category": {"en": "Hot Drinks", "ar": "مشروبات ساخنة"},
        "price": 15,
        "ingredients": {"en": ["espresso", "milk"], "ar": ["إسبريسو", "حليب"]},
        "allergens": {"en": ["dairy"], "ar": ["ألبان"]},
        "tags": ["coffee", "classic"],
    }
    data.update(overrides)
    return data


def gallery_payload(**overrides):
    data = {
        "title": {"en": "Morning bar", "ar": "البار الصباحي"},
        "image": "/images/bar.jpg",
        "category": {"en": "Interior", "ar": "الديكور"},
    }
    data.update(overrides)
    return data


async def make_menu_item(db, **overrides):
    return await menu_crud.create_menu_item(db, MenuItemCreate(**menu_payload(**overrides)))


async def make_gallery_item(db, **overrides):
    return await gallery_crud.create_gallery_item(db, GalleryItemCreate(**gallery_payload(**overrides)))
