import logging
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.auth.config import auth_config
from app.core.exceptions import Conflict, ValidationError
from app.models.admin import Admin
from app.schemas.admin import AdminCreate, AdminUpdate, ProfileUpdate
from app.utils.security import hash_password

log = logging.getLogger(__name__)


async def get_admin(db: AsyncSession, admin_id: str) -> Optional[Admin]:
    return await db.get(Admin, admin_id)


async def get_admin_by_identifier(db: AsyncSession, identifier: str) -> Optional[Admin]:
    """Lookup by username OR email."""
    result = await db.execute(
        select(Admin).where(or_(Admin.username == identifier, Admin.email == identifier))
    )
    return result.scalars().first()


async def _email_taken(db: AsyncSession, email: str, exclude_id: str = None) -> bool:
    query = select(Admin.id).where(Admin.email == email)
    if exclude_id:
        query = query.where(Admin.id != exclude_id)
    result = await db.execute(query)
    return result.first() is not None


async def list_admins(db: AsyncSession) -> List[Admin]:
    result = await db.execute(select(Admin).order_by(Admin.created_at.desc(), Admin.id))
    return result.scalars().all()


async def create_admin(db: AsyncSession, payload: AdminCreate) -> Admin:
    if len(payload.password) < auth_config.min_password_length:
        raise ValidationError(
            f"Password must be at least {auth_config.min_password_length} characters long"
        )

    result = await db.execute(
        select(Admin.id).where(or_(Admin.username == payload.username, Admin.email == payload.email))
    )
    if result.first() is not None:
        raise Conflict()

    admin = Admin(
        username=payload.username,
        email=payload.email,
        hashed_password=hash_password(payload.password),
        first_name=payload.first_name,
        last_name=payload.last_name,
        role=payload.role,
        is_active=payload.is_active,
    )
    db.add(admin)
    await db.commit()
    await db.refresh(admin)
    log.info("admin created: %s (%s)", admin.username, admin.role)
    return admin


async def update_admin(db: AsyncSession, admin: Admin, updates: AdminUpdate) -> Admin:
    update_data = {k: v for k, v in updates.model_dump(exclude_unset=True).items() if v is not None}

    if "email" in update_data and await _email_taken(db, update_data["email"], exclude_id=admin.id):
        raise Conflict("Email is already taken")

    for key, value in update_data.items():
        setattr(admin, key, value)

    await db.commit()
    await db.refresh(admin)
    log.info("admin updated: %s fields=%s", admin.username, sorted(update_data))
    return admin


async def update_profile(db: AsyncSession, admin: Admin, updates: ProfileUpdate) -> Admin:
    # a profile edit is an admin edit restricted to the name/email fields
    return await update_admin(db, admin, AdminUpdate(**updates.model_dump(exclude_unset=True)))


async def delete_admin(db: AsyncSession, admin_id: str) -> Optional[Admin]:
    admin = await get_admin(db, admin_id)
    if admin:
        await db.delete(admin)
        await db.commit()
        log.info("admin deleted: %s", admin.username)
    return admin
