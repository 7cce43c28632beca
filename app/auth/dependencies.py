# auth/dependencies.py
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.routes import bearer_transport, get_token_strategy, TokenStrategy
from app.core.exceptions import Forbidden, Unauthenticated
from app.db import get_db
from app.models.admin import Admin


async def get_current_admin(
    request: Request,
    token: Optional[str] = Depends(bearer_transport.scheme),
    strategy: TokenStrategy = Depends(get_token_strategy),
    db: AsyncSession = Depends(get_db),
) -> Admin:
    if not token:
        raise Unauthenticated("Access token required")

    admin_id = strategy.read_token(token)
    if not admin_id:
        raise Unauthenticated("Invalid or expired token")

    admin = await db.get(Admin, admin_id)
    if admin is None or not admin.is_active:
        raise Unauthenticated("Invalid token or admin not found")

    request.state.admin = admin
    return admin


def ensure_role(admin: Admin, *roles: str) -> Admin:
    if admin.role not in roles:
        raise Forbidden()
    return admin


def require_role(*roles: str):
    """Dependency factory: authenticated admin whose role is one of ``roles``."""

    async def _check_role(admin: Admin = Depends(get_current_admin)) -> Admin:
        return ensure_role(admin, *roles)

    return _check_role
