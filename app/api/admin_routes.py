import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.dependencies import ensure_role, get_current_admin, require_role
from app.auth.manager import AdminManager
from app.auth.routes import TokenStrategy, get_admin_manager, get_token_strategy
from app.core.exceptions import NotFound, ValidationError
from app.crud import admin as admin_crud
from app.db import get_db
from app.models.admin import Admin, AdminRole
from app.schemas.admin import (
    AdminCreate,
    AdminRead,
    AdminSummary,
    AdminUpdate,
    ChangePasswordRequest,
    LoginRequest,
    ProfileUpdate,
)

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])

admin_only = require_role(AdminRole.ADMIN)


# ----- Session
@router.post("/login")
async def login(
    credentials: LoginRequest,
    manager: AdminManager = Depends(get_admin_manager),
    strategy: TokenStrategy = Depends(get_token_strategy),
):
    admin = await manager.authenticate(credentials.username, credentials.password)
    token = strategy.write_token(admin.id)
    return {
        "success": True,
        "message": "Login successful",
        "data": {"token": token, "admin": AdminSummary.model_validate(admin)},
    }


@router.post("/logout")
async def logout(admin: Admin = Depends(get_current_admin)):
    # tokens are stateless; the client discards its copy
    return {"success": True, "message": "Logout successful"}


# ----- Own profile
@router.get("/profile")
async def get_profile(admin: Admin = Depends(get_current_admin)):
    return {"success": True, "data": AdminRead.model_validate(admin)}


@router.put("/profile")
async def update_profile(
    updates: ProfileUpdate,
    db: AsyncSession = Depends(get_db),
    admin: Admin = Depends(get_current_admin),
):
    admin = await admin_crud.update_profile(db, admin, updates)
    return {"success": True, "message": "Profile updated successfully", "data": AdminRead.model_validate(admin)}


@router.put("/change-password")
async def change_password(
    payload: ChangePasswordRequest,
    manager: AdminManager = Depends(get_admin_manager),
    admin: Admin = Depends(get_current_admin),
):
    await manager.change_password(admin, payload.current_password, payload.new_password)
    return {"success": True, "message": "Password changed successfully"}


# ----- Account management (admin role only)
@router.get("/admins")
async def list_admins(db: AsyncSession = Depends(get_db), admin: Admin = Depends(admin_only)):
    admins = await admin_crud.list_admins(db)
    return {"success": True, "data": [AdminRead.model_validate(a) for a in admins]}


@router.post("/admins", status_code=status.HTTP_201_CREATED)
async def create_admin(
    payload: AdminCreate,
    db: AsyncSession = Depends(get_db),
    admin: Admin = Depends(admin_only),
):
    new_admin = await admin_crud.create_admin(db, payload)
    return {"success": True, "message": "Admin created successfully", "data": AdminRead.model_validate(new_admin)}


@router.put("/admins/{admin_id}")
async def update_admin(
    admin_id: str,
    updates: AdminUpdate,
    db: AsyncSession = Depends(get_db),
    admin: Admin = Depends(admin_only),
):
    target = await admin_crud.get_admin(db, admin_id)
    if not target:
        raise NotFound("Admin not found")
    target = await admin_crud.update_admin(db, target, updates)
    return {"success": True, "message": "Admin updated successfully", "data": AdminRead.model_validate(target)}


@router.delete("/admins/{admin_id}")
async def delete_admin(
    admin_id: str,
    db: AsyncSession = Depends(get_db),
    admin: Admin = Depends(get_current_admin),
):
    # nobody may delete their own account, whatever their role
    if admin_id == admin.id:
        raise ValidationError("Cannot delete your own account")
    ensure_role(admin, AdminRole.ADMIN)

    deleted = await admin_crud.delete_admin(db, admin_id)
    if not deleted:
        raise NotFound("Admin not found")
    log.info("admin %s deleted by %s", deleted.username, admin.username)
    return {"success": True, "message": "Admin deleted successfully"}
