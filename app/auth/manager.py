from datetime import datetime, timedelta
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.config import AuthConfig, auth_config
from app.core.exceptions import AccountInactive, AccountLocked, InvalidCredentials, ValidationError
from app.crud import admin as admin_crud
from app.models.admin import Admin
from app.utils.security import hash_password, verify_password

log = logging.getLogger(__name__)


class AdminManager:
    """Credential checks and lockout bookkeeping for admin accounts."""

    def __init__(self, db: AsyncSession, config: AuthConfig = auth_config):
        self.db = db
        self.config = config

    async def authenticate(self, identifier: str, password: str) -> Admin:
        admin = await admin_crud.get_admin_by_identifier(self.db, identifier)
        if admin is None:
            log.info("login failed: unknown account %r", identifier)
            raise InvalidCredentials()

        now = datetime.utcnow()
        if admin.is_locked(now):
            log.info("login rejected: account %s locked until %s", admin.username, admin.lock_until)
            raise AccountLocked()

        if not admin.is_active:
            raise AccountInactive()

        verified, upgraded_hash = verify_password(password, admin.hashed_password)
        if not verified:
            await self.register_failed_attempt(admin, now)
            raise InvalidCredentials()

        admin.login_attempts = 0
        admin.lock_until = None
        admin.last_login = now
        if upgraded_hash:
            admin.hashed_password = upgraded_hash
        await self.db.commit()
        await self.db.refresh(admin)

        log.info("login: admin=%s role=%s", admin.username, admin.role)
        return admin

    async def register_failed_attempt(self, admin: Admin, now: datetime = None) -> None:
        now = now or datetime.utcnow()

        if admin.lock_until is not None and admin.lock_until <= now:
            # previous lock has run out, start counting again
            admin.login_attempts = 1
            admin.lock_until = None
        else:
            admin.login_attempts = (admin.login_attempts or 0) + 1
            if admin.login_attempts >= self.config.max_login_attempts and not admin.is_locked(now):
                admin.lock_until = now + timedelta(seconds=self.config.lock_time_seconds)
                log.warning(
                    "account locked: admin=%s attempts=%s until=%s",
                    admin.username, admin.login_attempts, admin.lock_until,
                )

        await self.db.commit()
        log.info("login failed: admin=%s attempts=%s", admin.username, admin.login_attempts)

    async def change_password(self, admin: Admin, current_password: str, new_password: str) -> Admin:
        if not current_password or not new_password:
            raise ValidationError("Current password and new password are required")

        if len(new_password) < self.config.min_password_length:
            raise ValidationError(
                f"New password must be at least {self.config.min_password_length} characters long"
            )

        verified, _ = verify_password(current_password, admin.hashed_password)
        if not verified:
            raise ValidationError("Current password is incorrect")

        admin.hashed_password = hash_password(new_password)
        await self.db.commit()
        await self.db.refresh(admin)
        log.info("password changed: admin=%s", admin.username)
        return admin
