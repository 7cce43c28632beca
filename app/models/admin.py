from datetime import datetime
import uuid

from sqlalchemy import Boolean, Column, DateTime, Integer, String

from app.models.base import Base


class AdminRole:
    ADMIN = "admin"
    MANAGER = "manager"
    EDITOR = "editor"

    ALL = (ADMIN, MANAGER, EDITOR)


class Admin(Base):
    __tablename__ = "admins"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String, nullable=False, unique=True, index=True)
    email = Column(String, nullable=False, unique=True, index=True)
    hashed_password = Column(String, nullable=False)

    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    role = Column(String, nullable=False, default=AdminRole.EDITOR)  # "admin", "manager", "editor"
    is_active = Column(Boolean, nullable=False, default=True)

    # lockout bookkeeping
    login_attempts = Column(Integer, nullable=False, default=0)
    lock_until = Column(DateTime, nullable=True)
    last_login = Column(DateTime, nullable=True)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def is_locked(self, now: datetime = None) -> bool:
        now = now or datetime.utcnow()
        return self.lock_until is not None and self.lock_until > now
