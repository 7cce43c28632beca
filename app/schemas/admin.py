from datetime import datetime
from typing import Literal, Optional

from pydantic import EmailStr, Field

from app.schemas.common import CamelModel

Role = Literal["admin", "manager", "editor"]


class LoginRequest(CamelModel):
    username: str = Field(..., min_length=1)  # username or email
    password: str = Field(..., min_length=1)


class AdminSummary(CamelModel):
    id: str
    username: str
    email: str
    first_name: str
    last_name: str
    role: Role
    full_name: str


class AdminRead(AdminSummary):
    id: str = Field(..., serialization_alias="_id")
    is_active: bool
    login_attempts: int = 0
    lock_until: Optional[datetime] = None
    last_login: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class AdminCreate(CamelModel):
    username: str = Field(..., min_length=3)
    email: EmailStr
    password: str = Field(..., min_length=1)
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    role: Role = "editor"
    is_active: bool = True


class AdminUpdate(CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None
    role: Optional[Role] = None
    is_active: Optional[bool] = None


class ProfileUpdate(CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None


class ChangePasswordRequest(CamelModel):
    current_password: Optional[str] = None
    new_password: Optional[str] = None
