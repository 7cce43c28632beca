from typing import Optional

import jwt
from fastapi import Depends
from fastapi_users.authentication import BearerTransport
from fastapi_users.jwt import decode_jwt, generate_jwt
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.config import auth_config
from app.auth.manager import AdminManager
from app.db import get_db

bearer_transport = BearerTransport(tokenUrl="api/admin/login")


class TokenStrategy:
    """Stateless signed bearer tokens.

    The admin id travels as ``sub``. ``aud`` pins tokens to this API and
    ``exp`` (added by ``generate_jwt``) bounds their lifetime; no other
    claims are written.
    """

    def __init__(self, secret: str, lifetime_seconds: int, audience: str, algorithm: str = "HS256"):
        self.secret = secret
        self.lifetime_seconds = lifetime_seconds
        self.audience = audience
        self.algorithm = algorithm

    def write_token(self, admin_id: str) -> str:
        data = {"sub": str(admin_id), "aud": self.audience}
        return generate_jwt(data, self.secret, self.lifetime_seconds, algorithm=self.algorithm)

    def read_token(self, token: Optional[str]) -> Optional[str]:
        if not token:
            return None
        try:
            data = decode_jwt(token, self.secret, [self.audience], algorithms=[self.algorithm])
        except jwt.PyJWTError:
            return None
        return data.get("sub")


def get_token_strategy() -> TokenStrategy:
    return TokenStrategy(
        secret=auth_config.jwt_secret,
        lifetime_seconds=auth_config.jwt_lifetime_seconds,
        audience=auth_config.jwt_audience,  # ✅ MUST match JWT aud
        algorithm=auth_config.jwt_algorithm,
    )


# Dependency to get AdminManager
async def get_admin_manager(db: AsyncSession = Depends(get_db)):
    yield AdminManager(db)
