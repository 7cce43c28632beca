from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class AuthConfig(BaseSettings):
    jwt_secret: str = "coffee-shop-super-secret-key"  # 🔐 override with JWT_SECRET in production
    jwt_lifetime_seconds: int = 24 * 3600
    jwt_algorithm: str = "HS256"
    jwt_audience: str = "coffee-shop:admin"

    # lockout after repeated failed logins
    max_login_attempts: int = 5
    lock_time_seconds: int = 2 * 3600

    min_password_length: int = 6


auth_config = AuthConfig()
