# app/utils/security.py

from typing import Optional, Tuple

from fastapi_users.password import PasswordHelper

# Salted password hashing (argon2/bcrypt via fastapi-users' helper)
password_helper = PasswordHelper()


def hash_password(plain_password: str) -> str:
    return password_helper.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> Tuple[bool, Optional[str]]:
    """Returns (verified, upgraded_hash); the second item is set when the stored hash should be replaced."""
    return password_helper.verify_and_update(plain_password, hashed_password)
