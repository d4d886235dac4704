from typing import Any
import jwt
from passlib.context import CryptContext

from eventhub.core.config import settings

COOKIE_NAME = "token"

# Prefer argon2, keep bcrypt so hashes from the previous backend still verify
pwd_context = CryptContext(schemes=["argon2", "bcrypt"], deprecated="auto")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def create_access_token(user_id: int, email: str) -> str:
    """Sign a session token for the cookie.

    Tokens carry no expiry: a login lasts until the cookie is cleared.
    """
    to_encode: dict[str, Any] = {"id": user_id, "email": email}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    """Decode a session token.
    Raises jwt.PyJWTError if malformed or signed with another key.
    """
    payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    if "id" not in payload:
        raise jwt.InvalidTokenError("Missing user id")
    return payload
