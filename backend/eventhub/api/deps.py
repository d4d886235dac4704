from typing import Any, Optional
from fastapi import Cookie, Depends, status
from sqlalchemy.orm import Session
import jwt

from eventhub.core.errors import CredentialError
from eventhub.core.security import COOKIE_NAME, decode_access_token
from eventhub.db.session import get_db
from eventhub.db.store import Store

def get_store(db: Session = Depends(get_db)) -> Store:
    return Store(db)

def get_token_claims(token: Optional[str] = Cookie(default=None, alias=COOKIE_NAME)) -> dict[str, Any]:
    """Claims of the `token` cookie.

    No cookie -> 401, unverifiable cookie -> 403. Both carry a null user.
    """
    if not token:
        raise CredentialError(status.HTTP_401_UNAUTHORIZED, "Unauthorized")
    try:
        return decode_access_token(token)
    except jwt.PyJWTError:
        raise CredentialError(status.HTTP_403_FORBIDDEN, "Invalid token")
