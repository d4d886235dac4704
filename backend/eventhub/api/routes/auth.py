import logging
from fastapi import APIRouter, Depends, HTTPException, Response, status

from eventhub.api.deps import get_store, get_token_claims
from eventhub.core.config import settings
from eventhub.core.errors import CredentialError
from eventhub.core.security import COOKIE_NAME, create_access_token, get_password_hash, verify_password
from eventhub.db.store import Store
from eventhub.schemas.auth import UserLogin, UserOut, UserRegister

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/register", response_model=UserOut)
def register(payload: UserRegister, store: Store = Depends(get_store)):
    # No pre-check for an existing email: the unique constraint decides (-> 422)
    user = store.create_user(payload.name, payload.email, get_password_hash(payload.password))
    logger.info("Registered user %s", user.id)
    return {"id": user.id, "name": user.name, "email": user.email}

@router.post("/login")
def login(payload: UserLogin, response: Response, store: Store = Depends(get_store)):
    """Password login.

    404 if no user has this email, 401 if the password does not match.
    On success the signed token goes into an HTTP-only cookie.
    """
    user = store.get_user_by_email(payload.email)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    if not verify_password(payload.password, user.password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid password")
    token = create_access_token(user.id, user.email)
    response.set_cookie(
        COOKIE_NAME,
        token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )
    return {"id": user.id, "email": user.email, "name": user.name}

@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(COOKIE_NAME, httponly=True, secure=settings.cookie_secure, samesite=settings.cookie_samesite)
    return {"ok": True}

@router.get("/profile")
def profile(claims: dict = Depends(get_token_claims), store: Store = Depends(get_store)):
    # Always re-read: the token only identifies the user
    user = store.get_user(claims["id"])
    if not user:
        raise CredentialError(status.HTTP_404_NOT_FOUND, "User not found")
    return {"name": user.name, "email": user.email, "id": user.id}
