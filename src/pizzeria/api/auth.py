"""Bearer-token authentication: JWT issued at login, resolved per request."""

import os
from datetime import UTC, datetime, timedelta

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt

ALGORITHM = "HS256"
DEV_SECRET_KEY = "pizza-planet-secret-key-change-in-production"

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/accounts/login", auto_error=False)


def signing_key() -> str:
    """Signing key from PIZZERIA_SECRET_KEY.

    Outside production a development key is used when the variable is unset.
    """
    key = os.environ.get("PIZZERIA_SECRET_KEY")
    if key:
        return key
    if os.environ.get("PROTEAN_ENV", "").lower() == "production":
        raise RuntimeError("PIZZERIA_SECRET_KEY must be set in production")
    return DEV_SECRET_KEY


def _expiry() -> timedelta:
    return timedelta(minutes=int(os.environ.get("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24)))


def create_access_token(user_id: str, expires_delta: timedelta | None = None) -> str:
    """Create a signed token whose subject is the user id."""
    expire = datetime.now(UTC) + (expires_delta or _expiry())
    return jwt.encode({"sub": str(user_id), "exp": expire}, signing_key(), algorithm=ALGORITHM)


def decode_access_token(token: str) -> str | None:
    """Return the user id in a valid token, or None."""
    try:
        payload = jwt.decode(token, signing_key(), algorithms=[ALGORITHM])
    except JWTError:
        return None
    return payload.get("sub")


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def current_user_id(token: str | None = Depends(oauth2_scheme)) -> str | None:
    """The signed-in user's id; None for anonymous callers.

    A token that is present but invalid is rejected rather than ignored.
    """
    if not token:
        return None

    user_id = decode_access_token(token)
    if user_id is None:
        raise _unauthorized("Invalid or expired token")
    return user_id


async def require_user_id(user_id: str | None = Depends(current_user_id)) -> str:
    if user_id is None:
        raise _unauthorized("Not authenticated")
    return user_id
