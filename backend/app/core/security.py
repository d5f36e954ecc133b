"""
Password hashing and JWT token handling.

Tokens are stateless: verification checks the signature and the `exp`
claim only. There is no revocation list, so a leaked token stays valid
until it expires.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import get_settings

settings = get_settings()

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

IDENTITY_CLAIMS = ("id", "email", "name")


class InvalidTokenError(Exception):
    """Raised when a token is malformed, expired, mis-signed or incomplete."""


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """
    Sign `data` into a JWT carrying `iat` and `exp`.
    Defaults to ACCESS_TOKEN_EXPIRE_MINUTES (24 hours).
    """
    issued_at = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = data.copy()
    to_encode.update({"iat": issued_at, "exp": issued_at + expires_delta})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def create_user_token(user_id: int, email: str, name: str) -> str:
    return create_access_token({"id": user_id, "email": email, "name": name})


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Verify signature and expiry and return the claims.
    Raises InvalidTokenError for anything that is not a complete identity token.
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        raise InvalidTokenError(str(e)) from e

    missing = [claim for claim in IDENTITY_CLAIMS if payload.get(claim) is None]
    if missing:
        raise InvalidTokenError(f"missing claims: {', '.join(missing)}")
    return payload
