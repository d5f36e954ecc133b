"""
Request dependencies: bearer-token authentication.
"""

from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError
import structlog

from app.core.security import InvalidTokenError, decode_access_token
from app.core.logging import get_logger
from app.schemas.user import TokenClaims

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenClaims:
    """
    Decode the `Authorization: Bearer <token>` header into the caller's identity.

    No header at all is "No token provided"; anything else that fails
    (wrong scheme, bad signature, expired, missing claims) is "Invalid token".
    """
    if credentials is None:
        if request.headers.get("Authorization"):
            logger.warning("auth_failed", reason="bad_scheme")
            raise _unauthorized("Invalid token")
        raise _unauthorized("No token provided")

    try:
        claims = TokenClaims.model_validate(decode_access_token(credentials.credentials))
    except (InvalidTokenError, ValidationError) as e:
        logger.warning("auth_failed", reason="invalid_token", error=str(e))
        raise _unauthorized("Invalid token")

    structlog.contextvars.bind_contextvars(user_id=claims.id)
    return claims


async def get_current_user_id(user: TokenClaims = Depends(get_current_user)) -> int:
    return user.id
