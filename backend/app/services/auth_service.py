"""
Authentication service handling user registration and login.
"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import HTTPException, status

from app.models.user import User
from app.schemas.user import UserCreate, UserLogin
from app.core.security import hash_password, verify_password, create_user_token
from app.core.metrics import record_auth_attempt
from app.core.logging import get_logger

logger = get_logger(__name__)

DUPLICATE_EMAIL_DETAIL = "Email already exists"
INVALID_CREDENTIALS_DETAIL = "Invalid email or password"


def _duplicate_email(email: str) -> HTTPException:
    logger.warning("registration_failed", reason="email_exists", email=email)
    record_auth_attempt("register", "conflict")
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=DUPLICATE_EMAIL_DETAIL,
    )


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def register_user(db: AsyncSession, user_data: UserCreate) -> User:
    """
    Register a new user with a bcrypt-hashed password.
    Raises 400 if the email is already registered.
    """
    if await get_user_by_email(db, user_data.email):
        raise _duplicate_email(user_data.email)

    user = User(
        name=user_data.name,
        email=user_data.email,
        password_hash=hash_password(user_data.password),
    )
    db.add(user)
    try:
        await db.flush()
    except IntegrityError:
        # Lost a race against a concurrent registration for the same email
        await db.rollback()
        raise _duplicate_email(user_data.email)
    await db.refresh(user)
    await db.commit()

    logger.info("user_registered", user_id=user.id, email=user.email)
    record_auth_attempt("register", "success")
    return user


async def authenticate_user(db: AsyncSession, login_data: UserLogin) -> str:
    """
    Authenticate user and return a signed access token.
    Unknown email and wrong password produce the same 401.
    """
    user = await get_user_by_email(db, login_data.email)

    if not user or not verify_password(login_data.password, user.password_hash):
        logger.warning("login_failed", email=login_data.email, known_email=user is not None)
        record_auth_attempt("login", "invalid")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS_DETAIL,
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = create_user_token(user.id, user.email, user.name)
    logger.info("user_logged_in", user_id=user.id)
    record_auth_attempt("login", "success")
    return token
