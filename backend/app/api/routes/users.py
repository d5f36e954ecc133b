"""
User endpoints: register, login and profile.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.api.deps import get_current_user
from app.schemas.user import UserCreate, UserResponse, UserLogin, Token, TokenClaims
from app.services.auth_service import register_user, authenticate_user

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(user_data: UserCreate, db: AsyncSession = Depends(get_db)):
    """Register a new user account."""
    user = await register_user(db, user_data)
    return user


@router.post("/login", response_model=Token)
async def login(login_data: UserLogin, db: AsyncSession = Depends(get_db)):
    """Authenticate and receive a bearer token valid for 24 hours."""
    token = await authenticate_user(db, login_data)
    return Token(token=token)


@router.get("/profile", response_model=TokenClaims)
async def profile(user: TokenClaims = Depends(get_current_user)):
    """Return the identity decoded from the caller's token."""
    return user
