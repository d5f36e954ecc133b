"""
Pydantic schemas for user-related request/response validation.
"""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)


class UserLogin(BaseModel):
    # Any string: an unknown or odd-looking email is a failed login, not a 422
    email: str
    password: str


class UserResponse(BaseModel):
    id: int
    name: str
    email: str

    model_config = {"from_attributes": True}


class Token(BaseModel):
    token: str
    token_type: str = "bearer"


class TokenClaims(BaseModel):
    """Identity decoded from a verified bearer token."""

    id: int
    email: str
    name: str
    iat: int | None = None
    exp: int | None = None
