from app.schemas.user import UserCreate, UserResponse, UserLogin, Token, TokenClaims
from app.schemas.event import (
    EventCreate,
    EventUpdate,
    EventResponse,
    EventMutationResponse,
    MessageResponse,
)
from app.schemas.participation import ParticipantResponse

__all__ = [
    "UserCreate", "UserResponse", "UserLogin", "Token", "TokenClaims",
    "EventCreate", "EventUpdate", "EventResponse", "EventMutationResponse", "MessageResponse",
    "ParticipantResponse",
]
