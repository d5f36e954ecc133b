"""
Event registration and participant endpoints.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.api.deps import get_current_user_id
from app.schemas.event import EventResponse
from app.schemas.participation import ParticipantResponse
from app.services.participation_service import (
    register_for_event,
    list_user_registrations,
    list_participants,
)

router = APIRouter(prefix="/events", tags=["Participants"])


@router.get("/my-registrations", response_model=list[EventResponse])
async def my_registrations(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Events the authenticated user has registered for."""
    return await list_user_registrations(db, user_id)


@router.post("/{event_id}/register", response_class=PlainTextResponse)
async def register_endpoint(
    event_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Register the authenticated user for an event."""
    await register_for_event(db, event_id, user_id)
    return "Registered for event successfully"


@router.get("/{event_id}/participants", response_model=list[ParticipantResponse])
async def participants_endpoint(
    event_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Name and email of everyone registered. Only the event's creator may view."""
    return await list_participants(db, event_id, user_id)
