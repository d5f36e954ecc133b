"""
Event endpoints. Reads are public; writes require a token, and updates
and deletes additionally require ownership.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.api.deps import get_current_user_id
from app.schemas.event import (
    EventCreate,
    EventUpdate,
    EventResponse,
    EventMutationResponse,
    MessageResponse,
)
from app.services.event_service import (
    create_event,
    delete_event,
    get_event,
    list_events,
    list_user_events,
    update_event,
)

router = APIRouter(prefix="/events", tags=["Events"])


@router.get("", response_model=list[EventResponse])
async def list_events_endpoint(db: AsyncSession = Depends(get_db)):
    """List every event."""
    return await list_events(db)


@router.get("/my-events", response_model=list[EventResponse])
async def my_events_endpoint(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Events created by the authenticated user."""
    return await list_user_events(db, user_id)


@router.get("/{event_id}", response_model=EventResponse)
async def get_event_endpoint(event_id: int, db: AsyncSession = Depends(get_db)):
    return await get_event(db, event_id)


@router.post("", response_model=EventMutationResponse, status_code=status.HTTP_201_CREATED)
async def create_event_endpoint(
    event_data: EventCreate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Create a new event owned by the caller. Any `created_by` in the body is ignored."""
    event = await create_event(db, event_data, user_id)
    return EventMutationResponse(
        message="Event created successfully",
        event=EventResponse.model_validate(event),
    )


@router.patch("/{event_id}", response_model=EventMutationResponse)
async def update_event_endpoint(
    event_id: int,
    event_data: EventUpdate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """
    Replace all fields of an event you created.
    Every field must be sent; missing ones are stored as null.
    """
    event = await update_event(db, event_id, event_data, user_id)
    return EventMutationResponse(
        message="Event updated successfully",
        event=EventResponse.model_validate(event),
    )


@router.delete("/{event_id}", response_model=MessageResponse)
async def delete_event_endpoint(
    event_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Delete an event you created."""
    await delete_event(db, event_id, user_id)
    return MessageResponse(message="Event deleted successfully")
