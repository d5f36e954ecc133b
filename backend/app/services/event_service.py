"""
Event service handling CRUD operations and the ownership check.

OWNERSHIP
=========

Only the user stored in `events.created_by` may update or delete an event,
or list its participants. Every such call does a fresh read of
`WHERE id = :id AND created_by = :user` right before acting; no row means
403, whether the event is missing or owned by someone else.

The UPDATE and DELETE statements repeat the `created_by` predicate, so a
change between the check and the write can never let a non-owner through.
An UPDATE that then matches nothing (the event was deleted in between) is
reported as 403 too. DELETE matching nothing is treated as success.
"""

from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import HTTPException, status

from app.models.event import Event
from app.schemas.event import EventCreate, EventUpdate
from app.core.metrics import record_event_operation, record_ownership_denial
from app.core.logging import get_logger

logger = get_logger(__name__)

FORBIDDEN_DETAILS = {
    "update": "You are not authorized to update this event",
    "delete": "You are not authorized to delete this event",
    "participants": "You are not authorized to view participants of this event",
}


def _forbidden(event_id: int, user_id: int, action: str) -> HTTPException:
    logger.warning("event_access_forbidden", event_id=event_id, user_id=user_id, action=action)
    record_ownership_denial(action)
    return HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail=FORBIDDEN_DETAILS[action],
    )


async def _reload_event(db: AsyncSession, event_id: int) -> Event | None:
    # populate_existing: the identity map may hold the pre-update row
    result = await db.execute(
        select(Event)
        .where(Event.id == event_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def list_events(db: AsyncSession) -> list[Event]:
    """Every event, in store order."""
    result = await db.execute(select(Event).order_by(Event.id))
    return list(result.scalars().all())


async def list_user_events(db: AsyncSession, user_id: int) -> list[Event]:
    """Events created by the given user."""
    result = await db.execute(
        select(Event).where(Event.created_by == user_id).order_by(Event.id)
    )
    return list(result.scalars().all())


async def get_event(db: AsyncSession, event_id: int) -> Event:
    """Get a single event by ID."""
    event = await _reload_event(db, event_id)
    if not event:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Event not found",
        )
    return event


async def get_owned_event(db: AsyncSession, event_id: int, user_id: int, action: str) -> Event:
    """Ownership gate: the event if `user_id` created it, otherwise 403."""
    result = await db.execute(
        select(Event).where(Event.id == event_id, Event.created_by == user_id)
    )
    event = result.scalar_one_or_none()
    if not event:
        raise _forbidden(event_id, user_id, action)
    return event


async def create_event(db: AsyncSession, event_data: EventCreate, user_id: int) -> Event:
    """Create an event owned by `user_id` and return the stored row."""
    event = Event(
        title=event_data.title,
        description=event_data.description,
        date=event_data.date,
        time=event_data.time,
        location=event_data.location,
        image_url=event_data.image_url,
        created_by=user_id,
    )
    db.add(event)
    await db.flush()
    await db.refresh(event)
    await db.commit()

    logger.info("event_created", event_id=event.id, title=event.title, created_by=user_id)
    record_event_operation("create")
    return event


async def update_event(db: AsyncSession, event_id: int, event_data: EventUpdate, user_id: int) -> Event:
    """Replace every mutable field of an owned event."""
    await get_owned_event(db, event_id, user_id, "update")

    values = event_data.model_dump(exclude_unset=False)
    if values["status"] is not None:
        values["status"] = values["status"].value

    result = await db.execute(
        update(Event)
        .where(Event.id == event_id, Event.created_by == user_id)
        .values(**values)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        raise _forbidden(event_id, user_id, "update")

    event = await _reload_event(db, event_id)
    await db.commit()
    logger.info("event_updated", event_id=event_id, user_id=user_id, status=event.status)
    record_event_operation("update")
    return event


async def delete_event(db: AsyncSession, event_id: int, user_id: int) -> None:
    """Delete an owned event. Its participation rows are left in place."""
    await get_owned_event(db, event_id, user_id, "delete")

    result = await db.execute(
        delete(Event)
        .where(Event.id == event_id, Event.created_by == user_id)
        .execution_options(synchronize_session=False)
    )
    await db.commit()
    logger.info("event_deleted", event_id=event_id, user_id=user_id, rows=result.rowcount)
    record_event_operation("delete")
