"""
Participation service: event registration and participant listings.

Registration does not check that the event exists; a row pointing at a
missing event simply never shows up in the joins below. What happens on a
repeat registration depends on DUPLICATE_REGISTRATION_POLICY:

  allow   every call inserts a new row
  ignore  an existing registration is returned and nothing is inserted
  reject  an existing registration is a 409
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import HTTPException, status

from app.models.event import Event
from app.models.participation import Participation
from app.models.user import User
from app.services.event_service import get_owned_event
from app.core.config import get_settings
from app.core.metrics import record_registration
from app.core.logging import get_logger

logger = get_logger(__name__)


async def _find_registration(db: AsyncSession, event_id: int, user_id: int) -> Participation | None:
    result = await db.execute(
        select(Participation)
        .where(Participation.event_id == event_id, Participation.user_id == user_id)
        .order_by(Participation.id)
        .limit(1)
    )
    return result.scalar_one_or_none()


async def register_for_event(
    db: AsyncSession,
    event_id: int,
    user_id: int,
    policy: str | None = None,
) -> Participation:
    """Record that `user_id` registered for `event_id`."""
    policy = policy or get_settings().DUPLICATE_REGISTRATION_POLICY

    if policy != "allow":
        existing = await _find_registration(db, event_id, user_id)
        if existing and policy == "reject":
            logger.warning("registration_rejected", event_id=event_id, user_id=user_id)
            record_registration("rejected")
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="You are already registered for this event",
            )
        if existing:
            logger.info("registration_ignored", event_id=event_id, user_id=user_id)
            record_registration("ignored")
            return existing

    participation = Participation(event_id=event_id, user_id=user_id)
    db.add(participation)
    await db.flush()
    await db.refresh(participation)
    await db.commit()

    logger.info(
        "event_registration_created",
        participation_id=participation.id,
        event_id=event_id,
        user_id=user_id,
    )
    record_registration("created")
    return participation


async def list_user_registrations(db: AsyncSession, user_id: int) -> list[Event]:
    """Events the user registered for, one entry per registration."""
    result = await db.execute(
        select(Event)
        .join(Participation, Participation.event_id == Event.id)
        .where(Participation.user_id == user_id)
        .order_by(Participation.id)
    )
    # unique() is not applied: repeat registrations are listed as-is
    return list(result.scalars().all())


async def list_participants(db: AsyncSession, event_id: int, user_id: int) -> list:
    """Users registered for an event. Only the event's creator may ask."""
    await get_owned_event(db, event_id, user_id, "participants")

    result = await db.execute(
        select(User.id, User.name, User.email)
        .join(Participation, Participation.user_id == User.id)
        .where(Participation.event_id == event_id)
        .order_by(Participation.id)
    )
    return list(result.all())
