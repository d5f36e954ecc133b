"""
Participation model linking a user to an event they registered for.

There is no unique constraint on (event_id, user_id);
repeat registrations are governed by DUPLICATE_REGISTRATION_POLICY.
"""

import enum

from sqlalchemy import Column, Integer, String, DateTime, Index, CheckConstraint, func

from app.db.base import Base


class ParticipationStatus(str, enum.Enum):
    REGISTERED = "registered"
    CANCELLED = "cancelled"
    ATTENDED = "attended"


class Participation(Base):
    __tablename__ = "event_participants"

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(Integer, nullable=False)
    user_id = Column(Integer, nullable=False)
    registration_date = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    status = Column(
        String(20),
        nullable=False,
        default=ParticipationStatus.REGISTERED.value,
        server_default=ParticipationStatus.REGISTERED.value,
    )

    __table_args__ = (
        CheckConstraint(
            "status IN ('registered', 'cancelled', 'attended')",
            name="check_participation_status",
        ),
        Index("ix_event_participants_event_id", "event_id"),
        Index("ix_event_participants_user_id", "user_id"),
    )

    def __repr__(self) -> str:
        return f"<Participation(id={self.id}, user={self.user_id}, event={self.event_id}, status={self.status})>"
