"""
Event model.

Key design decisions:
- `created_by` is a plain integer reference to users.id, fixed at creation
- No foreign keys: deleting a user or an event never cascades
- `status` is a short string guarded by a CHECK constraint
"""

import enum

from sqlalchemy import Column, Integer, String, Text, Date, Time, Index, CheckConstraint

from app.db.base import Base


class EventStatus(str, enum.Enum):
    UPCOMING = "upcoming"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    date = Column(Date, nullable=False)
    time = Column(Time, nullable=False)
    location = Column(String(255), nullable=True)
    image_url = Column(String(255), nullable=True)
    created_by = Column(Integer, nullable=False)
    status = Column(
        String(20),
        nullable=False,
        default=EventStatus.UPCOMING.value,
        server_default=EventStatus.UPCOMING.value,
    )

    __table_args__ = (
        CheckConstraint(
            "status IN ('upcoming', 'completed', 'cancelled')",
            name="check_event_status",
        ),
        # Dashboard query: events owned by the caller
        Index("ix_events_created_by", "created_by"),
    )

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, title={self.title}, owner={self.created_by}, status={self.status})>"
