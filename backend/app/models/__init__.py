from app.models.user import User
from app.models.event import Event, EventStatus
from app.models.participation import Participation, ParticipationStatus

__all__ = ["User", "Event", "EventStatus", "Participation", "ParticipationStatus"]
