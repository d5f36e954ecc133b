"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter
from app.api.routes import users, participants, events

api_router = APIRouter(prefix="/api")
api_router.include_router(users.router)
# Before events: "/events/my-registrations" must not be taken for "/events/{event_id}"
api_router.include_router(participants.router)
api_router.include_router(events.router)
