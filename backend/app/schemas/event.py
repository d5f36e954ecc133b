"""
Pydantic schemas for event-related request/response validation.
"""

from datetime import date as date_type, time as time_type
from typing import Optional
from pydantic import BaseModel, Field

from app.models.event import EventStatus


class EventCreate(BaseModel):
    title: str = Field(..., max_length=255)
    description: Optional[str] = None
    date: date_type
    time: time_type
    location: Optional[str] = Field(None, max_length=255)
    image_url: Optional[str] = Field(None, max_length=255)


class EventUpdate(BaseModel):
    """
    Full replacement of every mutable field.

    Fields left out of the body are written as NULL, so clients must resend
    the whole event. NULL in a NOT NULL column fails at the store.
    """

    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    date: Optional[date_type] = None
    time: Optional[time_type] = None
    location: Optional[str] = Field(None, max_length=255)
    image_url: Optional[str] = Field(None, max_length=255)
    status: Optional[EventStatus] = None


class EventResponse(BaseModel):
    id: int
    title: str
    description: Optional[str]
    date: date_type
    time: time_type
    location: Optional[str]
    image_url: Optional[str]
    created_by: int
    status: EventStatus

    model_config = {"from_attributes": True}


class EventMutationResponse(BaseModel):
    message: str
    event: EventResponse


class MessageResponse(BaseModel):
    message: str
