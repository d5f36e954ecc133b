"""
Pydantic schemas for event participants.
"""

from pydantic import BaseModel


class ParticipantResponse(BaseModel):
    """Public identity of a registered user; never includes the password hash."""

    id: int
    name: str
    email: str

    model_config = {"from_attributes": True}
