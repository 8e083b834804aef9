"""Session management models."""

from datetime import datetime
from typing import NewType

from pydantic import BaseModel, Field

from chatbff.utils import now

SessionId = NewType("SessionId", str)


class Session(BaseModel):
    """Authenticated browser session.

    Lives only in process memory; expires a fixed TTL after created_at.
    """

    id: SessionId
    email: str
    created_at: datetime = Field(default_factory=now)


class User(BaseModel):
    """Identity exposed to the frontend."""

    email: str = Field(..., description="Lowercased email address of the signed-in user")
