"""
Schemas for data handed to page templates: the root loader payload and
form action results.
"""

from typing import Optional
from pydantic import BaseModel, Field

from planit.schemas.event import EventResponse, GroupResponse
from planit.schemas.user import CurrentUser


class RootData(BaseModel):
    ENV: dict = Field(default_factory=dict)
    current_user: Optional[CurrentUser] = None
    events: list[EventResponse] = Field(default_factory=list)
    groups: list[GroupResponse] = Field(default_factory=list)


class ActionResult(BaseModel):
    status: int
    message: str
