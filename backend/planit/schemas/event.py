"""
Pydantic schemas for events and groups as shown in the shell.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class GroupResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None

    model_config = {"from_attributes": True}


class EventResponse(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    date: datetime
    location: Optional[str] = None
    group_id: int
    group: GroupResponse

    model_config = {"from_attributes": True}
