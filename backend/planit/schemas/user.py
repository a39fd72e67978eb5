"""
Pydantic schemas for user-related form validation and display.
"""

from typing import Optional
from pydantic import BaseModel, EmailStr, Field


class SignupData(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    name: Optional[str] = Field(None, max_length=100)


class CurrentUser(BaseModel):
    id: int
    email: str
    name: Optional[str] = None

    model_config = {"from_attributes": True}

    @property
    def display_name(self) -> str:
        return self.name or self.email
