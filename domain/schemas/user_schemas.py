from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime
from uuid import UUID


class UserCreate(BaseModel):
    """Registration payload"""

    name: str = Field(..., min_length=1, description="Display name")
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserLogin(BaseModel):
    """Login payload"""

    email: EmailStr
    password: str


class UserResponse(BaseModel):
    """Schema for user responses (password hash is never serialised)"""

    id: UUID
    session_id: Optional[str] = None
    name: str
    email: str
    created_at: datetime

    model_config = {"from_attributes": True}
