"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel, EmailStr
from typing import Optional
from datetime import datetime


class UserUpsert(BaseModel):
    """Schema for creating or replacing a user."""
    email: Optional[EmailStr] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None


class UserResponse(UserUpsert):
    """Schema for user response."""
    id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
