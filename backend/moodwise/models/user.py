"""
User model for in-memory storage.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from moodwise.core.utils import utcnow


@dataclass
class User:
    """User record; every profile field is optional."""
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)
