"""
Pydantic schemas for MoodEntry entity.
"""
from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime
from moodwise.core.utils import ensure_aware


class MoodEntryCreate(BaseModel):
    """Schema for mood entry creation. Scores outside 1-10 are clamped on save."""
    user_id: str
    mood_score: float
    session_id: Optional[str] = None
    notes: Optional[str] = None
    date: Optional[datetime] = None

    @field_validator("date")
    @classmethod
    def assume_utc(cls, v):
        return ensure_aware(v)


class MoodEntryResponse(BaseModel):
    """Schema for mood entry response."""
    id: str
    user_id: str
    date: datetime
    mood_score: float
    session_id: Optional[str] = None
    notes: Optional[str] = None

    class Config:
        from_attributes = True


class MoodStatsResponse(BaseModel):
    """Aggregate mood statistics for a user."""
    user_id: str
    average_mood: float
    best_mood: float
    worst_mood: float
    total_entries: int
