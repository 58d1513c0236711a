"""
Mood entry model for per-user mood tracking.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from moodwise.core.utils import utcnow


@dataclass
class MoodEntry:
    """A mood score recorded for a user on a date."""
    id: str
    user_id: str
    mood_score: float
    date: datetime = field(default_factory=utcnow)
    session_id: Optional[str] = None
    notes: Optional[str] = None
