"""
Mood entry service for recording and summarising user moods.
"""
from datetime import datetime
from typing import List, Optional
from moodwise.db.storage import MemoryStorage
from moodwise.models import MoodEntry
from moodwise.schemas.mood import MoodEntryCreate, MoodStatsResponse


def record_mood_entry(entry_data: MoodEntryCreate, storage: MemoryStorage) -> MoodEntry:
    """Store a mood entry; date defaults to now."""
    return storage.create_mood_entry(
        user_id=entry_data.user_id,
        mood_score=entry_data.mood_score,
        session_id=entry_data.session_id,
        notes=entry_data.notes,
        date=entry_data.date,
    )


def list_mood_entries(
    user_id: str,
    storage: MemoryStorage,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
) -> List[MoodEntry]:
    return storage.get_user_mood_entries(user_id, start_date, end_date)


def get_mood_stats(user_id: str, storage: MemoryStorage) -> MoodStatsResponse:
    stats = storage.get_user_mood_stats(user_id)
    return MoodStatsResponse(user_id=user_id, **stats)
