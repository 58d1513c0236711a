"""
Mood entry routes.
"""
from datetime import datetime
from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional
from moodwise.api.dependencies import get_storage
from moodwise.core.utils import ensure_aware
from moodwise.db.storage import MemoryStorage
from moodwise.schemas.mood import MoodEntryCreate, MoodEntryResponse, MoodStatsResponse
from moodwise.services.mood_service import get_mood_stats, list_mood_entries, record_mood_entry

router = APIRouter(prefix="/moods", tags=["moods"])


@router.post("", response_model=MoodEntryResponse, status_code=status.HTTP_201_CREATED)
async def create_mood_entry(
    entry_data: MoodEntryCreate,
    storage: MemoryStorage = Depends(get_storage)
):
    """Record a mood entry for a user."""
    return record_mood_entry(entry_data, storage)


@router.get("/{user_id}", response_model=List[MoodEntryResponse])
async def get_mood_entries(
    user_id: str,
    start: Optional[datetime] = Query(None),
    end: Optional[datetime] = Query(None),
    storage: MemoryStorage = Depends(get_storage)
):
    """List a user's mood entries by date. The range applies only when both bounds are given."""
    return list_mood_entries(user_id, storage, ensure_aware(start), ensure_aware(end))


@router.get("/{user_id}/stats", response_model=MoodStatsResponse)
async def get_mood_entry_stats(
    user_id: str,
    storage: MemoryStorage = Depends(get_storage)
):
    """Average, best and worst mood over all of a user's entries."""
    return get_mood_stats(user_id, storage)
