"""
User profile and history routes.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List, Optional
from moodwise.api.dependencies import get_storage
from moodwise.db.storage import MemoryStorage
from moodwise.schemas.chat import ChatMessageResponse
from moodwise.schemas.user import UserUpsert, UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.put("/{user_id}", response_model=UserResponse)
async def upsert_user(
    user_id: str,
    user_data: UserUpsert,
    storage: MemoryStorage = Depends(get_storage)
):
    """Create a user or replace their profile."""
    return storage.upsert_user(
        user_id=user_id,
        email=user_data.email,
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        profile_image_url=user_data.profile_image_url
    )


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    storage: MemoryStorage = Depends(get_storage)
):
    """Get a user profile."""
    user = storage.get_user(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return user


@router.get("/{user_id}/chat-history", response_model=List[ChatMessageResponse])
async def get_chat_history(
    user_id: str,
    limit: Optional[int] = Query(None, ge=1),
    storage: MemoryStorage = Depends(get_storage)
):
    """Messages from all of the user's sessions, newest first."""
    return storage.get_user_chat_history(user_id, limit=limit)
