"""
Chat session and message routes.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from typing import Optional
from moodwise.api.dependencies import get_ai_service, get_storage
from moodwise.db.storage import MemoryStorage
from moodwise.schemas.chat import (
    ChatSessionCreate, ChatSessionResponse, ChatSessionDetailResponse,
    ChatMessageCreate, ChatMessageResponse, ChatTurnResponse,
    MoodAnalysisResponse, SessionStatsResponse
)
from moodwise.services.chat_service import process_message
from moodwise.services.groq_service import GroqService
from moodwise.services.stats_service import calculate_session_stats

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


def get_session_or_404(session_id: str, storage: MemoryStorage):
    session = storage.get_chat_session(session_id)
    if not session:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Session not found"
        )
    return session


@router.post("/session", response_model=ChatSessionResponse)
async def create_session(
    session_data: Optional[ChatSessionCreate] = None,
    storage: MemoryStorage = Depends(get_storage)
):
    """Start a chat session (anonymous unless a user id is supplied)."""
    user_id = session_data.user_id if session_data else None
    try:
        return storage.create_chat_session(user_id=user_id)
    except Exception as e:
        logger.error(f"Error creating chat session: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create chat session"
        )


@router.get("/session/{session_id}", response_model=ChatSessionDetailResponse)
async def get_session(
    session_id: str,
    storage: MemoryStorage = Depends(get_storage)
):
    """Get a session together with its messages."""
    session = get_session_or_404(session_id, storage)
    try:
        messages = storage.get_chat_messages(session_id)
        return ChatSessionDetailResponse(
            session=ChatSessionResponse.model_validate(session),
            messages=[ChatMessageResponse.model_validate(m) for m in messages]
        )
    except Exception as e:
        logger.error(f"Error fetching chat session: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch chat session"
        )


@router.get("/session/{session_id}/stats", response_model=SessionStatsResponse)
async def get_session_stats(
    session_id: str,
    storage: MemoryStorage = Depends(get_storage)
):
    """Message count, duration, current mood and sentiment label for a session."""
    session = get_session_or_404(session_id, storage)
    return calculate_session_stats(session, storage.get_chat_messages(session_id))


@router.post("/message", response_model=ChatTurnResponse)
async def send_message(
    message_data: ChatMessageCreate,
    storage: MemoryStorage = Depends(get_storage),
    ai: GroqService = Depends(get_ai_service)
):
    """Send a user message and get the AI reply with a mood analysis."""
    if not message_data.content or not message_data.content.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Message content is required"
        )

    if not message_data.session_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Session ID is required"
        )

    get_session_or_404(message_data.session_id, storage)

    try:
        turn = await process_message(storage, ai, message_data.session_id, message_data.content)
    except Exception as e:
        logger.error(f"Error processing message: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to process message"
        )

    return ChatTurnResponse(
        user_message=ChatMessageResponse.model_validate(turn.user_message),
        ai_message=ChatMessageResponse.model_validate(turn.ai_message),
        mood_analysis=MoodAnalysisResponse(
            score=turn.analysis.mood_score,
            sentiment=turn.analysis.sentiment,
            summary=turn.analysis.summary
        )
    )


@router.delete("/session/{session_id}")
async def end_session(
    session_id: str,
    storage: MemoryStorage = Depends(get_storage)
):
    """End a chat session. Unknown ids are ignored."""
    try:
        storage.end_chat_session(session_id)
    except Exception as e:
        logger.error(f"Error ending chat session: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to end chat session"
        )
    return {"message": "Session ended successfully"}
