"""
Pydantic schemas for chat sessions and messages.
"""
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime
from moodwise.models.chat import MessageSender


class ChatSessionCreate(BaseModel):
    """Schema for session creation. Sessions are anonymous unless a user id is given."""
    user_id: Optional[str] = None


class ChatSessionResponse(BaseModel):
    """Schema for session response."""
    id: str
    user_id: Optional[str] = None
    started_at: datetime
    ended_at: Optional[datetime] = None
    average_mood_score: Optional[float] = None
    last_sentiment: Optional[str] = None

    class Config:
        from_attributes = True


class ChatMessageCreate(BaseModel):
    """Schema for sending a message.

    Both fields are optional here so the route can answer missing values
    with a 400 and a readable message.
    """
    session_id: Optional[str] = None
    content: Optional[str] = None


class ChatMessageResponse(BaseModel):
    """Schema for message response."""
    id: str
    session_id: str
    content: str
    sender: MessageSender
    mood_score: Optional[float] = None
    created_at: datetime

    class Config:
        from_attributes = True


class ChatSessionDetailResponse(BaseModel):
    """Schema for a session with its transcript."""
    session: ChatSessionResponse
    messages: List[ChatMessageResponse] = []


class MoodAnalysisResponse(BaseModel):
    """Mood analysis attached to a chat turn."""
    score: float
    sentiment: str
    summary: str


class ChatTurnResponse(BaseModel):
    """Schema for the result of sending a message."""
    user_message: ChatMessageResponse
    ai_message: ChatMessageResponse
    mood_analysis: MoodAnalysisResponse


class SessionStatsResponse(BaseModel):
    """Derived statistics for a session."""
    session_id: str
    message_count: int
    current_mood_score: float
    average_mood_score: Optional[float] = None
    session_duration: str
    sentiment: str
    mood_level: str
    low_mood_alert: bool
    is_active: bool
