"""
Session statistics shown next to the chat transcript.
"""
from datetime import datetime
from typing import List, Optional
from moodwise.core.utils import utcnow
from moodwise.models import ChatMessage, ChatSession, MessageSender
from moodwise.schemas.chat import SessionStatsResponse

DEFAULT_MOOD_SCORE = 5.0
LOW_MOOD_THRESHOLD = 4.0

SENTIMENT_LABELS = {
    "very_positive": "Very Happy",
    "positive": "Happy",
    "slightly_positive": "Good",
    "neutral": "Neutral",
    "slightly_negative": "Concerned",
    "negative": "Worried",
    "very_negative": "Distressed",
}


def get_sentiment_label(sentiment: Optional[str]) -> str:
    return SENTIMENT_LABELS.get(sentiment, "Neutral")


def sentiment_for_score(score: float) -> str:
    """Bucket a 1-10 score into one of the seven sentiment names.

    Only used before the model has reported a sentiment for the session.
    """
    if score < 2.5:
        return "very_negative"
    if score < 3.5:
        return "negative"
    if score < 4.5:
        return "slightly_negative"
    if score < 5.5:
        return "neutral"
    if score < 6.5:
        return "slightly_positive"
    if score < 8.5:
        return "positive"
    return "very_positive"


def get_mood_level(score: float) -> str:
    if score >= 8:
        return "high"
    if score >= 6:
        return "good"
    if score >= 4:
        return "moderate"
    return "low"


def format_duration(started_at: datetime, ended_at: Optional[datetime] = None) -> str:
    """Whole minutes between start and end (or now), e.g. ``12 min``."""
    end = ended_at or utcnow()
    minutes = max(0, int((end - started_at).total_seconds() // 60))
    return f"{minutes} min"


def calculate_session_stats(session: ChatSession, messages: List[ChatMessage]) -> SessionStatsResponse:
    """Derive the sidebar statistics for a session from its transcript."""
    user_turns = [m for m in messages if m.sender == MessageSender.USER]
    scored = [m for m in messages if m.sender == MessageSender.AI and m.mood_score is not None]
    current_score = scored[-1].mood_score if scored else DEFAULT_MOOD_SCORE
    sentiment = session.last_sentiment or sentiment_for_score(current_score)

    return SessionStatsResponse(
        session_id=session.id,
        message_count=len(user_turns),
        current_mood_score=current_score,
        average_mood_score=session.average_mood_score,
        session_duration=format_duration(session.started_at, session.ended_at),
        sentiment=get_sentiment_label(sentiment),
        mood_level=get_mood_level(current_score),
        low_mood_alert=current_score < LOW_MOOD_THRESHOLD,
        is_active=session.is_active,
    )
