"""
Chat session and message models.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from moodwise.core.utils import utcnow
import enum


class MessageSender(str, enum.Enum):
    """Who wrote a chat message."""
    USER = "user"
    AI = "ai"


@dataclass
class ChatSession:
    """One conversation. The mood average is refreshed after every turn."""
    id: str
    user_id: Optional[str] = None
    started_at: datetime = field(default_factory=utcnow)
    ended_at: Optional[datetime] = None
    average_mood_score: Optional[float] = None
    last_sentiment: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.ended_at is None


@dataclass(frozen=True)
class ChatMessage:
    """A single turn of the transcript. Never mutated after creation."""
    id: str
    session_id: str
    content: str
    sender: MessageSender
    mood_score: Optional[float] = None
    created_at: datetime = field(default_factory=utcnow)
