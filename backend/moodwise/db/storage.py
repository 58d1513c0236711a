"""
In-memory storage for users, chat sessions, messages and mood entries.

Everything lives in plain dicts keyed by generated string ids and is lost
when the process exits.
"""
import logging
from datetime import datetime
from typing import Dict, List, Optional, Union
from moodwise.core.utils import clamp_mood_score, generate_id, utcnow
from moodwise.models import ChatMessage, ChatSession, MessageSender, MoodEntry, User

logger = logging.getLogger(__name__)


class MemoryStorage:
    """Dict-backed CRUD layer. No transactions, no indexes beyond key lookup."""

    def __init__(self):
        self.users: Dict[str, User] = {}
        self.chat_sessions: Dict[str, ChatSession] = {}
        self.chat_messages: Dict[str, List[ChatMessage]] = {}
        self.mood_entries: Dict[str, List[MoodEntry]] = {}

    def reset(self) -> None:
        """Drop every stored record."""
        self.users.clear()
        self.chat_sessions.clear()
        self.chat_messages.clear()
        self.mood_entries.clear()

    # User operations

    def get_user(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def upsert_user(
        self,
        user_id: str,
        email: Optional[str] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        profile_image_url: Optional[str] = None,
    ) -> User:
        """Create or replace a user, keeping the first created_at."""
        existing = self.users.get(user_id)
        now = utcnow()
        user = User(
            id=user_id,
            email=email,
            first_name=first_name,
            last_name=last_name,
            profile_image_url=profile_image_url,
            created_at=existing.created_at if existing else now,
            updated_at=now,
        )
        self.users[user_id] = user
        return user

    # Chat session operations

    def create_chat_session(self, user_id: Optional[str] = None) -> ChatSession:
        session = ChatSession(id=generate_id("session"), user_id=user_id)
        self.chat_sessions[session.id] = session
        logger.debug(f"Created chat session {session.id}")
        return session

    def get_chat_session(self, session_id: str) -> Optional[ChatSession]:
        return self.chat_sessions.get(session_id)

    def update_chat_session_mood_score(self, session_id: str, average_mood_score: float) -> None:
        session = self.chat_sessions.get(session_id)
        if session:
            session.average_mood_score = average_mood_score

    def update_chat_session_sentiment(self, session_id: str, sentiment: str) -> None:
        session = self.chat_sessions.get(session_id)
        if session:
            session.last_sentiment = sentiment

    def end_chat_session(self, session_id: str) -> None:
        session = self.chat_sessions.get(session_id)
        if session:
            session.ended_at = utcnow()

    def delete_chat_session_and_messages(self, session_id: str) -> None:
        self.chat_messages.pop(session_id, None)
        self.chat_sessions.pop(session_id, None)

    # Chat message operations

    def create_chat_message(
        self,
        session_id: str,
        content: str,
        sender: Union[MessageSender, str],
        mood_score: Optional[float] = None,
    ) -> ChatMessage:
        """
        Append a message to a session transcript.

        Raises:
            ValueError: if sender is not "user" or "ai"
        """
        message = ChatMessage(
            id=generate_id("msg"),
            session_id=session_id,
            content=content,
            sender=MessageSender(sender),
            mood_score=clamp_mood_score(mood_score) if mood_score is not None else None,
        )
        self.chat_messages.setdefault(session_id, []).append(message)
        return message

    def get_chat_messages(self, session_id: str) -> List[ChatMessage]:
        return list(self.chat_messages.get(session_id, []))

    def get_user_chat_history(self, user_id: str, limit: Optional[int] = None) -> List[ChatMessage]:
        """All messages from the user's sessions, newest first."""
        history: List[ChatMessage] = []
        for session_id, messages in self.chat_messages.items():
            session = self.chat_sessions.get(session_id)
            if session and session.user_id == user_id:
                history.extend(messages)

        history.sort(key=lambda m: m.created_at, reverse=True)
        return history[:limit] if limit else history

    # Mood entry operations

    def create_mood_entry(
        self,
        user_id: str,
        mood_score: float,
        session_id: Optional[str] = None,
        notes: Optional[str] = None,
        date: Optional[datetime] = None,
    ) -> MoodEntry:
        entry = MoodEntry(
            id=generate_id("mood"),
            user_id=user_id,
            mood_score=clamp_mood_score(mood_score),
            date=date or utcnow(),
            session_id=session_id,
            notes=notes,
        )
        self.mood_entries.setdefault(user_id, []).append(entry)
        return entry

    def get_user_mood_entries(
        self,
        user_id: str,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> List[MoodEntry]:
        """Entries sorted by date; filtered inclusively only when both bounds are given."""
        entries = self.mood_entries.get(user_id, [])
        if start_date and end_date:
            entries = [e for e in entries if start_date <= e.date <= end_date]
        return sorted(entries, key=lambda e: e.date)

    def get_user_mood_stats(self, user_id: str) -> Dict[str, float]:
        entries = self.mood_entries.get(user_id, [])
        if not entries:
            return {
                "average_mood": 0,
                "best_mood": 0,
                "worst_mood": 0,
                "total_entries": 0,
            }

        scores = [e.mood_score for e in entries]
        return {
            "average_mood": sum(scores) / len(scores),
            "best_mood": max(scores),
            "worst_mood": min(scores),
            "total_entries": len(entries),
        }
