"""Models package - stored record types."""
from moodwise.models.user import User
from moodwise.models.chat import ChatSession, ChatMessage, MessageSender
from moodwise.models.mood import MoodEntry

__all__ = [
    "User",
    "ChatSession",
    "ChatMessage",
    "MessageSender",
    "MoodEntry",
]
