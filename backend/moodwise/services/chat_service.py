"""
Chat service for the per-turn message flow.
"""
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple
from moodwise.core.config import settings
from moodwise.db.storage import MemoryStorage
from moodwise.models import ChatMessage, MessageSender
from moodwise.services.groq_service import AIAnalysis, GroqService

logger = logging.getLogger(__name__)

_ROLE_BY_SENDER = {
    MessageSender.USER: "user",
    MessageSender.AI: "assistant",
}


@dataclass
class ChatTurn:
    user_message: ChatMessage
    ai_message: ChatMessage
    analysis: AIAnalysis


def calculate_average_mood(messages: Iterable[ChatMessage]) -> Optional[float]:
    """Arithmetic mean of every numeric mood score, or None when there are none."""
    scores = [m.mood_score for m in messages if m.mood_score is not None]
    if not scores:
        return None
    return sum(scores) / len(scores)


def build_conversation_history(messages: List[ChatMessage], limit: int) -> List[Tuple[str, str]]:
    """Last `limit` messages as (role, content) pairs for the completion request."""
    if limit <= 0:
        return []
    return [(_ROLE_BY_SENDER[m.sender], m.content) for m in messages[-limit:]]


async def process_message(
    storage: MemoryStorage,
    ai: GroqService,
    session_id: str,
    content: str,
) -> ChatTurn:
    """
    Run one chat turn.

    Stores the user message, asks the AI for a reply and a mood score,
    stores the AI message with that score and refreshes the session average.
    """
    content = content.strip()
    history = build_conversation_history(
        storage.get_chat_messages(session_id),
        settings.CHAT_HISTORY_LIMIT,
    )

    user_message = storage.create_chat_message(
        session_id=session_id,
        content=content,
        sender=MessageSender.USER,
    )

    analysis = await ai.analyze_message_and_respond(content, history)

    ai_message = storage.create_chat_message(
        session_id=session_id,
        content=analysis.response,
        sender=MessageSender.AI,
        mood_score=analysis.mood_score,
    )

    storage.update_chat_session_sentiment(session_id, analysis.sentiment)
    average = calculate_average_mood(storage.get_chat_messages(session_id))
    if average is not None:
        storage.update_chat_session_mood_score(session_id, average)
        logger.debug(f"Session {session_id} mood average is now {average:.2f}")

    return ChatTurn(user_message=user_message, ai_message=ai_message, analysis=analysis)
