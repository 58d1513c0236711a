"""
Groq chat-completions client.

Every user turn makes two calls to the OpenAI-compatible Groq API:
1. A conversational reply from the MoodWise persona
2. A JSON mood classification of the user's message

Both run concurrently and each one falls back to a neutral default on any
failure (network, HTTP status, malformed JSON). Nothing is retried.
"""
import asyncio
import json
import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple
import httpx
from moodwise.core.config import settings
from moodwise.core.utils import clamp

logger = logging.getLogger(__name__)

SENTIMENTS = [
    "very_negative",
    "negative",
    "slightly_negative",
    "neutral",
    "slightly_positive",
    "positive",
    "very_positive",
]

DEFAULT_MOOD_SCORE = 5.0
DEFAULT_SENTIMENT = "neutral"
DEFAULT_CONFIDENCE = 0.5
FALLBACK_CONFIDENCE = 0.1

FALLBACK_REPLY = "I'm here to listen. Could you tell me a bit more about how you're feeling?"
EMPTY_REPLY = "I'm having trouble responding right now. Could you try again?"

REPLY_SYSTEM_PROMPT = """You are MoodWise, a compassionate AI companion specialized in mood tracking and emotional wellness.
Your role is to:
1. Listen empathetically to users' feelings and experiences
2. Ask thoughtful follow-up questions to understand their emotional state
3. Provide gentle support and wellness tips when appropriate
4. Help users reflect on their emotions without being clinical or providing medical advice
5. Keep responses conversational, warm, and supportive

Always respond with empathy and understanding. Focus on emotional wellness and helping users process their feelings."""

MOOD_SYSTEM_PROMPT = """You are an expert mood analyzer. Analyze the emotional content of the user's message and respond with a JSON object containing:
{
  "score": number (1-10 scale where 1 is very negative, 5 is neutral, 10 is very positive),
  "sentiment": string (one of: "very_negative", "negative", "slightly_negative", "neutral", "slightly_positive", "positive", "very_positive"),
  "confidence": number (0-1 scale indicating confidence in the analysis)
}

Consider factors like:
- Emotional words and phrases
- Context and implications
- Overall tone
- Stress indicators
- Positive or negative experiences mentioned

Only respond with the JSON object, no other text."""


class GroqAPIError(Exception):
    """Raised internally when the provider cannot produce a usable completion."""


@dataclass
class MoodAnalysis:
    score: float
    sentiment: str
    confidence: float


@dataclass
class AIAnalysis:
    response: str
    mood_score: float
    sentiment: str
    summary: str


def format_mood_summary(score: float, sentiment: str) -> str:
    """Human-readable one-liner, e.g. ``Mood: 7/10 (positive)``."""
    return f"Mood: {score:g}/10 ({sentiment})"


def _as_number(value) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def parse_mood_analysis(content: str) -> MoodAnalysis:
    """
    Turn the model's JSON answer into a validated MoodAnalysis.

    Missing or zero scores become 5, scores are clamped to [1, 10], unknown
    sentiments become "neutral" and confidence is clamped to [0, 1].

    Raises:
        ValueError: if content is not a JSON object
    """
    analysis = json.loads(content or "{}")
    if not isinstance(analysis, dict):
        raise ValueError(f"Expected a JSON object, got {type(analysis).__name__}")

    score = _as_number(analysis.get("score")) or DEFAULT_MOOD_SCORE
    sentiment = analysis.get("sentiment")
    if sentiment not in SENTIMENTS:
        sentiment = DEFAULT_SENTIMENT
    confidence = _as_number(analysis.get("confidence")) or DEFAULT_CONFIDENCE

    return MoodAnalysis(
        score=clamp(score, 1.0, 10.0),
        sentiment=sentiment,
        confidence=clamp(confidence, 0.0, 1.0),
    )


class GroqService:
    """Async client for the two MoodWise completions."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = settings.GROQ_API_KEY if api_key is None else api_key
        self.base_url = (base_url or settings.GROQ_API_URL).rstrip("/")
        self.model = model or settings.GROQ_MODEL
        self.timeout = timeout or settings.GROQ_TIMEOUT
        self.transport = transport

        if not self.api_key:
            logger.warning("GROQ_API_KEY not configured. AI replies will use fallback responses.")

    async def _chat_completion(self, messages: List[dict], max_tokens: int, temperature: float) -> str:
        """POST /chat/completions and return the first choice's content ("" when absent)."""
        if not self.api_key:
            raise GroqAPIError("GROQ_API_KEY is not configured")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(
                f"{self.base_url}/chat/completions",
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                json={
                    "model": self.model,
                    "messages": messages,
                    "max_tokens": max_tokens,
                    "temperature": temperature,
                },
            )

        if not response.is_success:
            raise GroqAPIError(f"Groq API error: {response.status_code} {response.reason_phrase}")

        data = response.json()
        choices = data.get("choices") or [{}]
        content = (choices[0].get("message") or {}).get("content")
        if content is None:
            return ""
        if not isinstance(content, str):
            raise GroqAPIError(f"Unexpected completion content type: {type(content).__name__}")
        return content

    async def generate_response(
        self,
        message: str,
        conversation_history: Iterable[Tuple[str, str]] = (),
    ) -> str:
        """
        Generate the empathetic reply to a user message.

        Args:
            message: The user's new message
            conversation_history: Earlier (role, content) pairs, oldest first

        Returns:
            Reply text, or FALLBACK_REPLY if the provider call fails
        """
        messages = [{"role": "system", "content": REPLY_SYSTEM_PROMPT}]
        messages.extend({"role": role, "content": content} for role, content in conversation_history)
        messages.append({"role": "user", "content": message})

        try:
            content = await self._chat_completion(
                messages,
                max_tokens=settings.GROQ_REPLY_MAX_TOKENS,
                temperature=settings.GROQ_REPLY_TEMPERATURE,
            )
        except httpx.TimeoutException:
            logger.error("Groq reply request timed out. Using fallback reply.")
            return FALLBACK_REPLY
        except Exception as e:
            logger.error(f"Error generating AI response: {e}")
            return FALLBACK_REPLY

        return content.strip() or EMPTY_REPLY

    async def analyze_mood(self, message: str) -> MoodAnalysis:
        """Classify the mood of a message; neutral with low confidence on failure."""
        messages = [
            {"role": "system", "content": MOOD_SYSTEM_PROMPT},
            {"role": "user", "content": message},
        ]

        try:
            content = await self._chat_completion(
                messages,
                max_tokens=settings.GROQ_MOOD_MAX_TOKENS,
                temperature=settings.GROQ_MOOD_TEMPERATURE,
            )
            return parse_mood_analysis(content)
        except Exception as e:
            logger.error(f"Error analyzing mood: {e}")
            return MoodAnalysis(
                score=DEFAULT_MOOD_SCORE,
                sentiment=DEFAULT_SENTIMENT,
                confidence=FALLBACK_CONFIDENCE,
            )

    async def analyze_message_and_respond(
        self,
        message: str,
        conversation_history: Iterable[Tuple[str, str]] = (),
    ) -> AIAnalysis:
        """Get the reply and the mood analysis in parallel."""
        response, mood = await asyncio.gather(
            self.generate_response(message, conversation_history),
            self.analyze_mood(message),
        )

        return AIAnalysis(
            response=response,
            mood_score=mood.score,
            sentiment=mood.sentiment,
            summary=format_mood_summary(mood.score, mood.sentiment),
        )


groq_service = GroqService()
