"""
Shared FastAPI dependencies.
"""
from moodwise.db.session import get_storage
from moodwise.services.groq_service import GroqService, groq_service

__all__ = ["get_storage", "get_ai_service"]


def get_ai_service() -> GroqService:
    """Dependency for the Groq client used by chat routes."""
    return groq_service
