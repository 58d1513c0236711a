"""
Application configuration and environment settings.
"""
from pydantic_settings import BaseSettings
from pydantic import AliasChoices, Field, field_validator
from typing import List, Union


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "MoodWise"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # CORS
    CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000", "http://localhost:5173"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # Groq (OpenAI-compatible chat completions)
    GROQ_API_KEY: str = Field(
        default="",
        validation_alias=AliasChoices("GROQ_API_KEY", "VITE_GROQ_API_KEY"),
    )
    GROQ_API_URL: str = "https://api.groq.com/openai/v1"
    GROQ_MODEL: str = "llama3-8b-8192"
    GROQ_REPLY_MAX_TOKENS: int = 500
    GROQ_REPLY_TEMPERATURE: float = 0.7
    GROQ_MOOD_MAX_TOKENS: int = 150
    GROQ_MOOD_TEMPERATURE: float = 0.3  # Lower temperature for stable JSON
    GROQ_TIMEOUT: float = 30.0

    # Chat
    CHAT_HISTORY_LIMIT: int = 10  # Earlier messages sent along with each turn

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
