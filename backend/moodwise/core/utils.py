"""
Utility functions for the application.
"""
from datetime import datetime, timezone
import random
import string
import time
from typing import Optional

_ID_ALPHABET = string.digits + string.ascii_lowercase


def generate_id(prefix: str) -> str:
    """Generate a record id like ``session_1718000000000_k3j9x0q2a``."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"{prefix}_{int(time.time() * 1000)}_{suffix}"


def utcnow() -> datetime:
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value into the closed range [lower, upper]."""
    return max(lower, min(upper, value))


def clamp_mood_score(score: float) -> float:
    """Mood scores always live on the 1-10 scale."""
    return clamp(float(score), 1.0, 10.0)


def ensure_aware(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC so they compare with stored timestamps."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
