"""
Logging setup shared by the API process.
"""
import logging
from moodwise.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = None) -> None:
    """Configure root logging once, using LOG_LEVEL unless a level is given."""
    level_name = (level or settings.LOG_LEVEL).upper()
    if settings.DEBUG:
        level_name = "DEBUG"
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
