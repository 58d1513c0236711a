"""
Storage instance management.
"""
from moodwise.db.storage import MemoryStorage

storage = MemoryStorage()


def get_storage() -> MemoryStorage:
    """Dependency for getting the process-wide storage."""
    return storage


def init_db():
    """Start from an empty store."""
    storage.reset()
