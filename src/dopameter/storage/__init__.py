"""Storage backends for content, votes, favorites and chart series."""

from dopameter.core.settings import Settings

from .base import Storage
from .memory import MemoryStorage
from .sql import SqlStorage

__all__ = ["MemoryStorage", "SqlStorage", "Storage", "build_storage"]


def build_storage(settings: Settings) -> Storage:
    """Return the backend selected by ``STORAGE_BACKEND``."""
    if settings.storage_backend == "sql":
        return SqlStorage.from_url(settings.database_url, echo=settings.sql_debug)
    return MemoryStorage()
