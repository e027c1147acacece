from cosmoport.database.base import Base, TimestampMixin
from cosmoport.database.engine import async_session, engine, sync_engine
from cosmoport.database.session import get_db

__all__ = [
    "Base",
    "TimestampMixin",
    "async_session",
    "engine",
    "sync_engine",
    "get_db",
]
