from .database import async_session_maker, async_session_manager, engine, get_async_session
from .settings import settings
from .table_names import TableNames

__all__ = [
    "settings",
    "get_async_session",
    "engine",
    "async_session_maker",
    "async_session_manager",
    "TableNames",
]
