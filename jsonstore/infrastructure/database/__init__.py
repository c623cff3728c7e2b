from .base import Base
from .models import JsonRecordModel
from .session import Database, get_database, get_db_session

__all__ = [
    "Base",
    "Database",
    "JsonRecordModel",
    "get_database",
    "get_db_session",
]
