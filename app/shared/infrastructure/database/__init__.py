"""
Database infrastructure: async SQLAlchemy engine, declarative Base and sessions.
"""

from .connection import (
    close_database,
    database_health_check,
    get_database_engine,
    initialize_database,
)
from .session import get_db_session, initialize_sessions

__all__ = [
    "close_database",
    "database_health_check",
    "get_database_engine",
    "initialize_database",
    "get_db_session",
    "initialize_sessions",
]
