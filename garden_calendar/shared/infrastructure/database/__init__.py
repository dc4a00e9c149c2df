# 📄 File: garden_calendar/shared/infrastructure/database/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Everything needed to open, share and close database connections.
#
# 🧪 Purpose (Technical Summary):
# Database package exports: declarative Base, engine lifecycle and session dependency.

from .connection import Base, close_database, get_database_engine, init_database
from .session import get_db_session, initialize_sessions, session_manager

__all__ = [
    "Base",
    "close_database",
    "get_database_engine",
    "init_database",
    "get_db_session",
    "initialize_sessions",
    "session_manager",
]
