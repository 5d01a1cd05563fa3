"""SQLAlchemy wiring for the preference table backing the SQL key-value store."""

from .session import Base, get_engine, get_session, reset_engine

__all__ = ["Base", "get_engine", "get_session", "reset_engine"]
