"""Database package — async SQLAlchemy engine, session factory, Base."""
from atla.db.base import Base, async_session_factory, configure_sqlite, engine, get_db

__all__ = ["Base", "async_session_factory", "configure_sqlite", "engine", "get_db"]
