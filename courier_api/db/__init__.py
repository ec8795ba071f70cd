"""Database package — async SQLAlchemy engine, session factory, Base."""
from courier_api.db.base import (
    Base,
    async_session_factory,
    dispose_engine,
    get_db,
    get_engine,
)

__all__ = ["Base", "async_session_factory", "dispose_engine", "get_db", "get_engine"]
