"""Database engine and session handling."""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from .config import settings

logger = logging.getLogger(__name__)

_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get or create the global database engine."""
    global _engine
    if _engine is None:
        _engine = create_engine(settings.database_url, echo=settings.sql_echo)
        logger.info(f"Created database engine for {_engine.url.render_as_string()}")
    return _engine


def get_db() -> Iterator[Session]:
    """FastAPI dependency yielding a session."""
    with Session(get_engine()) as session:
        yield session


@contextmanager
def get_db_session() -> Iterator[Session]:
    """Context manager yielding a session, for CLI and scripts."""
    with Session(get_engine()) as session:
        yield session


__all__ = ["get_db", "get_db_session", "get_engine", "settings"]
