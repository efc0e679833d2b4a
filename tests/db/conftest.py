"""Test database configuration and fixtures.

Repository tests run against an in-memory SQLite database by default;
set TEST_DATABASE_URL to run them against PostgreSQL.
"""

import os
from datetime import datetime, timedelta
from typing import Generator

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import atelier.models  # noqa: F401  (registers tables)

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite://")

BASE_TIME = datetime(2024, 1, 15, 12, 0, 0)


@pytest.fixture
def db_engine():  # type: ignore[no-untyped-def]
    """Create a test database engine with every table."""
    if TEST_DATABASE_URL.startswith("sqlite"):
        engine = create_engine(
            TEST_DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(TEST_DATABASE_URL, echo=False)

    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def db_session(db_engine) -> Generator[Session, None, None]:  # type: ignore[no-untyped-def]
    """Create a database session with automatic rollback."""
    with Session(db_engine) as session:
        yield session
        session.rollback()


@pytest.fixture
def at():
    """Timestamp helper: minutes after a fixed base time."""

    def factory(minutes: int) -> datetime:
        return BASE_TIME + timedelta(minutes=minutes)

    return factory
