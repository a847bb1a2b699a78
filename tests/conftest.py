"""
Fixtures shared by the repository, service and HTTP tests.

All of them talk to one in-memory SQLite database. StaticPool keeps a single connection alive,
so the `games` table survives across sessions (and across the TestClient's worker thread).
"""

from typing import Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base

engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Session on an empty `games` table. The table is dropped afterwards, so every test starts with no recorded outcomes."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
